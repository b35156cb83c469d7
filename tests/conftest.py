"""Shared fixtures for the Stylit test suite."""

import pytest

from stylit.core.recommendation_engine import StylitEngine


@pytest.fixture(scope='session')
def engine():
    return StylitEngine()


@pytest.fixture
def tee_chart():
    """Upper-body chart where a 38 in chest, 17 in shoulder body fits M."""
    return [
        {'size_label': 'S', 'measurements': {'chest': 39, 'shoulder': 17, 'length': 26}},
        {'size_label': 'M', 'measurements': {'chest': 42, 'shoulder': 17.5, 'length': 27}},
        {'size_label': 'L', 'measurements': {'chest': 46, 'shoulder': 18.5, 'length': 28}},
    ]


@pytest.fixture
def tee_profile():
    return {'chest_in': 38, 'shoulder_in': 17, 'height': "5'8\""}


@pytest.fixture
def tee_product(tee_chart):
    return {
        'category': 'upper_body',
        'size_chart': tee_chart,
        'material': '100% cotton',
    }
