"""Stylit Core Module"""

from .recommendation_engine import StylitEngine
from .color_logic import PaletteClassifier
from .color_naming import NamedColorResolver
from .fit_logic import EaseProfileEngine, RiskEstimator, SizeScorer
from .suitability import SuitabilitySynthesizer

__all__ = [
    'StylitEngine',
    'PaletteClassifier',
    'NamedColorResolver',
    'EaseProfileEngine',
    'SizeScorer',
    'RiskEstimator',
    'SuitabilitySynthesizer'
]
