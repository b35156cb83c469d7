"""Stylit Configuration Package"""

from .settings import StylitConfig, config
from .recommendation_config import RecommendationConfig, get_config, create_custom_config

__all__ = [
    'StylitConfig',
    'config',
    'RecommendationConfig',
    'get_config',
    'create_custom_config'
]
