"""
Stylit Fit & Color Recommendation System

Size recommendations from body measurements and garment size charts, plus
seasonal color analysis, named colors and silhouette advice.
"""

__version__ = "1.0.0"
__author__ = "Stylit Team"

from .core.recommendation_engine import StylitEngine
from .core.color_logic import PaletteClassifier
from .core.color_naming import NamedColorResolver

__all__ = [
    'StylitEngine',
    'PaletteClassifier',
    'NamedColorResolver'
]
