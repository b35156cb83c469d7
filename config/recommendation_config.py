"""
Calibration Configuration for Stylit

Every tunable threshold of the color and fit pipelines lives here so a
deployment can recalibrate without touching the rules tables. Presets cover
the common cases; JSON files cover the rest.
"""

from dataclasses import dataclass, fields
from typing import Dict, List, Optional, Any
import json
import logging

from stylit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

FIT_INTENTS = ('snug', 'regular', 'relaxed', 'oversized')
NAMING_METRICS = ('ciede2000', 'cie76')


@dataclass
class RecommendationConfig:
    """Color and fit calibration."""

    # Palette classification
    unclassified_delta_e: float = 12.0
    ambiguity_margin: float = 2.0

    # Named-color resolver
    name_cache_size: int = 100
    naming_metric: str = 'ciede2000'

    # Color suitability
    color_thresholds: Dict[str, float] = None
    deep_color_thresholds: Dict[str, float] = None
    deep_color_lightness: float = 40.0
    palette_match_delta_e: float = 4.5

    # Size scoring
    default_fit_intent: str = 'regular'
    score_bands: List[List[float]] = None
    loose_score: float = 1.0
    tight_multiplier: float = 1.5
    medium_risk_floor: float = 8.0
    high_risk_confidence_cap: int = 45
    medium_risk_confidence_cap: int = 70

    # Fill a missing size chart from a known brand's published chart
    brand_chart_fallback: bool = False

    def __post_init__(self):
        """Fill default threshold tables if not provided."""
        if self.color_thresholds is None:
            self.color_thresholds = {'great': 6.0, 'good': 12.0, 'ok': 22.0}
        if self.deep_color_thresholds is None:
            self.deep_color_thresholds = {'great': 8.0, 'good': 16.0, 'ok': 30.0}
        if self.score_bands is None:
            self.score_bands = [[0.75, 6.0], [2.0, 4.0], [3.5, 2.0]]

        self._validate_config()

    def _validate_config(self):
        """Validate calibration values."""
        if self.unclassified_delta_e <= 0:
            raise ConfigurationError("unclassified_delta_e must be positive")

        if self.ambiguity_margin < 0:
            raise ConfigurationError("ambiguity_margin must not be negative")

        if self.name_cache_size < 1:
            raise ConfigurationError("name_cache_size must be at least 1")

        if self.naming_metric not in NAMING_METRICS:
            raise ConfigurationError(f"naming_metric must be one of {NAMING_METRICS}")

        for name in ('color_thresholds', 'deep_color_thresholds'):
            table = getattr(self, name)
            if set(table) != {'great', 'good', 'ok'}:
                raise ConfigurationError(f"{name} needs exactly great/good/ok")
            if not 0 < table['great'] <= table['good'] <= table['ok']:
                raise ConfigurationError(f"{name} must satisfy 0 < great <= good <= ok")

        if not 0 <= self.deep_color_lightness <= 100:
            raise ConfigurationError("deep_color_lightness must be between 0 and 100")

        if self.palette_match_delta_e < 0:
            raise ConfigurationError("palette_match_delta_e must not be negative")

        if self.default_fit_intent not in FIT_INTENTS:
            raise ConfigurationError(f"default_fit_intent must be one of {FIT_INTENTS}")

        if not self.score_bands or any(len(band) != 2 for band in self.score_bands):
            raise ConfigurationError("score_bands must be a non-empty list of [limit, score] pairs")
        limits = [band[0] for band in self.score_bands]
        if limits != sorted(limits) or limits[0] < 0:
            raise ConfigurationError("score_bands limits must be ascending and non-negative")

        if self.tight_multiplier < 0:
            raise ConfigurationError("tight_multiplier must not be negative")

        for name in ('high_risk_confidence_cap', 'medium_risk_confidence_cap'):
            if not 0 <= getattr(self, name) <= 100:
                raise ConfigurationError(f"{name} must be between 0 and 100")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            'unclassified_delta_e': self.unclassified_delta_e,
            'ambiguity_margin': self.ambiguity_margin,
            'name_cache_size': self.name_cache_size,
            'naming_metric': self.naming_metric,
            'color_thresholds': dict(self.color_thresholds),
            'deep_color_thresholds': dict(self.deep_color_thresholds),
            'deep_color_lightness': self.deep_color_lightness,
            'palette_match_delta_e': self.palette_match_delta_e,
            'default_fit_intent': self.default_fit_intent,
            'score_bands': [list(band) for band in self.score_bands],
            'loose_score': self.loose_score,
            'tight_multiplier': self.tight_multiplier,
            'medium_risk_floor': self.medium_risk_floor,
            'high_risk_confidence_cap': self.high_risk_confidence_cap,
            'medium_risk_confidence_cap': self.medium_risk_confidence_cap,
            'brand_chart_fallback': self.brand_chart_fallback,
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RecommendationConfig':
        """Create configuration from dictionary; unknown keys are ignored with a warning."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning(f"Ignoring unknown calibration keys: {unknown}")
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    @classmethod
    def from_json_file(cls, filepath: str) -> 'RecommendationConfig':
        """Load configuration from JSON file."""
        try:
            with open(filepath, 'r') as f:
                config_dict = json.load(f)
            return cls.from_dict(config_dict)
        except (OSError, ValueError, TypeError, ConfigurationError) as e:
            logger.warning(f"Failed to load config from {filepath}: {e}")
            logger.info("Using default configuration")
            return cls()

    def save_to_json(self, filepath: str):
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Configuration saved to {filepath}")


# Predefined calibrations
CALIBRATION_PRESETS = {
    'default': {},

    # Fewer "great" verdicts and earlier risk warnings
    'strict': {
        'unclassified_delta_e': 10.0,
        'ambiguity_margin': 3.0,
        'color_thresholds': {'great': 5.0, 'good': 10.0, 'ok': 18.0},
        'deep_color_thresholds': {'great': 7.0, 'good': 13.0, 'ok': 25.0},
        'palette_match_delta_e': 3.5,
        'medium_risk_floor': 10.0,
        'high_risk_confidence_cap': 40,
        'medium_risk_confidence_cap': 65,
    },

    # Wider tolerance, brand charts allowed
    'lenient': {
        'unclassified_delta_e': 15.0,
        'ambiguity_margin': 1.5,
        'color_thresholds': {'great': 7.0, 'good': 14.0, 'ok': 25.0},
        'deep_color_thresholds': {'great': 9.0, 'good': 18.0, 'ok': 33.0},
        'palette_match_delta_e': 5.5,
        'medium_risk_floor': 6.0,
        'brand_chart_fallback': True,
    },
}


def get_config(config_name: str = 'default') -> RecommendationConfig:
    """Get a fresh predefined configuration by name."""
    if config_name in CALIBRATION_PRESETS:
        return RecommendationConfig(**CALIBRATION_PRESETS[config_name])
    logger.warning(f"Unknown config '{config_name}', using default")
    return RecommendationConfig()


def create_custom_config(base: Optional[str] = 'default', **overrides) -> RecommendationConfig:
    """Start from a preset and override individual values."""
    values = get_config(base).to_dict()
    values.update(overrides)
    return RecommendationConfig(**values)
