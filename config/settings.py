# Stylit Configuration
# Environment-driven settings with calibration defaults for the fit & color engine

import os
import logging
from typing import Dict, List, Optional

from .recommendation_config import (CALIBRATION_PRESETS, FIT_INTENTS, RecommendationConfig,
                                    create_custom_config)

# Configure logging
logging.basicConfig(level=getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper(), logging.INFO),
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}")
        return None


class StylitConfig:
    """Centralized configuration management for the Stylit engine."""

    def __init__(self):
        """Initialize configuration with environment variables and defaults."""

        # Calibration source
        self.CALIBRATION = os.environ.get('STYLIT_CALIBRATION', 'default').lower()
        self.CALIBRATION_FILE = os.environ.get('STYLIT_CALIBRATION_FILE', None)

        # Individual calibration overrides
        self.UNCLASSIFIED_DELTA_E = _env_float('STYLIT_UNCLASSIFIED_DELTA_E')
        self.AMBIGUITY_MARGIN = _env_float('STYLIT_AMBIGUITY_MARGIN')
        cache_size = _env_float('STYLIT_NAME_CACHE_SIZE')
        self.NAME_CACHE_SIZE = int(cache_size) if cache_size is not None else None
        self.DEFAULT_FIT_INTENT = os.environ.get('STYLIT_DEFAULT_FIT_INTENT', None)

        # Development Settings
        self.DEBUG_MODE = os.environ.get('DEBUG_MODE', 'false').lower() == 'true'
        self.LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
        self.ENVIRONMENT = os.environ.get('ENVIRONMENT', 'production').lower()

        self._apply_environment_settings()

    def _apply_environment_settings(self):
        """Apply environment-specific settings."""
        if self.DEBUG_MODE or self.ENVIRONMENT == 'development':
            self.LOG_LEVEL = 'DEBUG'
            logging.getLogger('stylit').setLevel(logging.DEBUG)

    def overrides(self) -> Dict:
        """Calibration values set directly through the environment."""
        values = {
            'unclassified_delta_e': self.UNCLASSIFIED_DELTA_E,
            'ambiguity_margin': self.AMBIGUITY_MARGIN,
            'name_cache_size': self.NAME_CACHE_SIZE,
            'default_fit_intent': self.DEFAULT_FIT_INTENT.lower() if self.DEFAULT_FIT_INTENT else None,
        }
        return {key: value for key, value in values.items() if value is not None}

    def recommendation_config(self) -> RecommendationConfig:
        """
        Build the engine calibration.

        A calibration file wins over the preset name; environment overrides
        are applied on top of either.
        """
        if self.CALIBRATION_FILE:
            base = RecommendationConfig.from_json_file(self.CALIBRATION_FILE)
            values = base.to_dict()
            values.update(self.overrides())
            return RecommendationConfig(**values)
        return create_custom_config(self.CALIBRATION, **self.overrides())

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.CALIBRATION not in CALIBRATION_PRESETS:
            errors.append(f"Unknown calibration preset: {self.CALIBRATION}")

        if self.CALIBRATION_FILE and not os.path.isfile(self.CALIBRATION_FILE):
            errors.append(f"Calibration file not found: {self.CALIBRATION_FILE}")

        if self.UNCLASSIFIED_DELTA_E is not None and self.UNCLASSIFIED_DELTA_E <= 0:
            errors.append("STYLIT_UNCLASSIFIED_DELTA_E must be positive")

        if self.AMBIGUITY_MARGIN is not None and self.AMBIGUITY_MARGIN < 0:
            errors.append("STYLIT_AMBIGUITY_MARGIN must not be negative")

        if self.NAME_CACHE_SIZE is not None and self.NAME_CACHE_SIZE < 1:
            errors.append("STYLIT_NAME_CACHE_SIZE must be at least 1")

        if self.DEFAULT_FIT_INTENT and self.DEFAULT_FIT_INTENT.lower() not in FIT_INTENTS:
            errors.append(f"Invalid default fit intent: {self.DEFAULT_FIT_INTENT}")

        if self.LOG_LEVEL not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.LOG_LEVEL}")

        return errors

    def print_summary(self):
        """Print configuration summary."""
        print("=" * 80)
        print("Stylit Configuration Summary")
        print("=" * 80)
        print(f"Environment: {self.ENVIRONMENT.upper()}")
        print(f"Calibration Preset: {self.CALIBRATION}")
        print(f"Calibration File: {self.CALIBRATION_FILE or '-'}")
        print()
        print("Overrides:")
        overrides = self.overrides()
        if overrides:
            for key, value in overrides.items():
                print(f"  {key}: {value}")
        else:
            print("  (none)")
        print()
        print("Debug & Development:")
        print(f"  Debug Mode: {self.DEBUG_MODE}")
        print(f"  Log Level: {self.LOG_LEVEL}")
        print("=" * 80)


# Create global config instance
config = StylitConfig()

DEBUG_MODE = config.DEBUG_MODE
LOG_LEVEL = config.LOG_LEVEL

if __name__ == "__main__":
    errors = config.validate()

    if errors:
        print("Configuration Errors:")
        for error in errors:
            print(f"  - {error}")
    else:
        print("Configuration is valid!")
        config.print_summary()
