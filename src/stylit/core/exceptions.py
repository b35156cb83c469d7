"""Exception hierarchy for the Stylit engine."""


class StylitError(Exception):
    """Base exception for the Stylit engine"""
    pass


class CatalogError(StylitError):
    """A fixed reference table (palette, named colors) could not be built"""
    pass


class ConfigurationError(StylitError):
    """Calibration or settings values are invalid"""
    pass
