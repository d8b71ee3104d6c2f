"""
Exception types raised by the mainland classifier.
"""


class MainlandError(Exception):
    """Base class for all classifier errors."""


class ConfigError(MainlandError):
    """Configuration file is missing or invalid."""


class LoadError(MainlandError):
    """An input phase failed as a whole."""

    phase = "input"


class RecordLoadError(LoadError):
    """Boundary records could not be read."""

    phase = "records"


class GeometryLoadError(LoadError):
    """Reference geometry could not be read or contains nothing usable."""

    phase = "geometry"
