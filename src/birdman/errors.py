"""
errors.py: Exceptions raised by the birdman package.
"""


class BirdmanError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(BirdmanError, ValueError):
    """Raised when a GameConfig holds values the simulation cannot run with."""


class AssetError(BirdmanError):
    """Raised when a requested asset cannot be loaded at startup."""
