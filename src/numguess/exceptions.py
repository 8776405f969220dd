class NumGuessError(Exception):
    """Base exception for the numguess package."""


class ConfigError(NumGuessError):
    """Raised when configuration cannot be loaded or fails validation."""
