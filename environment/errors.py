"""Errors raised by the PillarSort environment."""


class ConfigurationError(ValueError):
    """Raised when a configuration cannot describe a valid sorting run."""
