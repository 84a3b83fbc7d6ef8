"""Service-layer exceptions."""


class ConfigurationError(Exception):
    """Raised when battle settings are outside their allowed range."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""
