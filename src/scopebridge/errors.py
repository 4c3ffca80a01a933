__all__ = ["ScopeBridgeError", "DefinitionError", "ConfigurationError"]


class ScopeBridgeError(Exception):
    """Base class for errors raised by scopebridge."""

    pass


class DefinitionError(ScopeBridgeError):
    """Raised when a target cannot be registered as a bean definition."""

    pass


class ConfigurationError(ScopeBridgeError):
    """Raised when a resolver or registry is configured with invalid values."""

    pass
