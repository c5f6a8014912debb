__all__ = ['ConfigurationError']


class ConfigurationError(ValueError):
    """Raised for an unknown severity or an unusable backend value.
    """
