class ConfigurationError(Exception):
    """Raised when a gateway is used without its required configuration."""
