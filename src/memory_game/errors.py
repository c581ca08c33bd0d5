class ConfigurationError(ValueError):
    """Raised at setup when the board cannot be built from the given options."""
