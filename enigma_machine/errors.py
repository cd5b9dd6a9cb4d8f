class ConfigurationError(ValueError):
    """Raised when a machine, rotor or plugboard is given bad settings."""
