class InvalidConfiguration(ValueError):
    """Raised when a controller is built with a dwell that is not a positive number."""
