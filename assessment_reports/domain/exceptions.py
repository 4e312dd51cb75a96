class RecordValidationError(ValueError):
    """Raised when a raw dataset record cannot be turned into a domain entity."""
    pass
