class InvalidInputError(ValueError):
    """Raised when the checksum helpers get something other than 17 digits."""
