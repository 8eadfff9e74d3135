# vector3core/errors.py


class InvalidArgumentError(ValueError):
    """
    Raised when a vector cannot be built or an operation cannot proceed
    because of a malformed argument.
    """
