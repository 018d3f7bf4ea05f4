"""Error types raised while loading the adopters dataset."""


class AdoptersError(Exception):
    """Base class for all adopters loading failures."""


class ConfigurationError(AdoptersError):
    """Structural preconditions of a load are not met."""


class SchemaError(AdoptersError, ValueError):
    """
    A field or a whole document failed type, shape or enum validation.

    Attributes:
        source_id: File name (or list entry) the value came from.
        field: Name of the offending field, or None for whole-document errors.
    """

    def __init__(self, message: str, *, source_id: str, field: str | None = None) -> None:
        super().__init__(message)
        self.source_id = source_id
        self.field = field


class DuplicateError(AdoptersError, ValueError):
    """
    An unverified entry collides with another entry or a verified adopter.

    Attributes:
        check: Which duplicate check failed.
        value: The value that triggered it.
    """

    def __init__(self, message: str, *, check: str, value: str) -> None:
        super().__init__(message)
        self.check = check
        self.value = value
