"""Domain exceptions."""


class GraphMapError(Exception):
    """Base exception for graphmap."""

    pass


class FieldAccessError(GraphMapError):
    """Reading or writing a mapped field on an instance failed."""

    def __init__(self, owner: str, field: str, reason: str) -> None:
        super().__init__(f"Cannot access field {owner}.{field}: {reason}")
        self.owner = owner
        self.field = field


class ConfigurationError(GraphMapError):
    """Entity mapping metadata violates a mapping contract."""

    pass


class ConversionError(GraphMapError):
    """A value could not be converted to or from its stored form."""

    pass


class NotFound(GraphMapError):
    """Requested entity metadata was not found."""

    pass
