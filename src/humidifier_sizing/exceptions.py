"""Exceptions raised by humidifier sizing."""


class HumidifierSizingError(Exception):
    """Base class for humidifier sizing errors."""


class InvalidInputError(HumidifierSizingError, ValueError):
    """Raised when input values fail validation.

    Attributes:
        errors: Mapping of field name to a human readable message.

    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        details = "; ".join(f"{field}: {msg}" for field, msg in errors.items())
        super().__init__(f"Invalid input ({details})")
