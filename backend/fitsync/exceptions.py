"""Errors raised by the engine for structurally invalid input."""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class EngineValidationError(ValueError):
    """Raised when a collaborator hands the engine a malformed record.

    ``field`` names the offending attribute (dotted path for nested records)
    so callers can report it back to whoever produced the data.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


def coerce_record(model: Type[ModelT], value: Any, location: str) -> ModelT:
    """
    Return ``value`` as an instance of ``model``, validating dicts on the way.

    Args:
        model: Pydantic model the record must conform to
        value: Either an instance of ``model`` or a mapping of its fields
        location: Prefix for the field path in error messages (e.g. "entries[2]")

    Raises:
        EngineValidationError: If the record does not validate
    """
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as e:
        error = e.errors()[0]
        path = ".".join(str(part) for part in error["loc"])
        field = f"{location}.{path}" if path else location
        raise EngineValidationError(field, error["msg"]) from e
