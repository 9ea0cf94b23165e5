from typing import Any, TypeVar
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from app.core.exceptions import ValidationException

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_LOCATION_PREFIXES = ("body", "query", "path")


class CamelModel(BaseModel):
    """
    Base schema exposing camelCase JSON field names.

    Python attributes stay snake_case; input accepts either spelling and
    responses are serialized with the camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def format_validation_errors(errors: list[dict]) -> list[dict]:
    """
    Flatten pydantic error dicts to [{"field": ..., "message": ...}].

    ("body", "name") -> "name"; nested locations are dotted.
    """
    formatted = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        parts = loc[1:] if loc and loc[0] in _LOCATION_PREFIXES else loc
        field = ".".join(str(part) for part in parts) or (str(loc[0]) if loc else "body")
        formatted.append({"field": field, "message": error["msg"]})
    return formatted


def parse_body(schema: type[SchemaT], payload: Any, message: str) -> SchemaT:
    """
    Validate a raw request body against a schema.

    Used by store-scoped writes, which validate only after the access check.

    Raises:
        ValidationException: Listing every invalid field
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise ValidationException(message, errors=format_validation_errors(exc.errors()))
