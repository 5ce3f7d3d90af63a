"""
Validation - run a payload through an entity schema and collect every error.

validate() never raises on bad input. It returns either Valid (the normalised
document, ready to store) or Invalid (one FieldError per violation).
"""

from dataclasses import asdict, dataclass, field
from typing import Any, List, Type, Union

from pydantic import ValidationError

from app.schemas.schemas import EntitySchema

# pydantic error type -> message kind in EntitySchema.messages
ERROR_KINDS = {
    "missing": "required",
    "int_type": "type",
    "int_parsing": "type",
    "int_from_float": "type",
    "int_bool": "type",
    "int_unsafe": "type",
    "string_type": "type",
    "date_type": "type",
    "date_parsing": "type",
    "date_from_datetime_parsing": "type",
    "date_from_datetime_inexact": "type",
    "greater_than_equal": "range",
    "less_than_equal": "range",
    "string_too_long": "length",
    "string_too_short": "length",
    "enum": "enum",
    "value_error": "format",
}


@dataclass
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Valid:
    value: dict
    ok: bool = field(default=True, init=False)


@dataclass
class Invalid:
    errors: List[FieldError]
    ok: bool = field(default=False, init=False)

    def details(self) -> List[dict]:
        return [e.to_dict() for e in self.errors]


ValidationResult = Union[Valid, Invalid]


def _field_error(schema: Type[EntitySchema], error: dict) -> FieldError:
    loc = error.get("loc") or ()
    name = str(loc[0]) if loc else "body"

    if error["type"] == "extra_forbidden":
        return FieldError(name, f"{name} is not allowed")

    kind = ERROR_KINDS.get(error["type"])
    message = schema.messages.get(name, {}).get(kind) if kind else None
    return FieldError(name, message or f"{name}: {error['msg']}")


def validate(schema: Type[EntitySchema], raw: Any, partial: bool = False) -> ValidationResult:
    """
    Validate a raw payload against an entity schema.

    Args:
        schema: EntitySchema subclass (the field table)
        raw: decoded JSON body
        partial: update mode - only supplied, non-null fields are kept

    Returns:
        Valid with a JSON-ready dict (enums as values, dates as ISO strings),
        or Invalid listing every violation.
    """
    if not isinstance(raw, dict):
        return Invalid([FieldError("body", "Request body must be a JSON object")])

    try:
        model = schema.model_validate(raw)
    except ValidationError as exc:
        return Invalid([_field_error(schema, err) for err in exc.errors()])

    return Valid(model.model_dump(mode="json", exclude_none=True, exclude_unset=partial))
