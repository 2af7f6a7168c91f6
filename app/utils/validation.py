from functools import wraps
from typing import Any, Mapping
from flask import request
from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from app.exceptions import ValidationError


def _field_name(loc) -> str:
    """Report fields by their wire name whether pydantic saw the alias or the attribute."""
    names = [part for part in loc if isinstance(part, str)]
    if not names:
        return "body"
    name = names[-1]
    return to_camel(name) if "_" in name else name


def _message(err: dict, field: str) -> str:
    if err.get("type") == "missing":
        return f"{field} is required"
    msg = err.get("msg", "Invalid value")
    # pydantic prefixes messages raised from validators
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return msg


def to_validation_error(exc: PydanticValidationError) -> ValidationError:
    """Convert a pydantic error into a ValidationError naming the first bad field."""
    details = []
    for err in exc.errors():
        field = _field_name(err.get("loc", ()))
        details.append({"field": field, "message": _message(err, field)})
    first = details[0] if details else {"field": None, "message": "Invalid request"}
    return ValidationError(first["message"], field=first["field"], errors=details)


def parse_model(schema, data: Mapping[str, Any]):
    """Validate ``data`` against a pydantic model or annotated type."""
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be an object")
    try:
        if isinstance(schema, type) and hasattr(schema, "model_validate"):
            return schema.model_validate(dict(data))
        return TypeAdapter(schema).validate_python(dict(data))
    except PydanticValidationError as ve:
        raise to_validation_error(ve)


def validate_schema(schema):
    """Decorator to validate request JSON against a Pydantic schema."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            request.validated_data = parse_model(schema, request.get_json(silent=True) or {})
            return fn(*args, **kwargs)
        return wrapper

    return decorator
