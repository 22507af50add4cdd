"""Bridge between pydantic DTO validation and ``ValidationFailed``."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import ValidationFailed

M = TypeVar("M", bound=BaseModel)

_VALUE_ERROR_PREFIX = "Value error, "


def field_errors(
    exc: PydanticValidationError, required_messages: Mapping[str, str] | None = None
) -> Dict[str, str]:
    """Collapse pydantic errors into a ``{field: message}`` map.

    Only the first message per field is kept.  ``missing`` errors use the
    field's entry in ``required_messages`` when one is declared.
    """
    required_messages = required_messages or {}
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        field = str(loc[0])
        if field in errors:
            continue
        message = error["msg"]
        if error["type"] == "missing" and field in required_messages:
            message = required_messages[field]
        elif message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        errors[field] = message
    return errors


def validate(model: Type[M], data: Any) -> M:
    """Build ``model`` from ``data`` or raise ``ValidationFailed``.

    ``model`` may declare a ``required_messages`` class attribute mapping
    wire field names to the message reported when they are absent.
    """
    if not isinstance(data, Mapping):
        raise ValidationFailed({"body": "Request body must be a JSON object"})
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationFailed(
            field_errors(exc, getattr(model, "required_messages", None))
        ) from exc
