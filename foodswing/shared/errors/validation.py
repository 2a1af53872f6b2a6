# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError
from .validation_types import ValidationErrorType

# Error types whose own message is more useful than the generic "missing" one.
_SPECIFIC_TYPES = {t.value for t in ValidationErrorType if t is not ValidationErrorType.MISSING}


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
                "message": error.get("msg", ""),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def _specific_message(error: dict[str, Any]) -> str:
    if error["type"] == ValidationErrorType.TOO_LONG.value:
        return f"{error['field'].capitalize()} is too long"
    return error["message"]


def raise_validation_error(
    exc: PydanticValidationError, message: str | None = None
) -> NoReturn:
    context = format_pydantic_errors(exc)
    specific = next(
        (_specific_message(e) for e in context["errors"] if e["type"] in _SPECIFIC_TYPES),
        None,
    )
    resolved = specific or message
    if resolved:
        raise ValidationError(message=resolved, context=context) from exc
    raise ValidationError(context=context) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
