"""Validation of raw payloads against registered schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from fauxson.schemas import (
    FauxsonError,
    FauxsonErrorCode,
    FauxsonErrorSource,
    SCHEMA_REGISTRY,
    Severity,
)


def _field_problems(exc: ValidationError) -> Dict[str, str]:
    """Map dotted field paths (``max_tokens``, ``<root>``) to pydantic messages."""
    problems: Dict[str, str] = {}
    for item in exc.errors(include_url=False, include_context=False, include_input=False):
        path = ".".join(str(part) for part in item["loc"]) or "<root>"
        problems.setdefault(path, item["msg"])
    return problems


def _schema_error(schema_name: str, message: str, fields: Dict[str, str] | None = None) -> FauxsonError:
    return FauxsonError(
        error_id=f"{schema_name}_invalid",
        code=FauxsonErrorCode.VALIDATION,
        message=message,
        source=FauxsonErrorSource.VALIDATION,
        severity=Severity.ERROR,
        details={"schema": schema_name, "fields": fields or {}},
    )


def validate(schema_name: str, payload: Any) -> Tuple[Any | None, FauxsonError | None]:
    """Validate payload against a registered schema.

    Returns (validated_object, None) on success, (None, FauxsonError) on
    failure. Error details name the schema and each rejected field.
    """
    model = SCHEMA_REGISTRY.get(schema_name)
    if model is None:
        known: List[str] = sorted(SCHEMA_REGISTRY)
        return None, _schema_error(schema_name, f"Unknown schema '{schema_name}' (known: {', '.join(known)})")
    try:
        return model.model_validate(payload), None
    except ValidationError as exc:
        fields = _field_problems(exc)
        summary = ", ".join(sorted(fields))
        return None, _schema_error(schema_name, f"{schema_name} rejected fields: {summary}", fields)


__all__ = ["validate"]
