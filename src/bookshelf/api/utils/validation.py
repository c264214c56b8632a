"""Turn pydantic validation errors into a per-field error report."""

from collections.abc import Iterable, Mapping
from typing import Any

NON_FIELD_ERRORS = "non_field_errors"

# Leading location parts that name where the value came from, not a field
_SOURCES = frozenset({"body", "query", "path", "header", "cookie"})


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _SOURCES:
        parts = parts[1:]
    if not parts:
        return NON_FIELD_ERRORS
    return ".".join(parts)


def _message(error: Mapping[str, Any]) -> str:
    if error.get("type") == "missing":
        return "This field is required."
    if error.get("type") == "json_invalid":
        return "JSON parse error."
    msg = str(error.get("msg", "Invalid value."))
    # pydantic prefixes messages raised from validators
    return msg.removeprefix("Value error, ")


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group validation errors by field.

    Example:
        >>> format_validation_errors([{"loc": ("body", "title"), "msg": "x", "type": "string_too_short"}])
        {'title': ['x']}
    """
    report: dict[str, list[str]] = {}
    for error in errors:
        if error.get("type") == "json_invalid":
            field = NON_FIELD_ERRORS
        else:
            field = _field_name(error.get("loc", ()))
        message = _message(error)
        messages = report.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return report
