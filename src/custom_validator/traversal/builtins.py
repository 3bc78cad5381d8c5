"""Generic constraints every StructValidator ships with.

These sit alongside custom rules under whatever tag namespace the
validator reads. Size-based rules compare string and collection
lengths, and numeric values directly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from custom_validator.traversal.errors import InvalidTagError
from custom_validator.traversal.level import FieldLevel

OMIT_EMPTY = "omitempty"

_SIZED_TYPES = (str, bytes, list, tuple, dict, set, frozenset)


def has_value(value: Any) -> bool:
    """Return True when the value is not None, zero, or empty."""
    if value is None:
        return False
    if isinstance(value, _SIZED_TYPES):
        return len(value) > 0
    if isinstance(value, (int, float)):
        return value != 0
    return True


def _measure(fl: FieldLevel, tag: str) -> float:
    value = fl.field
    if isinstance(value, bool):
        raise InvalidTagError(f"Bad field type bool for '{tag}' on field '{fl.field_name}'")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, _SIZED_TYPES):
        return len(value)
    msg = f"Bad field type {type(value).__name__} for '{tag}' on field '{fl.field_name}'"
    raise InvalidTagError(msg)


def _bound(fl: FieldLevel, tag: str) -> float:
    try:
        return float(fl.param)
    except ValueError:
        msg = f"Rule '{tag}' on field '{fl.field_name}' needs a numeric parameter, got {fl.param!r}"
        raise InvalidTagError(msg) from None


def validate_required(fl: FieldLevel) -> bool:
    return has_value(fl.field)


def validate_min(fl: FieldLevel) -> bool:
    return _measure(fl, "min") >= _bound(fl, "min")


def validate_max(fl: FieldLevel) -> bool:
    return _measure(fl, "max") <= _bound(fl, "max")


def validate_len(fl: FieldLevel) -> bool:
    return _measure(fl, "len") == _bound(fl, "len")


def validate_oneof(fl: FieldLevel) -> bool:
    """Value must equal one of the space-separated options in the param."""
    return fl.as_string() in fl.param.split()


BUILTIN_RULES: dict[str, Callable[[FieldLevel], bool]] = {
    "required": validate_required,
    "min": validate_min,
    "max": validate_max,
    "len": validate_len,
    "oneof": validate_oneof,
}

RESERVED_TAGS = frozenset(BUILTIN_RULES) | {OMIT_EMPTY}
