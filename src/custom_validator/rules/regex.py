"""Generic regular-expression rule (``regex=<pattern>``)."""

from __future__ import annotations

import re

from custom_validator.traversal.level import FieldLevel


def match_regex(data: str, pattern: re.Pattern[str]) -> bool:
    """Return True if ``pattern`` matches anywhere in ``data``."""
    return pattern.search(data) is not None


def validate_regex(fl: FieldLevel) -> bool:
    """Match the field against the pattern given as the rule parameter.

    The pattern is compiled on every call. A malformed pattern is a
    mistake in the struct definition, so ``re.error`` is left to
    propagate rather than being reported as a field failure.
    """
    return match_regex(fl.as_string(), re.compile(fl.param))
