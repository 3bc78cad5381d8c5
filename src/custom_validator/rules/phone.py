"""Phone number rule (``is-phone``).

Syntactic check only: optional ``+CC `` country prefix, optional
parenthesized area code, then 3 and 4 digit groups with optional
whitespace, dot, or hyphen separators. No numbering-plan validation.
"""

from __future__ import annotations

import re

from custom_validator.traversal.level import FieldLevel

# Whitespace is spelled out: Python's \s would also accept a vertical tab.
_WS = r"[ \t\n\f\r]"

_PHONE_PATTERN = re.compile(
    rf"(\+\d{{1,2}}{_WS})?\(?\d{{3}}\)?(?:{_WS}|[.-])?\d{{3}}(?:{_WS}|[.-])?\d{{4}}",
    re.ASCII,
)


def is_phone(value: str) -> bool:
    return _PHONE_PATTERN.fullmatch(value) is not None


def validate_phone(fl: FieldLevel) -> bool:
    return is_phone(fl.as_string())
