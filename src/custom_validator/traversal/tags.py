"""Parsing of rule annotations attached to struct fields.

An annotation is a comma-separated list of rules, each either a bare
name (``is-email``) or ``name=param`` (``regex=^[A-Z]{3}$``). Commas
inside a parameter are written as ``0x2C``. An annotation of ``-``
excludes the field from validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from custom_validator.traversal.errors import InvalidTagError

SKIP_FIELD = "-"

_RULE_SEPARATOR = ","
_PARAM_SEPARATOR = "="
_ESCAPED_COMMA = "0x2C"


class TagRule(BaseModel):
    """A single parsed rule reference from a field annotation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Rule tag, e.g. 'regex'")
    param: str = Field(default="", description="Text after '=' with escapes resolved")


def parse_tag(raw: str, field: str = "") -> list[TagRule]:
    """Split an annotation string into its rules, in declaration order.

    Args:
        raw: The annotation text, e.g. ``"omitempty,regex=^a0x2Cb$"``.
        field: Field name, used only for error messages.

    Returns:
        Parsed rules. Empty when the annotation is blank or ``-``.

    Raises:
        InvalidTagError: If a rule segment has no name.
    """
    if not raw or raw.strip() == SKIP_FIELD:
        return []

    rules: list[TagRule] = []
    for segment in raw.split(_RULE_SEPARATOR):
        name, _, param = segment.partition(_PARAM_SEPARATOR)
        name = name.strip()
        if not name:
            msg = f"Invalid validation tag {raw!r} on field '{field}'"
            raise InvalidTagError(msg)
        rules.append(TagRule(name=name, param=param.replace(_ESCAPED_COMMA, ",")))
    return rules
