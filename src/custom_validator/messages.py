"""Human-readable wording for field failures."""

from __future__ import annotations

from custom_validator.rules.base import RuleTag
from custom_validator.traversal.errors import FieldError


def error_for_tag(fe: FieldError) -> str:
    """Translate one FieldError into the message shown to callers.

    Custom rules get dedicated wording with the offending value in
    backticks. Any other tag falls back to FieldError.error().
    """
    match fe.tag:
        case RuleTag.IS_EMAIL:
            return f"`{fe.value}` is not a valid email"
        case RuleTag.IS_PHONE:
            return f"`{fe.value}` is not a valid phone number"
        case RuleTag.REGEX:
            return f"`{fe.value}` does not match the given regex: {fe.param}"
    return fe.error()
