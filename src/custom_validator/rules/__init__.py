"""Custom validation rules registered by the engine.

Rules:
- is-email: single well-formed mail address
- is-phone: North American style phone number syntax
- regex: field contains a match for the pattern parameter
"""

from custom_validator.rules.base import NamedRule, RuleTag
from custom_validator.rules.email import is_email, validate_email
from custom_validator.rules.phone import is_phone, validate_phone
from custom_validator.rules.regex import match_regex, validate_regex


def get_custom_rules() -> list[NamedRule]:
    """Return all custom rule instances, in registration order."""
    return [
        NamedRule(
            tag=RuleTag.REGEX,
            predicate=validate_regex,
            description="Field contains a match for the given pattern",
        ),
        NamedRule(
            tag=RuleTag.IS_EMAIL,
            predicate=validate_email,
            description="Field is a single well-formed email address",
        ),
        NamedRule(
            tag=RuleTag.IS_PHONE,
            predicate=validate_phone,
            description="Field is a syntactically valid phone number",
        ),
    ]


__all__ = [
    "NamedRule",
    "RuleTag",
    "get_custom_rules",
    "is_email",
    "is_phone",
    "match_regex",
    "validate_email",
    "validate_phone",
    "validate_regex",
]
