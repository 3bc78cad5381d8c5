"""Generic struct traversal: annotation parsing, rule dispatch, errors.

Re-exports for convenient imports:
    from custom_validator.traversal import StructValidator, FieldLevel
"""

from custom_validator.traversal.errors import (
    ConfigurationError,
    FieldError,
    InvalidTagError,
    InvalidValidationError,
    RuleRegistrationError,
    UndefinedRuleError,
    ValidationErrors,
)
from custom_validator.traversal.level import FieldLevel
from custom_validator.traversal.walker import DEFAULT_TAG_NAME, StructValidator, is_struct

__all__ = [
    "DEFAULT_TAG_NAME",
    "ConfigurationError",
    "FieldError",
    "FieldLevel",
    "InvalidTagError",
    "InvalidValidationError",
    "RuleRegistrationError",
    "StructValidator",
    "UndefinedRuleError",
    "ValidationErrors",
    "is_struct",
]
