"""Tag-driven field validation for pydantic models and dataclasses.

Fields opt into rules through an annotation under the ``my-validator``
key, and validate_my_struct returns a field-name to message mapping:

    class Signup(BaseModel):
        email: str = Field(json_schema_extra={"my-validator": "is-email"})

    validate_my_struct(Signup(email="bad"))
    # {"email": "`bad` is not a valid email"}
"""

from custom_validator.api import ValidateMyStruct, validate_my_struct
from custom_validator.engine import (
    DEFAULT_TAG_NAME,
    ValidationEngine,
    default_engine,
    get_default_engine,
)
from custom_validator.messages import error_for_tag
from custom_validator.rules import NamedRule, RuleTag, get_custom_rules
from custom_validator.traversal import (
    ConfigurationError,
    FieldError,
    FieldLevel,
    InvalidTagError,
    InvalidValidationError,
    RuleRegistrationError,
    StructValidator,
    UndefinedRuleError,
    ValidationErrors,
)

__all__ = [
    "DEFAULT_TAG_NAME",
    "ConfigurationError",
    "FieldError",
    "FieldLevel",
    "InvalidTagError",
    "InvalidValidationError",
    "NamedRule",
    "RuleRegistrationError",
    "RuleTag",
    "StructValidator",
    "UndefinedRuleError",
    "ValidateMyStruct",
    "ValidationEngine",
    "ValidationErrors",
    "default_engine",
    "error_for_tag",
    "get_custom_rules",
    "get_default_engine",
    "validate_my_struct",
]
