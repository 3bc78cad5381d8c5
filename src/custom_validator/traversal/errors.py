"""Error types raised by the structural traversal layer.

Field violations and configuration problems are kept apart: a
ValidationErrors carries per-field failures that callers turn into
messages, while ConfigurationError subclasses signal misuse of the
validator itself (bad target, unknown tag, bad registration).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    """One field failing one rule during a struct walk."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field: str = Field(..., description="Field name as declared on the struct")
    namespace: str = Field(..., description="Dotted path, e.g. 'User.address.zip'")
    tag: str = Field(..., description="Rule tag that failed (e.g. 'is-email')")
    value: Any = Field(default=None, description="Field value at validation time")
    param: str = Field(default="", description="Rule parameter after '=', if any")

    def error(self) -> str:
        """Default message used when no rule-specific wording exists."""
        return (
            f"Key: '{self.namespace}' Error:Field validation for "
            f"'{self.field}' failed on the '{self.tag}' tag"
        )


class ValidationErrors(Exception):
    """Aggregate of every FieldError found while validating one object."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors: tuple[FieldError, ...] = tuple(errors)
        super().__init__("\n".join(fe.error() for fe in self.errors))

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


class ConfigurationError(Exception):
    """Base class for validator misuse, as opposed to bad input data."""


class InvalidValidationError(ConfigurationError):
    """Raised when the target is not a struct the walker can introspect."""

    def __init__(self, target: Any) -> None:
        self.target_type = type(target)
        if target is None:
            msg = "validator: cannot validate None"
        elif isinstance(target, type):
            msg = f"validator: expected an instance, got class {target.__name__}"
        else:
            msg = (
                "validator: expected a pydantic model or dataclass instance, "
                f"got {self.target_type.__name__}"
            )
        super().__init__(msg)


class UndefinedRuleError(ConfigurationError):
    """Raised when a field is tagged with a rule nobody registered."""

    def __init__(self, tag: str, field: str) -> None:
        self.tag = tag
        self.field = field
        super().__init__(f"Undefined validation function '{tag}' on field '{field}'")


class RuleRegistrationError(ConfigurationError):
    """Raised when a rule cannot be registered under the requested tag."""


class InvalidTagError(ConfigurationError):
    """Raised when a field's rule annotation cannot be parsed or applied."""
