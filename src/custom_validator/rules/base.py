"""Base models for named validation rules.

A NamedRule binds a stable tag to a predicate over a FieldLevel. Rules
are registered once into the engine's rule table and never change
afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from custom_validator.traversal.level import FieldLevel


class RuleTag(StrEnum):
    """Tags of the rules the engine registers on first use."""

    IS_EMAIL = "is-email"
    IS_PHONE = "is-phone"
    REGEX = "regex"


class NamedRule(BaseModel):
    """A predicate published under a tag that struct fields can reference."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., min_length=1, description="Tag used in field annotations")
    predicate: Callable[[FieldLevel], bool] = Field(
        ..., description="Returns True when the field value satisfies the rule"
    )
    description: str = Field(default="", description="Human-readable rule summary")
