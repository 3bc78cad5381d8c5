"""Per-field view handed to rule predicates."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldLevel(BaseModel):
    """Everything a predicate may inspect about the field under validation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field: Any = Field(default=None, description="Current value of the field")
    param: str = Field(default="", description="Rule parameter after '=', or ''")
    field_name: str = Field(..., description="Field name as declared on the struct")
    namespace: str = Field(..., description="Dotted path to the field")
    parent: Any = Field(default=None, description="Object that owns the field")

    def as_string(self) -> str:
        """Render the value as rules see it: None becomes ''."""
        if self.field is None:
            return ""
        return str(self.field)
