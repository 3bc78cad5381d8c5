"""Validation engine with one-time, thread-safe rule registration.

The engine wraps a StructValidator. Nothing is built at construction
time: the first call to validate_struct (or ensure_initialized) creates
the validator, switches it to the engine's tag namespace, and registers
the custom rules. A lock with a double-checked flag guarantees the setup
body runs exactly once and that no caller sees a half-populated table.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from loguru import logger

from custom_validator.rules import NamedRule, get_custom_rules
from custom_validator.traversal.walker import StructValidator

DEFAULT_TAG_NAME = "my-validator"


class ValidationEngine:
    """Lazily-initialized owner of the rule table.

    Usage::

        engine = ValidationEngine()
        engine.validate_struct(signup)  # raises ValidationErrors on bad fields
    """

    def __init__(
        self,
        *,
        tag_name: str = DEFAULT_TAG_NAME,
        extra_rules: Iterable[NamedRule] = (),
    ) -> None:
        """Configure the engine without building it.

        Args:
            tag_name: Annotation key rules are read from. Kept distinct from
                the traversal default so host-framework tags do not collide.
            extra_rules: Additional rules registered during the same
                one-time setup as the built-in custom rules.
        """
        self._tag_name = tag_name
        self._extra_rules = tuple(extra_rules)
        self._validator: StructValidator | None = None
        self._lock = threading.Lock()
        self._initialized = False

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def rules(self) -> list[str]:
        """Sorted tags available to annotated fields (initializes the engine)."""
        return self._ensure_validator().rules

    def ensure_initialized(self) -> None:
        """Build the validator and register rules, at most once per engine."""
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            rules = [*get_custom_rules(), *self._extra_rules]
            validator = StructValidator()
            validator.set_tag_name(self._tag_name)
            for rule in rules:
                validator.register_validation(rule.tag, rule.predicate)
            self._validator = validator
            self._initialized = True
            logger.debug(
                "Validation engine initialized under '{}' with {} custom rule(s)",
                self._tag_name,
                len(rules),
            )

    def validate_struct(self, obj: Any) -> None:
        """Validate ``obj`` against the rules named in its field annotations.

        Returns:
            None when every rule is satisfied.

        Raises:
            ValidationErrors: One FieldError per violating field, in field order.
            InvalidValidationError: If ``obj`` is not a model or dataclass instance.
        """
        self._ensure_validator().struct(obj)

    def _ensure_validator(self) -> StructValidator:
        self.ensure_initialized()
        assert self._validator is not None
        return self._validator


default_engine = ValidationEngine()


def get_default_engine() -> ValidationEngine:
    """Return the process-wide engine used by validate_my_struct."""
    return default_engine
