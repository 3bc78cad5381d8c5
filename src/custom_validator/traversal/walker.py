"""Struct walker that dispatches tagged fields to registered rules.

StructValidator owns a table of rule functions keyed by tag. Given a
pydantic model or dataclass instance it reads each field's annotation
under the configured tag namespace, runs the referenced rules in order,
and collects one FieldError per failing field. Nested model/dataclass
values are walked as well.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any

from loguru import logger
from pydantic import BaseModel

from custom_validator.traversal.builtins import (
    BUILTIN_RULES,
    OMIT_EMPTY,
    RESERVED_TAGS,
    has_value,
)
from custom_validator.traversal.errors import (
    FieldError,
    InvalidTagError,
    InvalidValidationError,
    RuleRegistrationError,
    UndefinedRuleError,
    ValidationErrors,
)
from custom_validator.traversal.level import FieldLevel
from custom_validator.traversal.tags import SKIP_FIELD, TagRule, parse_tag

DEFAULT_TAG_NAME = "validate"

RuleFunc = Callable[[FieldLevel], bool]


def is_struct(obj: Any) -> bool:
    """Return True for pydantic model instances and dataclass instances."""
    if isinstance(obj, BaseModel):
        return True
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


class StructValidator:
    """Validates struct fields against rules named in their annotations.

    Usage::

        validator = StructValidator()
        validator.set_tag_name("my-validator")
        validator.register_validation("is-email", validate_email)
        validator.struct(user)  # raises ValidationErrors on failure
    """

    def __init__(self, tag_name: str = DEFAULT_TAG_NAME) -> None:
        self._tag_name = tag_name
        self._rules: dict[str, RuleFunc] = dict(BUILTIN_RULES)

    @property
    def tag_name(self) -> str:
        """Annotation key fields are read under."""
        return self._tag_name

    @property
    def rules(self) -> list[str]:
        """Sorted tags of every rule the validator can dispatch to."""
        return sorted(self._rules)

    def set_tag_name(self, name: str) -> None:
        """Read rule annotations from ``name`` instead of the default key."""
        if not name:
            raise RuleRegistrationError("Tag name must be a non-empty string")
        self._tag_name = name

    def register_validation(self, tag: str, fn: RuleFunc) -> None:
        """Register a rule function under ``tag``.

        Args:
            tag: Name fields use to reference the rule.
            fn: Predicate receiving a FieldLevel, returning True when valid.

        Raises:
            RuleRegistrationError: If the tag is empty, shadows a built-in
                rule, or ``fn`` is not callable.
        """
        if not tag:
            raise RuleRegistrationError("Validation rule tag must be a non-empty string")
        if tag in RESERVED_TAGS:
            raise RuleRegistrationError(f"Tag '{tag}' is a built-in rule and cannot be replaced")
        if not callable(fn):
            raise RuleRegistrationError(f"Rule for tag '{tag}' is not callable")
        self._rules[tag] = fn
        logger.debug("Registered validation rule '{}' under '{}'", tag, self._tag_name)

    def has_rule(self, tag: str) -> bool:
        return tag in self._rules

    def struct(self, obj: Any) -> None:
        """Validate every tagged field of ``obj``.

        Raises:
            InvalidValidationError: If ``obj`` is not a model or dataclass instance.
            ValidationErrors: If any field fails a rule; one entry per field.
            UndefinedRuleError: If an annotation names an unregistered rule.
            InvalidTagError: If an annotation is not a string or cannot be parsed.
        """
        if not is_struct(obj):
            raise InvalidValidationError(obj)

        errors: list[FieldError] = []
        self._walk(obj, type(obj).__name__, errors, {id(obj)})
        if errors:
            raise ValidationErrors(errors)

    def _walk(
        self,
        obj: Any,
        namespace: str,
        errors: list[FieldError],
        seen: set[int],
    ) -> None:
        for name, annotation in self._field_annotations(obj):
            if annotation is not None and not isinstance(annotation, str):
                msg = (
                    f"Validation tag on field '{name}' must be a string, "
                    f"got {type(annotation).__name__}"
                )
                raise InvalidTagError(msg)
            if annotation is not None and annotation.strip() == SKIP_FIELD:
                continue
            value = getattr(obj, name, None)
            path = f"{namespace}.{name}"

            failure = self._check_field(obj, name, path, value, parse_tag(annotation or "", name))
            if failure is not None:
                errors.append(failure)
            elif is_struct(value) and id(value) not in seen:
                # Cycles: each struct instance is walked once per call.
                seen.add(id(value))
                self._walk(value, path, errors, seen)

    def _field_annotations(self, obj: Any) -> list[tuple[str, Any]]:
        if isinstance(obj, BaseModel):
            annotations: list[tuple[str, Any]] = []
            for name, info in type(obj).model_fields.items():
                extra = info.json_schema_extra
                annotations.append((name, extra.get(self._tag_name) if isinstance(extra, dict) else None))
            return annotations
        return [(f.name, f.metadata.get(self._tag_name)) for f in dataclasses.fields(obj)]

    def _check_field(
        self,
        obj: Any,
        name: str,
        path: str,
        value: Any,
        rules: list[TagRule],
    ) -> FieldError | None:
        for rule in rules:
            if rule.name == OMIT_EMPTY:
                if not has_value(value):
                    return None
                continue

            fn = self._rules.get(rule.name)
            if fn is None:
                raise UndefinedRuleError(rule.name, name)

            fl = FieldLevel(
                field=value,
                param=rule.param,
                field_name=name,
                namespace=path,
                parent=obj,
            )
            if not fn(fl):
                return FieldError(
                    field=name,
                    namespace=path,
                    tag=rule.name,
                    value=value,
                    param=rule.param,
                )
        return None
