"""Public entry point: validate a struct and get back field-keyed messages."""

from __future__ import annotations

from typing import Any

from loguru import logger

from custom_validator.engine import ValidationEngine, get_default_engine
from custom_validator.messages import error_for_tag
from custom_validator.traversal.errors import InvalidValidationError, ValidationErrors


def validate_my_struct(
    obj: Any,
    *,
    engine: ValidationEngine | None = None,
    strict: bool = False,
) -> dict[str, str]:
    """Validate ``obj`` and map each failing field to its error message.

    Args:
        obj: Pydantic model or dataclass instance with annotated fields.
        engine: Engine to validate with. Defaults to the process-wide one.
        strict: Raise InvalidValidationError for targets that cannot be
            introspected instead of returning an empty mapping.

    Returns:
        Field name to message. Empty when every rule passed. If two nested
        structs report the same field name, the first failure is kept.

    Raises:
        InvalidValidationError: Only when ``strict`` is True.
        ConfigurationError: For unknown rule tags or unparsable annotations.
        re.error: For a malformed ``regex`` pattern.
    """
    engine = engine or get_default_engine()
    try:
        engine.validate_struct(obj)
    except ValidationErrors as exc:
        messages: dict[str, str] = {}
        for fe in exc:
            if fe.field in messages:
                logger.debug("Dropping later failure for '{}': {}", fe.field, fe.namespace)
                continue
            messages[fe.field] = error_for_tag(fe)
        return messages
    except InvalidValidationError as exc:
        if strict:
            raise
        logger.warning("Skipping validation of unsupported target: {}", exc)
        return {}
    return {}


ValidateMyStruct = validate_my_struct
