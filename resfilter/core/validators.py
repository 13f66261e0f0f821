"""
ResFilter Core: Input Validators.

This module provides validation functions for attribute selectors, literal
values and declarative filter definitions.
"""
import re
from typing import Any, Iterable, Tuple

from resfilter.core.constants import ConfigKey, ErrorCode, Limits, Preset, Selector, StepOperation


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


def validate_attribute(attribute: Any) -> bool:
    """Validate that an attribute selector was supplied.

    Args:
        attribute: Attribute selector to validate

    Returns:
        True if valid

    Raises:
        ValidationError: If the attribute is missing or empty
    """
    if attribute is None:
        raise ValidationError("Attribute must not be null")

    if not attribute:
        raise ValidationError("Attribute must not be empty")

    return True


def validate_literals(values: Iterable[Any]) -> Tuple[str, ...]:
    """Validate literal values passed to a builder call.

    An empty sequence is valid.

    Args:
        values: Literal values to validate

    Returns:
        The literals as a tuple

    Raises:
        ValidationError: If any literal is not a string
    """
    literals = tuple(values)
    for i, value in enumerate(literals):
        if not isinstance(value, str):
            raise ValidationError(
                f"Literal at position {i} must be string, got {type(value).__name__}"
            )
    return literals


def validate_filter_name(name: str) -> bool:
    """Validate a filter name.

    Args:
        name: Filter name to validate

    Returns:
        True if valid

    Raises:
        ValidationError: If name is invalid
    """
    if not name:
        raise ValidationError("Filter name cannot be empty")

    if not isinstance(name, str):
        raise ValidationError(f"Filter name must be string, got {type(name)}")

    if not re.match(r"^[a-zA-Z][a-zA-Z0-9_.-]*$", name):
        raise ValidationError(
            f"Invalid filter name: {name}. Must start with letter and contain only "
            "letters, numbers, underscore, dot, and hyphen"
        )

    if len(name) > Limits.MAX_FILTER_NAME_LENGTH:
        raise ValidationError(
            f"Filter name exceeds maximum length ({Limits.MAX_FILTER_NAME_LENGTH})"
        )

    return True


def validate_step(step: Any) -> bool:
    """Validate a single filter definition step.

    A step is a one-key mapping from a builder operation to a literal or a
    list of literals.

    Args:
        step: Step to validate

    Returns:
        True if valid

    Raises:
        ValidationError: If step is invalid
    """
    if not isinstance(step, dict):
        raise ValidationError("Step must be a dictionary")

    if len(step) != 1:
        raise ValidationError(f"Step must have exactly one operation, got {len(step)}")

    operation, values = next(iter(step.items()))
    if operation not in StepOperation.ALL:
        raise ValidationError(
            f"Invalid step operation: {operation}. Must be one of {list(StepOperation.ALL)}"
        )

    if isinstance(values, str):
        values = [values]
    if not isinstance(values, list):
        raise ValidationError(f"Values for '{operation}' must be a string or list of strings")

    validate_literals(values)

    for value in values:
        if len(value) > Limits.MAX_LITERAL_LENGTH:
            raise ValidationError(
                f"Value for '{operation}' exceeds maximum length ({Limits.MAX_LITERAL_LENGTH})"
            )

    return True


def validate_filter_config(definition: Any) -> bool:
    """Validate a declarative filter definition.

    Args:
        definition: Preset name or filter definition dictionary

    Returns:
        True if valid

    Raises:
        ValidationError: If definition is invalid
    """
    if isinstance(definition, str):
        if definition not in Preset.ALL:
            raise ValidationError(
                f"Unknown preset filter: {definition}. Must be one of {list(Preset.ALL)}"
            )
        return True

    if not isinstance(definition, dict):
        raise ValidationError("Filter definition must be a preset name or a dictionary")

    unknown_fields = set(definition.keys()) - {ConfigKey.FILTER_ON, ConfigKey.FILTER_STEPS}
    if unknown_fields:
        raise ValidationError(
            f"Unknown filter definition fields: {', '.join(sorted(map(str, unknown_fields)))}"
        )

    # Optional field: on (attribute selector)
    if ConfigKey.FILTER_ON in definition:
        selector = definition[ConfigKey.FILTER_ON]
        if selector not in Selector.ALL:
            raise ValidationError(
                f"Invalid attribute selector: {selector}. Must be one of {list(Selector.ALL)}"
            )

    # Optional field: steps (list)
    steps = definition.get(ConfigKey.FILTER_STEPS, [])
    if not isinstance(steps, list):
        raise ValidationError("Steps must be a list")

    if len(steps) > Limits.MAX_STEPS_PER_FILTER:
        raise ValidationError(f"Filter exceeds maximum steps ({Limits.MAX_STEPS_PER_FILTER})")

    for i, step in enumerate(steps):
        try:
            validate_step(step)
        except ValidationError as e:
            raise ValidationError(f"Invalid step at index {i}: {e}")

    return True

