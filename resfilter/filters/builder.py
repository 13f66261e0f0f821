#!/usr/bin/env python3
"""Fluent builder for resource filters.

Filters can be built on resource names or paths, ignoring case or not.
Each builder call returns a new :class:`AttributeFilter` stage linked to the
previous one, so successive calls must all match (AND). A single call given
several literals matches if any of them matches (OR); the negated forms
match only if none of them does.

Example:
    >>> from pathlib import Path
    >>> sources = paths().ending(".java").not_containing("test")
    >>> sources.match(Path("/src/Main.java"))
    True
    >>> sources.match(Path("/src/test/MainTest.java"))
    False
    >>> hidden().match(Path(".gitignore"))
    True
"""

from dataclasses import dataclass
from typing import Optional

from resfilter.core.constants import HIDDEN_PREFIX
from resfilter.core.validators import ValidationError, validate_attribute, validate_literals
from resfilter.filters.attributes import Resource, ResourceAttribute, StringOperation
from resfilter.filters.predicates import Not, Predicate, any_of, evaluate


@dataclass(frozen=True)
class AttributeFilter:
    """A filter stage and the builder used to further restrict it.

    A stage matches if its parent stage (when present) and its own
    predicate (when present) both match. The bare stage returned by the
    entry points has neither and matches every resource.
    """

    attribute: ResourceAttribute
    parent: Optional["AttributeFilter"] = None
    predicate: Optional[Predicate] = None

    def starting(self, *prefix: str) -> "AttributeFilter":
        """Filter attributes starting with any of the given prefixes."""
        return self._then(StringOperation.STARTS, prefix)

    def not_starting(self, *prefix: str) -> "AttributeFilter":
        """Filter attributes starting with none of the given prefixes."""
        return self._then(StringOperation.STARTS, prefix, negate=True)

    def ending(self, *postfix: str) -> "AttributeFilter":
        """Filter attributes ending with any of the given postfixes."""
        return self._then(StringOperation.ENDS, postfix)

    def not_ending(self, *postfix: str) -> "AttributeFilter":
        """Filter attributes ending with none of the given postfixes."""
        return self._then(StringOperation.ENDS, postfix, negate=True)

    def containing(self, *content: str) -> "AttributeFilter":
        """Filter attributes containing any of the given strings."""
        return self._then(StringOperation.CONTAINS, content)

    def not_containing(self, *content: str) -> "AttributeFilter":
        """Filter attributes containing none of the given strings."""
        return self._then(StringOperation.CONTAINS, content, negate=True)

    def matching(self, *value: str) -> "AttributeFilter":
        """Filter attributes equal to any of the given values.

        This is an exact comparison, not a pattern match.
        """
        return self._then(StringOperation.EQUALS, value)

    def not_matching(self, *value: str) -> "AttributeFilter":
        """Filter attributes equal to none of the given values."""
        return self._then(StringOperation.EQUALS, value, negate=True)

    def _then(
        self, operation: StringOperation, values: tuple, negate: bool = False
    ) -> "AttributeFilter":
        predicate: Predicate = any_of(self.attribute, operation, validate_literals(values))
        if negate:
            predicate = Not(predicate)
        return AttributeFilter(self.attribute, parent=self, predicate=predicate)

    def match(self, resource: Resource) -> bool:
        """Check if a resource passes this stage and every stage before it.

        Args:
            resource: Resource to test

        Returns:
            True if the resource matches
        """
        stages = []
        stage: Optional[AttributeFilter] = self
        while stage is not None:
            stages.append(stage)
            stage = stage.parent

        # Root first, stopping at the first stage that fails
        for stage in reversed(stages):
            if stage.predicate is not None and not evaluate(stage.predicate, resource):
                return False
        return True

    __call__ = match


def get_for(attribute: ResourceAttribute) -> AttributeFilter:
    """Start filtering on the given attribute.

    Args:
        attribute: The attribute to filter on

    Returns:
        A bare filter stage that matches everything

    Raises:
        ValidationError: If the attribute is missing or not a ResourceAttribute
    """
    validate_attribute(attribute)
    if not isinstance(attribute, ResourceAttribute):
        raise ValidationError(
            f"Attribute must be a ResourceAttribute, got {type(attribute).__name__}"
        )
    return AttributeFilter(attribute)


def names() -> AttributeFilter:
    """Start filtering on resource names. Matching ignores case."""
    return get_for(ResourceAttribute.NAME_IGNORING_CASE)


def case_sensitive_names() -> AttributeFilter:
    """Start filtering on resource names. Matching is case sensitive."""
    return get_for(ResourceAttribute.NAME)


def paths() -> AttributeFilter:
    """Start filtering on resource paths. Matching ignores case."""
    return get_for(ResourceAttribute.PATH_IGNORING_CASE)


def case_sensitive_paths() -> AttributeFilter:
    """Start filtering on resource paths. Matching is case sensitive."""
    return get_for(ResourceAttribute.PATH)


def hidden() -> AttributeFilter:
    """Filter hidden resources, whose names start with '.'."""
    return names().starting(HIDDEN_PREFIX)


def non_hidden() -> AttributeFilter:
    """Filter resources whose names do not start with '.'."""
    return names().not_starting(HIDDEN_PREFIX)
