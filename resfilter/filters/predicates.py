#!/usr/bin/env python3
"""Immutable predicates evaluated against resources.

This module provides the building blocks returned by the filter builder:
- StringPredicate: one attribute/operation/literal comparison
- AnyOf: matches if any child predicate matches (OR)
- Not: inverts a child predicate

Predicates are frozen and hold tuples, so they can be shared between threads
and reused in several filters. :func:`evaluate` dispatches on the predicate
variant; any other object with a ``match(resource)`` method is evaluated by
calling it.

Example:
    >>> from pathlib import Path
    >>> java = StringPredicate(ResourceAttribute.NAME_IGNORING_CASE, StringOperation.ENDS, ".java")
    >>> Not(AnyOf((java,))).match(Path("Main.JAVA"))
    False
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, Tuple, TypeVar, Union

from resfilter.filters.attributes import Resource, ResourceAttribute, StringOperation

R = TypeVar("R", bound=Resource)


class ResourceFilter(Protocol):
    """Anything that can accept or reject a resource."""

    def match(self, resource: Resource) -> bool:
        ...


@dataclass(frozen=True)
class StringPredicate:
    """Compare one attribute of a resource against a literal."""

    attribute: ResourceAttribute
    operation: StringOperation
    value: str

    def match(self, resource: Resource) -> bool:
        return evaluate(self, resource)

    __call__ = match


@dataclass(frozen=True)
class AnyOf:
    """Match if at least one child predicate matches.

    An empty ``AnyOf`` never matches.
    """

    predicates: Tuple["Predicate", ...] = ()

    def match(self, resource: Resource) -> bool:
        return evaluate(self, resource)

    __call__ = match


@dataclass(frozen=True)
class Not:
    """Match if the child predicate does not."""

    predicate: "Predicate"

    def match(self, resource: Resource) -> bool:
        return evaluate(self, resource)

    __call__ = match


Predicate = Union[StringPredicate, AnyOf, Not, ResourceFilter]


def _evaluate_string(predicate: StringPredicate, resource: Resource) -> bool:
    attribute = predicate.attribute
    attribute_string = attribute.fold(attribute.get(resource))
    match_string = attribute.fold(predicate.value)
    return predicate.operation.apply(attribute_string, match_string)


def evaluate(predicate: Predicate, resource: Resource) -> bool:
    """Evaluate a predicate against a resource.

    Args:
        predicate: Predicate to evaluate
        resource: Resource to test

    Returns:
        True if the resource matches
    """
    if isinstance(predicate, StringPredicate):
        return _evaluate_string(predicate, resource)
    elif isinstance(predicate, AnyOf):
        return any(evaluate(child, resource) for child in predicate.predicates)
    elif isinstance(predicate, Not):
        return not evaluate(predicate.predicate, resource)

    return predicate.match(resource)


def any_of(
    attribute: ResourceAttribute, operation: StringOperation, values: Iterable[str]
) -> AnyOf:
    """Build an OR group with one string predicate per literal."""
    return AnyOf(tuple(StringPredicate(attribute, operation, value) for value in values))


def filter_resources(resources: Iterable[R], resource_filter: Predicate) -> Iterator[R]:
    """Yield the resources accepted by a filter.

    Args:
        resources: Resources to test, typically produced by a directory walk
        resource_filter: Filter to apply

    Yields:
        Each matching resource, in input order
    """
    for resource in resources:
        if evaluate(resource_filter, resource):
            yield resource
