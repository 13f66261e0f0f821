"""ResFilter Filters.

This package provides the resource filter grammar:
- ResourceAttribute / StringOperation: what to compare and how
- StringPredicate, AnyOf, Not: immutable predicates
- AttributeFilter: chained filter stages built fluently
- names(), paths(), hidden(), ...: entry points
- build_filter / load_filters: filters from declarative definitions
"""

from .attributes import Resource, ResourceAttribute, StringOperation, resource_name, resource_path
from .builder import (
    AttributeFilter,
    case_sensitive_names,
    case_sensitive_paths,
    get_for,
    hidden,
    names,
    non_hidden,
    paths,
)
from .loader import build_filter, load_filters, load_filters_from_config
from .predicates import (
    AnyOf,
    Not,
    Predicate,
    ResourceFilter,
    StringPredicate,
    any_of,
    evaluate,
    filter_resources,
)

__all__ = [
    # Attributes
    "Resource",
    "ResourceAttribute",
    "StringOperation",
    "resource_name",
    "resource_path",
    # Predicates
    "Predicate",
    "ResourceFilter",
    "StringPredicate",
    "AnyOf",
    "Not",
    "any_of",
    "evaluate",
    "filter_resources",
    # Builder
    "AttributeFilter",
    "get_for",
    "names",
    "case_sensitive_names",
    "paths",
    "case_sensitive_paths",
    "hidden",
    "non_hidden",
    # Loader
    "build_filter",
    "load_filters",
    "load_filters_from_config",
]
