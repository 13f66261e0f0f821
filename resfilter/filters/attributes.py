#!/usr/bin/env python3
"""Resource attributes and string operations used by filters.

A resource is any object with a ``name`` and a path-like string form, such
as :class:`pathlib.Path` or :class:`os.DirEntry`. Filters never modify it.

Example:
    >>> from pathlib import Path
    >>> ResourceAttribute.NAME_IGNORING_CASE.get(Path("/src/Main.java"))
    'Main.java'
    >>> ResourceAttribute.PATH.get(Path("/src/Main.java"))
    '/src/Main.java'
"""

import os
from enum import Enum
from typing import Callable, Dict, Protocol, runtime_checkable


@runtime_checkable
class Resource(Protocol):
    """A file or folder that can be filtered."""

    @property
    def name(self) -> str:
        ...


def resource_name(resource: Resource) -> str:
    """Return the short name of a resource."""
    return resource.name


def resource_path(resource: Resource) -> str:
    """Return the full path of a resource.

    ``os.PathLike`` resources use their file system path, anything else its
    string form.
    """
    if isinstance(resource, os.PathLike):
        return os.fsdecode(os.fspath(resource))
    return str(resource)


class StringOperation(Enum):
    """Comparison applied between an attribute and a literal."""

    STARTS = "starts"
    ENDS = "ends"
    CONTAINS = "contains"
    EQUALS = "equals"

    def apply(self, attribute_string: str, match_string: str) -> bool:
        """Compare an attribute string against a literal."""
        return _COMPARATORS[self](attribute_string, match_string)


_COMPARATORS: Dict[StringOperation, Callable[[str, str], bool]] = {
    StringOperation.STARTS: str.startswith,
    StringOperation.ENDS: str.endswith,
    StringOperation.CONTAINS: lambda attribute_string, match_string: match_string
    in attribute_string,
    StringOperation.EQUALS: str.__eq__,
}


class ResourceAttribute(Enum):
    """Attributes that can be used to filter resources.

    Each value is a ``(facet, ignore_case)`` pair.
    """

    NAME = ("name", False)
    NAME_IGNORING_CASE = ("name", True)
    PATH = ("path", False)
    PATH_IGNORING_CASE = ("path", True)

    def __init__(self, facet: str, ignore_case: bool):
        self.facet = facet
        self.ignore_case = ignore_case

    def get(self, resource: Resource) -> str:
        """Extract this attribute from a resource."""
        return _EXTRACTORS[self.facet](resource)

    def fold(self, value: str) -> str:
        """Lower-case a value when this attribute ignores case."""
        return value.lower() if self.ignore_case else value


_EXTRACTORS: Dict[str, Callable[[Resource], str]] = {
    "name": resource_name,
    "path": resource_path,
}
