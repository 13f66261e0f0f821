"""ResFilter - fluent name and path filters for files and folders.

Example:
    >>> from resfilter import names, paths
    >>> python_sources = paths().ending(".py").not_containing("/tests/")
    >>> visible = [p for p in Path("src").rglob("*") if python_sources.match(p)]
"""

from resfilter.core.constants import RESFILTER_VERSION, ErrorCode
from resfilter.core.validators import ValidationError
from resfilter.filters import (
    AnyOf,
    AttributeFilter,
    Not,
    ResourceAttribute,
    StringOperation,
    StringPredicate,
    build_filter,
    case_sensitive_names,
    case_sensitive_paths,
    filter_resources,
    get_for,
    hidden,
    load_filters,
    load_filters_from_config,
    names,
    non_hidden,
    paths,
)

__version__ = RESFILTER_VERSION

__all__ = [
    "__version__",
    "ErrorCode",
    "ValidationError",
    "ResourceAttribute",
    "StringOperation",
    "StringPredicate",
    "AnyOf",
    "Not",
    "AttributeFilter",
    "get_for",
    "names",
    "case_sensitive_names",
    "paths",
    "case_sensitive_paths",
    "hidden",
    "non_hidden",
    "filter_resources",
    "build_filter",
    "load_filters",
    "load_filters_from_config",
]
