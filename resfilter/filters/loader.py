#!/usr/bin/env python3
"""Build filters from declarative definitions.

A definition names the attribute to filter on and the builder calls to
apply, one per step:

    sources:
      on: paths
      steps:
        - ending: [".java", ".kt"]
        - not_containing: test
    dotfiles: hidden

Example:
    >>> config = ConfigManager("resfilter.yaml")
    >>> filters = load_filters_from_config(config)
    >>> filters["sources"].match(Path("/src/Main.java"))
    True
"""

from typing import Any, Callable, Dict, Optional

from resfilter.core.constants import ConfigKey, Preset, Selector
from resfilter.core.validators import (
    ValidationError,
    validate_filter_config,
    validate_filter_name,
)
from resfilter.filters import builder
from resfilter.filters.builder import AttributeFilter
from resfilter.infrastructure.config_manager import ConfigManager
from resfilter.infrastructure.logger import Logger, get_logger

_SELECTORS: Dict[str, Callable[[], AttributeFilter]] = {
    Selector.NAMES: builder.names,
    Selector.CASE_SENSITIVE_NAMES: builder.case_sensitive_names,
    Selector.PATHS: builder.paths,
    Selector.CASE_SENSITIVE_PATHS: builder.case_sensitive_paths,
}

_PRESETS: Dict[str, Callable[[], AttributeFilter]] = {
    Preset.HIDDEN: builder.hidden,
    Preset.NON_HIDDEN: builder.non_hidden,
}


def build_filter(definition: Any) -> AttributeFilter:
    """Build one filter from its definition.

    Args:
        definition: Preset name or mapping with optional ``on`` and ``steps``

    Returns:
        The built filter

    Raises:
        ValidationError: If the definition is invalid
    """
    validate_filter_config(definition)

    if isinstance(definition, str):
        return _PRESETS[definition]()

    resource_filter = _SELECTORS[definition.get(ConfigKey.FILTER_ON, Selector.NAMES)]()
    for step in definition.get(ConfigKey.FILTER_STEPS, []):
        operation, values = next(iter(step.items()))
        if isinstance(values, str):
            values = [values]
        resource_filter = getattr(resource_filter, operation)(*values)

    return resource_filter


def load_filters(
    definitions: Dict[str, Any], logger: Optional[Logger] = None
) -> Dict[str, AttributeFilter]:
    """Build a set of named filters.

    Args:
        definitions: Mapping of filter name to definition
        logger: Logger to report progress to, defaults to the global logger

    Returns:
        Mapping of filter name to built filter

    Raises:
        ValidationError: If any name or definition is invalid
    """
    logger = logger or get_logger()

    if not isinstance(definitions, dict):
        raise ValidationError("Filters must be a dictionary")

    filters: Dict[str, AttributeFilter] = {}
    for name, definition in definitions.items():
        with logger.add_context(filter=name):
            try:
                validate_filter_name(name)
                filters[name] = build_filter(definition)
            except ValidationError as e:
                logger.warning("Rejected filter definition", reason=str(e))
                raise ValidationError(f"Invalid filter '{name}': {e}", e.error_code)
            logger.debug("Built filter")

    return filters


def load_filters_from_config(
    config: ConfigManager, logger: Optional[Logger] = None
) -> Dict[str, AttributeFilter]:
    """Build the filters defined in the ``resfilter.filters`` config section.

    Args:
        config: ConfigManager holding the filter definitions
        logger: Logger to report progress to, defaults to the global logger

    Returns:
        Mapping of filter name to built filter
    """
    definitions = config.get(f"{ConfigKey.ROOT}.{ConfigKey.FILTERS}", default={})
    return load_filters(definitions, logger=logger)
