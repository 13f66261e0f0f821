"""
ResFilter Core: Constants

This module provides package-wide constants and error codes
shared by the filter builder, the loader and the infrastructure layer.
"""
from enum import IntEnum

# Version information
RESFILTER_VERSION = "1.0.0"


# Error codes
class ErrorCode(IntEnum):
    """Standardized error codes for ResFilter operations."""

    INVALID_INPUT = 1  # Bad attribute, literal or filter definition
    NOT_FOUND = 2  # Config file doesn't exist
    INTERNAL_ERROR = 6  # Config file could not be read


# Name prefix marking hidden resources
HIDDEN_PREFIX = "."


class Limits:
    """Limits applied to declarative filter definitions."""

    MAX_FILTER_NAME_LENGTH = 100
    MAX_STEPS_PER_FILTER = 64
    MAX_LITERAL_LENGTH = 4096


# Attribute selectors accepted by filter definitions
class Selector:
    """Names of the attribute entry points."""

    NAMES = "names"
    CASE_SENSITIVE_NAMES = "case_sensitive_names"
    PATHS = "paths"
    CASE_SENSITIVE_PATHS = "case_sensitive_paths"

    ALL = (NAMES, CASE_SENSITIVE_NAMES, PATHS, CASE_SENSITIVE_PATHS)


# Builder operations accepted as filter definition steps
class StepOperation:
    """Names of the chain builder methods."""

    STARTING = "starting"
    NOT_STARTING = "not_starting"
    ENDING = "ending"
    NOT_ENDING = "not_ending"
    CONTAINING = "containing"
    NOT_CONTAINING = "not_containing"
    MATCHING = "matching"
    NOT_MATCHING = "not_matching"

    ALL = (
        STARTING,
        NOT_STARTING,
        ENDING,
        NOT_ENDING,
        CONTAINING,
        NOT_CONTAINING,
        MATCHING,
        NOT_MATCHING,
    )


# Preset filters that can be referenced by name
class Preset:
    """Names of the ready-made filters."""

    HIDDEN = "hidden"
    NON_HIDDEN = "non_hidden"

    ALL = (HIDDEN, NON_HIDDEN)


# Configuration keys
class ConfigKey:
    """Configuration key constants."""

    # Top-level keys
    ROOT = "resfilter"
    LOGGING = "logging"
    FILTERS = "filters"

    # Filter definition keys
    FILTER_ON = "on"
    FILTER_STEPS = "steps"

    # Logging configuration
    LOG_LEVEL = "level"
    LOG_FILE = "file"


# Default configuration values
DEFAULT_CONFIG = {
    ConfigKey.ROOT: {
        ConfigKey.LOGGING: {
            ConfigKey.LOG_LEVEL: "INFO",
            ConfigKey.LOG_FILE: None,
        },
        ConfigKey.FILTERS: {},
    }
}
