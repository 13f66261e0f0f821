#!/usr/bin/env python3
"""Tests for package constants."""

from resfilter.core.constants import (
    DEFAULT_CONFIG,
    HIDDEN_PREFIX,
    RESFILTER_VERSION,
    ConfigKey,
    ErrorCode,
    Preset,
    Selector,
    StepOperation,
)
from resfilter.filters.builder import AttributeFilter
from resfilter.filters import builder


class TestErrorCode:
    """Tests for ErrorCode enum."""

    def test_codes_in_range(self):
        """Test all error codes fit the 0-9 range."""
        assert all(0 <= code <= 9 for code in ErrorCode)

    def test_invalid_input(self):
        """Test the code used for validation failures."""
        assert ErrorCode.INVALID_INPUT == 1


class TestNames:
    """Tests for selector, step and preset names."""

    def test_selectors_are_entry_points(self):
        """Test every selector names a builder entry point."""
        for selector in Selector.ALL:
            assert isinstance(getattr(builder, selector)(), AttributeFilter)

    def test_steps_are_builder_methods(self):
        """Test every step operation names an AttributeFilter method."""
        for operation in StepOperation.ALL:
            assert callable(getattr(AttributeFilter, operation))

    def test_presets_are_entry_points(self):
        """Test every preset names a builder function."""
        for preset in Preset.ALL:
            assert isinstance(getattr(builder, preset)(), AttributeFilter)


class TestDefaults:
    """Tests for default configuration values."""

    def test_version(self):
        """Test version string format."""
        assert RESFILTER_VERSION.count(".") == 2

    def test_hidden_prefix(self):
        """Test the hidden resource prefix."""
        assert HIDDEN_PREFIX == "."

    def test_default_config(self):
        """Test default configuration layout."""
        root = DEFAULT_CONFIG[ConfigKey.ROOT]
        assert root[ConfigKey.LOGGING][ConfigKey.LOG_LEVEL] == "INFO"
        assert root[ConfigKey.LOGGING][ConfigKey.LOG_FILE] is None
        assert root[ConfigKey.FILTERS] == {}
