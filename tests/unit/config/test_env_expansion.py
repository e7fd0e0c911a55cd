"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from design_patterns.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/level1.txt") == "/test/path/level1.txt"

    def test_expand_nonexistent_env_var(self):
        """Unset variables without a default are left untouched."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_LEVEL:INFO}") == "INFO"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            assert expand_env_vars("${LOG_LEVEL:INFO}") == "DEBUG"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("prefix${UNSET:}") == "prefix"

    def test_expand_nested_values(self):
        """Dictionaries and lists are walked recursively."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "factory": {"level_file": "$TEST_VAR/level1.txt"},
                "singleton": {"thread_values": ["$TEST_VAR", "BAR"], "thread_delay_seconds": 1},
            }
            result = expand_config_env_vars(config)

        assert result == {
            "factory": {"level_file": "/test/path/level1.txt"},
            "singleton": {"thread_values": ["/test/path", "BAR"], "thread_delay_seconds": 1},
        }

    def test_non_string_values_unchanged(self):
        assert expand_env_vars(42) == 42
        assert expand_env_vars(None) is None
