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
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test that unknown variables without default are left alone."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_default_used_when_unset(self):
        """Test ${VAR:default} falls back to the default."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_DIR:logs}/app.log") == "logs/app.log"

    def test_default_ignored_when_set(self):
        """Test ${VAR:default} prefers the environment value."""
        with patch.dict(os.environ, {"LOG_DIR": "/var/log"}):
            assert expand_env_vars("${LOG_DIR:logs}/app.log") == "/var/log/app.log"

    def test_empty_default(self):
        """Test ${VAR:} expands to an empty string when unset."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("prefix-${MISSING:}") == "prefix-"

    def test_expand_nested_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file": {"path": "$TEST_VAR/app.log"}},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file": {"path": "/test/path/app.log"}},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"DESIGN_PATTERNS_LOGDIR": "/opt/demo"}):
            config = {"logging": {"file": {"path": "${DESIGN_PATTERNS_LOGDIR:logs}/d.log"}}}
            result = expand_config_env_vars(config)
            assert result["logging"]["file"]["path"] == "/opt/demo/d.log"
            assert config["logging"]["file"]["path"] == "${DESIGN_PATTERNS_LOGDIR:logs}/d.log"
