"""Environment variable expansion for configuration values.

Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. References to variables
that are not set and carry no default are left untouched.
"""
import os
import re
from typing import Any, Dict

_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _replace_with_default(match: "re.Match[str]") -> str:
    name, default = match.group(1), match.group(2)
    return os.environ.get(name, default)


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in a configuration value.

    Args:
        value: String, dict, list or any other value

    Returns:
        The value with environment references expanded. Non-string leaves
        are returned unchanged.
    """
    if isinstance(value, str):
        return os.path.expandvars(_DEFAULT_PATTERN.sub(_replace_with_default, value))
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration dictionary."""
    return expand_env_vars(config)
