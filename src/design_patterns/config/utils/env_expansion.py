"""Environment variable expansion for configuration values."""

import os
import re
from typing import Any, Dict

# Matches ${VAR}, ${VAR:default} and $VAR
_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _replace(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    value = os.environ.get(name)
    if value is not None:
        return value
    if match.group("default") is not None:
        return match.group("default")
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variable references in a value.

    Strings are expanded in place; dictionaries and lists are walked
    recursively. References to unset variables without a default are
    left untouched.

    Args:
        value: String, dict, list or any other value

    Returns:
        The value with references expanded
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variable references in every value of a config dictionary."""
    return expand_env_vars(config)
