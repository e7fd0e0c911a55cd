"""Configuration loading from files and environment variables."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from design_patterns.config.utils.env_expansion import expand_config_env_vars
from design_patterns.domain.core.exceptions import ConfigurationError
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConfigurationLoader:
    """
    Loads raw configuration dictionaries.

    Sources, in increasing priority:
    - a JSON or YAML file (explicit path, ``$DESIGN_PATTERNS_CONFIG`` or a
      ``design_patterns.{yaml,yml,json}`` file in the working directory)
    - ``DESIGN_PATTERNS_*`` environment variables
    """

    CONFIG_ENV_VAR = "DESIGN_PATTERNS_CONFIG"
    DEFAULT_FILENAMES = ("design_patterns.yaml", "design_patterns.yml", "design_patterns.json")

    ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
        "DESIGN_PATTERNS_LOG_LEVEL": ("logging", "level"),
        "DESIGN_PATTERNS_LEVEL_FILE": ("factory", "level_file"),
        "DESIGN_PATTERNS_THREAD_DELAY": ("singleton", "thread_delay_seconds"),
    }

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_file: Path to the file; ``.yaml``/``.yml`` is parsed as YAML,
                anything else as JSON

        Returns:
            Configuration dictionary with environment references expanded

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping, got {type(data).__name__}"
            )

        logger.debug(f"Loaded configuration from {config_file}")
        return expand_config_env_vars(data)

    def find_config_file(self) -> Optional[str]:
        """Find the configuration file from the environment or the default locations."""
        env_path = os.environ.get(self.CONFIG_ENV_VAR)
        if env_path:
            return env_path

        for filename in self.DEFAULT_FILENAMES:
            if os.path.isfile(filename):
                return filename
        return None

    def load_configuration(self) -> Dict[str, Any]:
        """Load configuration from the first default location, or an empty dict."""
        config_file = self.find_config_file()
        if config_file is None:
            logger.debug("No configuration file found, using defaults")
            return {}
        return self.load_from_file(config_file)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply ``DESIGN_PATTERNS_*`` environment variables on top of ``config_data``.

        Returns:
            A new dictionary; the input is left unchanged
        """
        result = copy.deepcopy(config_data)
        applied: List[str] = []

        for env_var, (section, key) in self.ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            section_data = result.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
            section_data[key] = value
            applied.append(env_var)

        if applied:
            logger.debug(f"Applied environment overrides: {', '.join(applied)}")
        return result
