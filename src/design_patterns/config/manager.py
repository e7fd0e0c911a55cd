"""Configuration management for the demos."""
from __future__ import annotations

import threading
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from design_patterns.config.loader import ConfigurationLoader
from design_patterns.config.schemas import AppConfig, FactoryConfig, LoggingConfig, SingletonConfig
from design_patterns.domain.core.exceptions import ConfigurationError
from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.patterns.singleton_access import get_singleton

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Loads lazily on first access: file (explicit or default location),
    then environment overrides, then validation into ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    @property
    def logging(self) -> LoggingConfig:
        return self.app_config.logging

    @property
    def factory(self) -> FactoryConfig:
        return self.app_config.factory

    @property
    def singleton(self) -> SingletonConfig:
        return self.app_config.singleton

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)
        else:
            config_data = self._loader.load_configuration()

        config_data = self._loader.apply_environment_overrides(config_data)

        try:
            config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
                if error["type"] == "missing"
            ]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e

        logger.debug("Configuration loaded", config_file=self._config_file)
        return config


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    ``config_file`` is only honoured by the call that creates the manager.
    """
    return get_singleton(ConfigurationManager, config_file)
