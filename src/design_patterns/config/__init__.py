"""Configuration package.

Only the schemas are exported here; import the manager from
``design_patterns.config.manager`` so that logging can depend on the schemas
without a circular import.
"""

from .schemas import (
    AppConfig,
    FactoryConfig,
    LogDestination,
    LogFileConfig,
    LoggingConfig,
    LogLevel,
    SingletonConfig,
)

__all__ = [
    "AppConfig",
    "FactoryConfig",
    "LogDestination",
    "LogFileConfig",
    "LoggingConfig",
    "LogLevel",
    "SingletonConfig",
]
