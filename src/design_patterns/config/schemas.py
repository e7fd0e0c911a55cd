"""Application configuration schema."""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/design_patterns.log", description="Log file path")
    max_size_mb: int = Field(10, gt=0, description="Rotate after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Number of rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(LogLevel.WARNING.value, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where logs are written")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Accept log levels case-insensitively."""
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {v}")
        return level


class FactoryConfig(BaseModel):
    """Extensible factory demo configuration."""

    level_file: str = Field("level1.txt", description="Newline-delimited object type names")


class SingletonConfig(BaseModel):
    """Thread-safe singleton demo configuration."""

    thread_delay_seconds: float = Field(
        1.0, ge=0, description="How long each thread sleeps before racing for the instance"
    )
    thread_values: List[str] = Field(
        default_factory=lambda: ["FOO", "BAR"],
        description="Value each racing thread passes to get_instance",
    )

    @field_validator("thread_values")
    @classmethod
    def validate_thread_values(cls, v: List[str]) -> List[str]:
        """At least two threads are needed to show the race."""
        if len(v) < 2:
            raise ValueError("thread_values needs at least two entries")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    factory: FactoryConfig = Field(default_factory=FactoryConfig)
    singleton: SingletonConfig = Field(default_factory=SingletonConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create and validate configuration from a plain dictionary."""
        return cls.model_validate(data)
