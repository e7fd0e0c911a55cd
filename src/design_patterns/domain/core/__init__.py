"""Core domain types shared by every demo."""

from .exceptions import ConfigurationError, DesignPatternsError, ValidationError

__all__ = ["ConfigurationError", "DesignPatternsError", "ValidationError"]
