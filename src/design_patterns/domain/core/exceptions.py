# src/design_patterns/domain/core/exceptions.py
from typing import Any, List, Optional


class DesignPatternsError(Exception):
    """Base exception for all errors raised by the demos."""
    pass


class ValidationError(DesignPatternsError):
    """Raised when an argument or registration fails validation."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DesignPatternsError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
