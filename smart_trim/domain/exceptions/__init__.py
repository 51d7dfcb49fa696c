"""
Exception hierarchy for smart_trim.

Trimming itself is total over its input domain; the only failures are
invalid configuration values caught when a config object is built.
"""

from typing import Any, Dict, Optional


class SmartTrimError(Exception):
    """
    Base exception for all smart_trim errors.

    Carries an error code and a context dict for logging.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "original_exception": (
                str(self.original_exception) if self.original_exception else None
            ),
        }


class ConfigurationError(SmartTrimError):
    """Raised when a trim configuration value is invalid."""

    def __init__(self, message: str, config_key: str, value: Any = None, **kwargs):
        super().__init__(
            message=f"Configuration error for '{config_key}': {message}",
            error_code="CONFIG_ERROR",
            context={"config_key": config_key, "value": str(value)},
            **kwargs,
        )


__all__ = [
    "SmartTrimError",
    "ConfigurationError",
]
