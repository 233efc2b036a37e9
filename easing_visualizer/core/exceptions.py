"""
Exception hierarchy for the easing visualizer.

Every error carries a message and a ``details`` dict so callers can
inspect what went wrong without parsing strings.
"""

from typing import Any, Dict, Optional


class EasingVisualizerException(Exception):
    """Base exception for all easing visualizer errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class FunctionNotFoundError(EasingVisualizerException, LookupError):
    """Unknown function id. The catalog is closed, so this is a caller bug."""

    def __init__(self, function_id: str, **kwargs):
        details = kwargs.copy()
        details["function_id"] = function_id
        super().__init__(f"Unknown function: {function_id}", details)
        self.function_id = function_id


class ParameterError(EasingVisualizerException):
    """Invalid argument that is not covered by the silent clamp policy."""

    def __init__(self, message: str, parameter=None, value=None, **kwargs):
        details = kwargs.copy()
        if parameter is not None:
            details["parameter"] = parameter
        if value is not None:
            details["value"] = value
        super().__init__(message, details)


class RegistryError(EasingVisualizerException):
    """Registry could not be built from the given descriptors."""


class SelectionError(EasingVisualizerException):
    """A comparison session rejected a selection."""

    def __init__(self, message: str, function_id=None, **kwargs):
        details = kwargs.copy()
        if function_id is not None:
            details["function_id"] = function_id
        super().__init__(message, details)


class ConfigError(EasingVisualizerException):
    """Configuration file is unreadable or holds invalid values."""

    def __init__(self, message: str, path=None, **kwargs):
        details = kwargs.copy()
        if path is not None:
            details["path"] = str(path)
        super().__init__(message, details)


__all__ = [
    "EasingVisualizerException",
    "FunctionNotFoundError",
    "ParameterError",
    "RegistryError",
    "SelectionError",
    "ConfigError",
]
