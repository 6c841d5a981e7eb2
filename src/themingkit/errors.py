"""Error types raised by the theming core.

Every failure the resolver, descriptor builder, or preference layer can report
is an :class:`InvalidArgumentError`. Errors carry a machine-readable code so
host applications can map them onto their own diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ErrorCode:
    """Constants for error codes carried by :class:`ThemingError`."""

    MISSING_THEME_HANDLE = "missing_theme_handle"
    INVALID_CONFIGURATION = "invalid_configuration"
    INVALID_COLOR = "invalid_color"
    INVALID_PLATFORM_TIER = "invalid_platform_tier"
    UNKNOWN_PREFERENCE_KEY = "unknown_preference_key"


@dataclass
class ThemingError(ValueError):
    """Base exception for theming failures.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ValueError.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


@dataclass
class InvalidArgumentError(ThemingError):
    """Raised when callers pass missing handles or malformed configuration."""

    error_code: str = field(default=ErrorCode.INVALID_CONFIGURATION)
    message: str = field(default="Invalid theming argument")
    details: dict[str, Any] = field(default_factory=dict)


__all__ = ["ErrorCode", "InvalidArgumentError", "ThemingError"]
