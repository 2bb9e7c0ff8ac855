"""Exception hierarchy for the dupFinder issue provider.

Only structurally fatal problems surface as exceptions. Recoverable problems in
the log (missing attributes, incomplete fragments) are reported through the
warning sink and never raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "ErrorDomain",
    "ErrorContext",
    "DupFinderIssuesError",
    "LogParseError",
    "ConfigurationError",
]


class ErrorDomain(Enum):
    """Error domains for categorization."""

    CONFIG = "config"  # Settings and file-link configuration
    XML = "xml"  # dupFinder log parsing
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Context information for errors."""

    domain: ErrorDomain
    component: str | None = None
    operation: str | None = None
    details: dict[str, Any] | None = None


class DupFinderIssuesError(Exception):
    """Base exception for all dupFinder issue provider errors."""

    def __init__(self, message: str, *, context: ErrorContext | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext(domain=ErrorDomain.UNKNOWN)
        self.cause = cause

    def __str__(self) -> str:
        base_msg = self.message
        if self.context.component:
            base_msg = f"[{self.context.component}] {base_msg}"
        if self.context.operation:
            base_msg = f"{base_msg} (operation: {self.context.operation})"
        return base_msg

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "message": self.message,
            "domain": self.context.domain.value,
            "component": self.context.component,
            "operation": self.context.operation,
            "details": self.context.details,
            "cause": str(self.cause) if self.cause else None,
        }


class LogParseError(DupFinderIssuesError):
    """Raised when a dupFinder log is not well-formed or holds a non-numeric value."""

    def __init__(
        self,
        message: str,
        *,
        element: str | None = None,
        attribute: str | None = None,
        value: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        context = ErrorContext(
            domain=ErrorDomain.XML,
            component="log_parser",
            operation="parse",
            details={"element": element, "attribute": attribute, "value": value},
        )
        super().__init__(message, context=context, cause=cause)
        self.element = element
        self.attribute = attribute
        self.value = value


class ConfigurationError(DupFinderIssuesError):
    """Raised when provider settings are missing or invalid."""

    def __init__(self, message: str, *, setting: str | None = None, source: str | None = None, cause: Exception | None = None) -> None:
        context = ErrorContext(
            domain=ErrorDomain.CONFIG,
            component="config",
            details={"setting": setting, "source": source},
        )
        super().__init__(message, context=context, cause=cause)
        self.setting = setting
