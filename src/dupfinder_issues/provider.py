"""Issue provider for JetBrains dupFinder logs."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from .config import DupFinderIssuesSettings
from .core.exceptions import ConfigurationError, DupFinderIssuesError
from .core.log_events import LogEvents
from .core.logger import UnifiedLogger
from .file_links import build_link_resolver
from .models import PROVIDER_NAME, PROVIDER_TYPE, Issue, create_issue
from .parser import COST_MISSING_MESSAGE, TOO_FEW_FRAGMENTS_MESSAGE, parse_log_bytes
from .synthesizer import synthesize

__all__ = [
    "DupFinderIssuesProvider",
    "provider_type_name",
    "read_issues_from_file",
    "read_issues_from_content",
]

_SKIP_EVENTS: Final[Mapping[str, LogEvents]] = {
    COST_MISSING_MESSAGE: LogEvents.CLUSTER_SKIPPED,
    TOO_FEW_FRAGMENTS_MESSAGE: LogEvents.CLUSTER_SKIPPED,
}


def provider_type_name() -> str:
    """Name identifying issues created by this provider."""
    return PROVIDER_TYPE


class DupFinderIssuesProvider:
    """Provider for issues reported by JetBrains dupFinder."""

    provider_name: Final[str] = PROVIDER_NAME
    provider_type: Final[str] = PROVIDER_TYPE

    def __init__(self, log: Any, issue_provider_settings: DupFinderIssuesSettings) -> None:
        if log is None:
            raise TypeError("log must not be None")
        if issue_provider_settings is None:
            raise TypeError("issue_provider_settings must not be None")

        self._log = log
        self.settings = issue_provider_settings

    def _warn(self, message: str) -> None:
        self._log.warning(
            message,
            log_event=_SKIP_EVENTS.get(message, LogEvents.FRAGMENT_SKIPPED).value,
            provider=self.provider_name,
        )

    def read_issues(self) -> list[Issue]:
        """Read the configured log and return one issue per duplicate fragment."""

        source = str(self.settings.log_file_path) if self.settings.log_file_path else "<content>"
        self._log.info(LogEvents.READ_START.value, provider=self.provider_name, source=source)

        try:
            content = self.settings.read_log_content()
            clusters = parse_log_bytes(content, self._warn, strict_numbers=self.settings.strict_numbers)
            resolver = build_link_resolver(self.settings.file_links)
        except DupFinderIssuesError as exc:
            self._log.error(LogEvents.READ_FAILED.value, provider=self.provider_name, source=source, error=exc.to_dict())
            raise

        factory = functools.partial(create_issue, provider_type=self.provider_type, provider_name=self.provider_name)
        issues = synthesize(clusters, resolver, factory)

        self._log.info(
            LogEvents.READ_FINISH.value,
            provider=self.provider_name,
            source=source,
            duplicates=len(clusters),
            issues=len(issues),
        )
        return issues


def read_issues_from_file(log_file_path: str | Path, *, log: Any = None, **settings: Any) -> list[Issue]:
    """Read issues from a dupFinder log on disk."""

    provider_settings = DupFinderIssuesSettings.from_file_path(log_file_path, **settings)
    return DupFinderIssuesProvider(log or UnifiedLogger.get(__name__), provider_settings).read_issues()


def read_issues_from_content(log_file_content: bytes | str, *, log: Any = None, **settings: Any) -> list[Issue]:
    """Read issues from the content of a dupFinder log."""

    if log_file_content is None or not log_file_content.strip():
        raise ConfigurationError("Log file content must not be empty.", setting="log_file_content")
    provider_settings = DupFinderIssuesSettings.from_content(log_file_content, **settings)
    return DupFinderIssuesProvider(log or UnifiedLogger.get(__name__), provider_settings).read_issues()
