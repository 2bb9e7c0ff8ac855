"""Value types shared by the log parser, the issue synthesizer and callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Final, Protocol

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Fragment",
    "DuplicateCluster",
    "IssuePriority",
    "Issue",
    "IssueFactory",
    "create_issue",
    "PROVIDER_NAME",
    "PROVIDER_TYPE",
    "RULE_ID",
]

PROVIDER_NAME: Final[str] = "DupFinder"
PROVIDER_TYPE: Final[str] = "dupfinder_issues.provider.DupFinderIssuesProvider"
RULE_ID: Final[str] = "dupFinder"


@dataclass(frozen=True, slots=True)
class Fragment:
    """One code fragment of a duplicate, as reported by dupFinder."""

    file_path: str
    line_start: int
    line_end: int


@dataclass(frozen=True, slots=True)
class DuplicateCluster:
    """A duplicate with its cost and at least two fragments in document order."""

    cost: int
    fragments: tuple[Fragment, ...]


class IssuePriority(IntEnum):
    """Priority levels understood by issue consumers."""

    SUGGESTION = 200
    WARNING = 300
    ERROR = 400


class Issue(BaseModel):
    """A single reported issue, homed at one fragment of a duplicate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    identifier: str
    message: str
    message_markdown: str
    message_html: str
    file_path: str
    line: int
    end_line: int
    rule: str = RULE_ID
    priority: IssuePriority = IssuePriority.WARNING
    provider_type: str = PROVIDER_TYPE
    provider_name: str = PROVIDER_NAME
    file_link: str | None = Field(default=None, description="URL of the home fragment, if resolvable.")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the issue."""

        payload = self.model_dump(mode="json")
        payload["priority_name"] = self.priority.name.title()
        return payload


class IssueFactory(Protocol):
    """Callable that turns the synthesized fields into an issue object."""

    def __call__(
        self,
        identifier: str,
        message: str,
        message_markdown: str,
        message_html: str,
        file_path: str,
        line_start: int,
        line_end: int,
        rule: str,
        priority: IssuePriority,
        file_link: str | None,
    ) -> Any: ...


def create_issue(
    identifier: str,
    message: str,
    message_markdown: str,
    message_html: str,
    file_path: str,
    line_start: int,
    line_end: int,
    rule: str,
    priority: IssuePriority,
    file_link: str | None,
    *,
    provider_type: str = PROVIDER_TYPE,
    provider_name: str = PROVIDER_NAME,
) -> Issue:
    """Default :class:`IssueFactory` producing :class:`Issue` models."""

    return Issue(
        identifier=identifier,
        message=message,
        message_markdown=message_markdown,
        message_html=message_html,
        file_path=file_path,
        line=line_start,
        end_line=line_end,
        rule=rule,
        priority=priority,
        provider_type=provider_type,
        provider_name=provider_name,
        file_link=file_link,
    )
