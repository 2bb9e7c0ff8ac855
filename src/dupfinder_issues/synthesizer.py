"""Expansion of duplicate clusters into one issue per fragment."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Final

from .file_links import LinkResolver, no_link
from .models import DuplicateCluster, Fragment, IssueFactory, IssuePriority, RULE_ID, create_issue

__all__ = [
    "build_identifier",
    "build_message",
    "build_markdown_message",
    "build_html_message",
    "synthesize",
]

_CRLF: Final[str] = "\r\n"
_HTML_BREAK: Final[str] = "<br/>"
_LIST_HEADER: Final[str] = "The following fragments were found that might be duplicates:"


def _header(cost: int) -> str:
    return f"Possible duplicate detected (cost {cost})."


def _line_range(fragment: Fragment) -> str:
    return f"(Line {fragment.line_start} to {fragment.line_end})"


def build_identifier(fragment: Fragment, cost: int, others: Iterable[Fragment]) -> str:
    """Identifier built from the home path, the cost and the sorted other paths.

    The other paths are ordered by plain string comparison so the identifier
    does not depend on the order of the fragments in the log.
    """
    other_paths = sorted(other.file_path for other in others)
    return "-".join([fragment.file_path, str(cost), *other_paths])


def build_message(cost: int, others: Sequence[Fragment]) -> str:
    lines = [_header(cost), _LIST_HEADER]
    lines.extend(f'"{other.file_path}" {_line_range(other)}' for other in others)
    return _CRLF.join(lines)


def build_markdown_message(cost: int, others: Sequence[Fragment], resolve: LinkResolver = no_link) -> str:
    lines = [_header(cost), _LIST_HEADER]
    for other in others:
        url = resolve(other)
        if url is None:
            lines.append(f"`{other.file_path}` {_line_range(other)}")
        else:
            lines.append(f"[{other.file_path}]({url}) {_line_range(other)}")
    return _CRLF.join(lines)


def build_html_message(cost: int, others: Sequence[Fragment], resolve: LinkResolver = no_link) -> str:
    parts = [_header(cost), _LIST_HEADER]
    for other in others:
        url = resolve(other)
        if url is None:
            parts.append(f"<code>{other.file_path}</code> {_line_range(other)}")
        else:
            parts.append(f"<a href='{url}'>{other.file_path}</a> {_line_range(other)}")
    return _HTML_BREAK.join(parts)


def synthesize(
    clusters: Iterable[DuplicateCluster],
    link_resolver: LinkResolver | None = None,
    issue_factory: IssueFactory = create_issue,
) -> list[Any]:
    """Create one issue per fragment of every cluster.

    Issues follow the order of the clusters and, within a cluster, the
    document order of its fragments. Each issue lists every fragment of the
    cluster that is not structurally equal to its home fragment.
    """
    resolve = link_resolver or no_link
    issues: list[Any] = []

    for cluster in clusters:
        cost = cluster.cost
        for fragment in cluster.fragments:
            others = [other for other in cluster.fragments if other != fragment]
            links = {other: resolve(other) for other in others}
            issues.append(
                issue_factory(
                    build_identifier(fragment, cost, others),
                    build_message(cost, others),
                    build_markdown_message(cost, others, links.get),
                    build_html_message(cost, others, links.get),
                    fragment.file_path,
                    fragment.line_start,
                    fragment.line_end,
                    RULE_ID,
                    IssuePriority.WARNING,
                    resolve(fragment),
                )
            )

    return issues
