"""Resolvers turning a fragment into a URL pointing at the hosted source file."""

from __future__ import annotations

import string
from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from .core.exceptions import ConfigurationError
from .models import Fragment

if TYPE_CHECKING:
    from .config import FileLinkSettings

__all__ = [
    "LinkResolver",
    "no_link",
    "pattern_resolver",
    "github_resolver",
    "azure_devops_resolver",
    "build_link_resolver",
]

LinkResolver = Callable[[Fragment], str | None]

_PLACEHOLDERS: Final[frozenset[str]] = frozenset({"path", "file_path", "line_start", "line_end"})


def no_link(fragment: Fragment) -> str | None:
    """Resolver used when no file links are configured."""
    return None


def _normalize_path(file_path: str) -> str:
    path = file_path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    return path.lstrip("/")


def _escape(value: str) -> str:
    return value.replace("{", "{{").replace("}", "}}")


def pattern_resolver(pattern: str) -> LinkResolver:
    """Build a resolver from a URL template.

    Supported placeholders are ``{path}`` (forward slashes, no leading ``./``
    or ``/``), ``{file_path}`` (as reported), ``{line_start}`` and ``{line_end}``.
    """
    try:
        fields = {name for _, name, _, _ in string.Formatter().parse(pattern) if name is not None}
    except ValueError as exc:
        raise ConfigurationError(f"Invalid file link pattern '{pattern}': {exc}", setting="pattern", cause=exc) from exc

    unknown = fields - _PLACEHOLDERS
    if unknown:
        names = ", ".join(sorted(name or "{}" for name in unknown))
        raise ConfigurationError(f"Unsupported placeholder(s) in file link pattern: {names}", setting="pattern")

    # Format specs and conversions depend on the value types, so check them with sample values.
    try:
        pattern.format(path="a", file_path="a", line_start=1, line_end=1)
    except (ValueError, TypeError, KeyError, IndexError) as exc:
        raise ConfigurationError(f"Invalid file link pattern '{pattern}': {exc}", setting="pattern", cause=exc) from exc

    def _resolve(fragment: Fragment) -> str | None:
        return pattern.format(
            path=_normalize_path(fragment.file_path),
            file_path=fragment.file_path,
            line_start=fragment.line_start,
            line_end=fragment.line_end,
        )

    return _resolve


def github_resolver(repository_url: str, revision: str) -> LinkResolver:
    base = _escape(repository_url.rstrip("/"))
    return pattern_resolver(f"{base}/blob/{_escape(revision)}/{{path}}#L{{line_start}}-L{{line_end}}")


def azure_devops_resolver(repository_url: str, branch: str) -> LinkResolver:
    base = _escape(repository_url.rstrip("/"))
    return pattern_resolver(f"{base}?path=/{{path}}&version=GB{_escape(branch)}&line={{line_start}}&lineEnd={{line_end}}")


def build_link_resolver(settings: FileLinkSettings | None) -> LinkResolver:
    """Select the resolver described by ``settings``; ``None`` disables links."""
    if settings is None:
        return no_link
    if settings.kind == "github":
        return github_resolver(settings.repository_url or "", settings.revision or "")
    if settings.kind == "azure_devops":
        return azure_devops_resolver(settings.repository_url or "", settings.revision or "")
    return pattern_resolver(settings.pattern or "")
