"""CLI command ``dupfinder-issues``."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .config import DupFinderIssuesSettings, FileLinkSettings, LoggingConfig, load_settings
from .core.exceptions import DupFinderIssuesError
from .core.log_events import LogEvents
from .core.logger import LogFormat, UnifiedLogger
from .models import Issue
from .provider import DupFinderIssuesProvider

__all__ = ["app", "main"]

app = typer.Typer(
    name="dupfinder-issues",
    help="Convert JetBrains dupFinder logs into issues.",
    add_completion=False,
)


class OutputFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


def _emit_error(message: str) -> None:
    typer.echo(f"[dupfinder-issues] ERROR: {message}", err=True)


def _fail(message: str) -> NoReturn:
    _emit_error(message)
    raise typer.Exit(code=1)


def _file_links(
    link_pattern: str | None,
    github_url: str | None,
    revision: str | None,
) -> FileLinkSettings | None:
    if link_pattern and github_url:
        _fail("--link-pattern and --github-url are mutually exclusive.")
    if link_pattern:
        return FileLinkSettings(kind="pattern", pattern=link_pattern)
    if github_url:
        if not revision:
            _fail("--github-url requires --revision.")
        return FileLinkSettings(kind="github", repository_url=github_url, revision=revision)
    return None


def _render_text(issue: Issue) -> str:
    return f"{issue.file_path}:{issue.line}-{issue.end_line}: {issue.priority.name.lower()}: {issue.identifier}"


@app.callback()
def main() -> None:
    """Convert JetBrains dupFinder logs into issues."""


@app.command("read")
def read(
    log_file: Optional[Path] = typer.Argument(
        None,
        help="dupFinder XML log to read.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="YAML settings file; LOG_FILE takes precedence over its log_file_path.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    link_pattern: Optional[str] = typer.Option(
        None,
        "--link-pattern",
        help="URL template for file links, e.g. https://host/{path}#L{line_start}.",
    ),
    github_url: Optional[str] = typer.Option(None, "--github-url", help="Repository URL for GitHub file links."),
    revision: Optional[str] = typer.Option(None, "--revision", help="Commit or branch for GitHub file links."),
    lenient_numbers: bool = typer.Option(
        False,
        "--lenient-numbers",
        help="Skip duplicates and fragments with non-numeric Cost/Start/End instead of failing.",
    ),
    output_format: OutputFormat = typer.Option(OutputFormat.JSON, "--format", help="Output format."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    log_format: Optional[LogFormat] = typer.Option(None, "--log-format", help="Log format."),
) -> None:
    """Read a dupFinder log and print one issue per duplicate fragment."""

    if log_file is None and config is None:
        _fail("Either LOG_FILE or --config is required.")

    overrides: dict[str, object] = {}
    if log_file is not None:
        overrides["log_file_path"] = log_file
    file_links = _file_links(link_pattern, github_url, revision)
    if file_links is not None:
        overrides["file_links"] = file_links
    if lenient_numbers:
        overrides["strict_numbers"] = False

    try:
        if config is not None:
            settings = load_settings(config, **overrides)
        else:
            settings = DupFinderIssuesSettings(**overrides)
    except DupFinderIssuesError as exc:
        _fail(str(exc))

    logging_config = LoggingConfig(
        level=log_level or settings.logging.level,
        format=log_format or settings.logging.format,
    )
    try:
        UnifiedLogger.configure(logging_config.to_log_config())
    except ValueError as exc:
        _fail(str(exc))

    logger = UnifiedLogger.get(__name__)
    logger.debug(LogEvents.CLI_RUN_START.value, command="read")

    try:
        issues = DupFinderIssuesProvider(logger, settings).read_issues()
    except DupFinderIssuesError as exc:
        _fail(str(exc))

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps([issue.to_dict() for issue in issues], indent=2, ensure_ascii=False))
    else:
        for issue in issues:
            typer.echo(_render_text(issue))

    logger.debug(LogEvents.CLI_RUN_FINISH.value, command="read", issues=len(issues))


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
