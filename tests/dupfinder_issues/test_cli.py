"""Tests for the Typer-based CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from dupfinder_issues.cli import app


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.integration
def test_read_prints_issues_as_json(runner: CliRunner, dupfinder_log_path: Path) -> None:
    result = runner.invoke(app, ["read", str(dupfinder_log_path), "--log-level", "ERROR"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload) == 5
    assert payload[0]["identifier"] == "Src\\Foo.cs-100-Src\\Bar.cs-Src\\FooBar.cs"
    assert payload[0]["priority"] == 300
    assert payload[0]["priority_name"] == "Warning"
    assert payload[0]["rule"] == "dupFinder"
    assert payload[0]["file_link"] is None


@pytest.mark.integration
def test_read_with_github_links(runner: CliRunner, dupfinder_log_path: Path) -> None:
    result = runner.invoke(
        app,
        [
            "read",
            str(dupfinder_log_path),
            "--github-url",
            "https://github.com/o/r",
            "--revision",
            "v1",
            "--log-level",
            "ERROR",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload[1]["file_link"] == "https://github.com/o/r/blob/v1/Src/Bar.cs#L17-L233"


@pytest.mark.integration
def test_read_text_format(runner: CliRunner, dupfinder_log_path: Path) -> None:
    result = runner.invoke(app, ["read", str(dupfinder_log_path), "--format", "text", "--log-level", "ERROR"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "Src\\Foo.cs:16-232: warning: Src\\Foo.cs-100-Src\\Bar.cs-Src\\FooBar.cs"
    assert len(lines) == 5


@pytest.mark.integration
def test_read_from_config(runner: CliRunner, tmp_path: Path, dupfinder_log_path: Path) -> None:
    config_path = tmp_path / "dupfinder.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "log_file_path": str(dupfinder_log_path),
                "file_links": {"pattern": "https://x/{path}#L{line_start}"},
                "logging": {"level": "ERROR"},
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["read", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload[0]["file_link"] == "https://x/Src/Foo.cs#L16"


@pytest.mark.integration
def test_malformed_log_exits_with_error(runner: CliRunner, tmp_path: Path) -> None:
    log_path = tmp_path / "broken.xml"
    log_path.write_text("<Duplicates><Duplicate>", encoding="utf-8")

    result = runner.invoke(app, ["read", str(log_path), "--log-level", "CRITICAL"])

    assert result.exit_code == 1
    assert "ERROR" in result.output
    assert "not well-formed" in result.output


@pytest.mark.integration
def test_missing_input_exits_with_error(runner: CliRunner) -> None:
    result = runner.invoke(app, ["read"])

    assert result.exit_code == 1
    assert "Either LOG_FILE or --config is required." in result.output


@pytest.mark.integration
def test_github_url_requires_revision(runner: CliRunner, dupfinder_log_path: Path) -> None:
    result = runner.invoke(app, ["read", str(dupfinder_log_path), "--github-url", "https://github.com/o/r"])

    assert result.exit_code == 1
    assert "--github-url requires --revision." in result.output


@pytest.mark.integration
@pytest.mark.parametrize("pattern", ["https://x/{path:d}", "https://x/{path!z}", "https://x/{line_start:q}"])
def test_invalid_link_pattern_exits_with_error(runner: CliRunner, dupfinder_log_path: Path, pattern: str) -> None:
    result = runner.invoke(app, ["read", str(dupfinder_log_path), "--link-pattern", pattern, "--log-level", "CRITICAL"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "ERROR" in result.output
    assert "Invalid file link pattern" in result.output
