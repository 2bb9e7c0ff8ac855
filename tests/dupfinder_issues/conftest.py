"""Shared pytest fixtures for dupfinder_issues tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

DATA_DIR = Path(__file__).parent / "data"


class FakeLog:
    """Records log calls made by the provider."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kwargs: Any) -> None:
        self.entries.append((level, str(event), kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        self._record("debug", event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._record("info", event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._record("error", event, **kwargs)

    def messages(self, level: str) -> list[str]:
        return [event for entry_level, event, _ in self.entries if entry_level == level]


def build_log(duplicates: Sequence[tuple[int | str | None, Sequence[tuple[str, int, int]]]]) -> str:
    """Render a dupFinder log for ``(cost, [(path, start, end), ...])`` entries."""

    parts = ['<?xml version="1.0" encoding="utf-8"?>', "<DuplicatesReport>", "<Duplicates>"]
    for cost, fragments in duplicates:
        cost_attr = "" if cost is None else f' Cost="{cost}"'
        parts.append(f"<Duplicate{cost_attr}>")
        for path, start, end in fragments:
            parts.append(
                f'<Fragment><FileName>{path}</FileName><LineRange Start="{start}" End="{end}" /></Fragment>'
            )
        parts.append("</Duplicate>")
    parts.extend(["</Duplicates>", "</DuplicatesReport>"])
    return "\n".join(parts)


def load_log(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def fake_log() -> FakeLog:
    return FakeLog()


@pytest.fixture
def warnings() -> list[str]:
    """Warning sink collecting the messages passed to ``warn``."""

    return []


@pytest.fixture
def dupfinder_log() -> str:
    return load_log("DupFinder.xml")


@pytest.fixture
def dupfinder_log_path() -> Path:
    return DATA_DIR / "DupFinder.xml"


@pytest.fixture(scope="session")
def thousand_duplicates_log() -> str:
    """1000 duplicates with 2885 fragments: 885 of three fragments, 115 of two."""

    duplicates = []
    for index in range(1000):
        fragment_count = 3 if index < 885 else 2
        fragments = [
            (f"Src\\Module{index % 37}\\File{index}_{position}.cs", 10 + position, 60 + position)
            for position in range(fragment_count)
        ]
        duplicates.append((50 + index % 200, fragments))
    return build_log(duplicates)


@pytest.fixture
def log_builder() -> Callable[..., str]:
    return build_log


@pytest.fixture
def data_log() -> Callable[[str], str]:
    return load_log
