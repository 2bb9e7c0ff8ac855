"""Latency budget for reading large dupFinder logs."""

from __future__ import annotations

import time

import pytest

from dupfinder_issues.parser import parse_log
from dupfinder_issues.synthesizer import synthesize


@pytest.mark.perf
def test_reads_log_with_1000_duplicates_ten_times_in_under_one_second(thousand_duplicates_log: str) -> None:
    warnings: list[str] = []
    issues: list[object] = []

    started = time.perf_counter()
    for _ in range(10):
        issues = synthesize(parse_log(thousand_duplicates_log, warnings.append))
    elapsed = time.perf_counter() - started

    assert len(issues) == 2885
    assert warnings == []
    assert elapsed < 1.0
