"""Parsing of JetBrains dupFinder XML logs into duplicate clusters.

The log is walked once. Every ``Duplicate`` element is validated on its own;
problems with a single duplicate or fragment are reported through the ``warn``
callback and only that entry is dropped. A log that is not well-formed aborts
the whole parse.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Generic, TypeVar

from lxml import etree

from .core.exceptions import LogParseError
from .models import DuplicateCluster, Fragment
from .xml import attr, is_blank, iter_descendants, make_xml_parser, select_one, text

__all__ = [
    "Extracted",
    "WarnCallback",
    "COST_MISSING_MESSAGE",
    "FILE_PATH_MISSING_MESSAGE",
    "LOCATION_MISSING_MESSAGE",
    "TOO_FEW_FRAGMENTS_MESSAGE",
    "parse_log",
    "parse_log_bytes",
]

WarnCallback = Callable[[str], None]

COST_MISSING_MESSAGE: Final[str] = "Cost of the current duplicate could not be determined. Skipped."
FILE_PATH_MISSING_MESSAGE: Final[str] = "FilePath of the current Fragment could not be determined. Skipped."
LOCATION_MISSING_MESSAGE: Final[str] = "The location of the current Fragment could not be determined. Skipped."
TOO_FEW_FRAGMENTS_MESSAGE: Final[str] = (
    "There are less than two fragments for the current duplicate. "
    "A duplicate needs at least two fragment to be an actual duplicate. Skipped."
)

_INVARIANT_INTEGER: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?[0-9]+\s*")

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Extracted(Generic[T]):
    """Outcome of reading one value from the log."""

    ok: bool
    value: T | None = None

    @classmethod
    def success(cls, value: T) -> Extracted[T]:
        return cls(True, value)

    @classmethod
    def failure(cls) -> Extracted[T]:
        return cls(False)


def _parse_invariant_int(raw: str, *, element: str, attribute: str, strict: bool) -> Extracted[int]:
    """Parse ``raw`` as a base-10 integer independent of any locale."""

    if _INVARIANT_INTEGER.fullmatch(raw):
        return Extracted.success(int(raw))
    if strict:
        raise LogParseError(
            f"Value '{raw}' of attribute '{attribute}' on element '{element}' is not an integer.",
            element=element,
            attribute=attribute,
            value=raw,
        )
    return Extracted.failure()


def _extract_cost(duplicate: etree._Element, *, strict: bool) -> Extracted[int]:
    raw_cost = attr(duplicate, "Cost")
    if is_blank(raw_cost):
        return Extracted.failure()
    return _parse_invariant_int(raw_cost, element="Duplicate", attribute="Cost", strict=strict)


def _extract_file_path(fragment: etree._Element) -> Extracted[str]:
    file_path = text(select_one(fragment, "FileName"))
    if is_blank(file_path):
        return Extracted.failure()
    return Extracted.success(file_path)


def _extract_line_range(fragment: etree._Element, *, strict: bool) -> Extracted[tuple[int, int]]:
    line_range = select_one(fragment, "LineRange")
    if line_range is None:
        return Extracted.failure()

    raw_start = attr(line_range, "Start")
    raw_end = attr(line_range, "End")
    if is_blank(raw_start) or is_blank(raw_end):
        return Extracted.failure()

    start = _parse_invariant_int(raw_start, element="LineRange", attribute="Start", strict=strict)
    end = _parse_invariant_int(raw_end, element="LineRange", attribute="End", strict=strict)
    if not (start.ok and end.ok):
        return Extracted.failure()
    return Extracted.success((start.value, end.value))


def _extract_fragment(fragment: etree._Element, warn: WarnCallback, *, strict: bool) -> Extracted[Fragment]:
    file_path = _extract_file_path(fragment)
    if not file_path.ok:
        warn(FILE_PATH_MISSING_MESSAGE)
        return Extracted.failure()

    line_range = _extract_line_range(fragment, strict=strict)
    if not line_range.ok:
        warn(LOCATION_MISSING_MESSAGE)
        return Extracted.failure()

    line_start, line_end = line_range.value
    return Extracted.success(Fragment(file_path.value, line_start, line_end))


def _extract_cluster(duplicate: etree._Element, warn: WarnCallback, *, strict: bool) -> Extracted[DuplicateCluster]:
    cost = _extract_cost(duplicate, strict=strict)
    if not cost.ok:
        warn(COST_MISSING_MESSAGE)
        return Extracted.failure()

    fragments: list[Fragment] = []
    for node in iter_descendants(duplicate, "Fragment"):
        fragment = _extract_fragment(node, warn, strict=strict)
        if fragment.ok:
            fragments.append(fragment.value)

    if len(fragments) < 2:
        warn(TOO_FEW_FRAGMENTS_MESSAGE)
        return Extracted.failure()

    return Extracted.success(DuplicateCluster(cost.value, tuple(fragments)))


def parse_log(log_text: str, warn: WarnCallback, *, strict_numbers: bool = True) -> list[DuplicateCluster]:
    """Parse a dupFinder log into validated duplicate clusters.

    Parameters
    ----------
    log_text:
        Content of the dupFinder log.
    warn:
        Receives one message per skipped duplicate or fragment.
    strict_numbers:
        When ``True`` a present but non-numeric ``Cost``, ``Start`` or ``End``
        raises :class:`LogParseError`. When ``False`` such values are treated
        like missing ones and reported through ``warn``.

    Returns
    -------
    list
        Clusters in document order of their ``Duplicate`` elements.

    Raises
    ------
    LogParseError
        If the log is not well-formed XML, or on non-numeric values in strict mode.
    """

    try:
        root = etree.fromstring(log_text.encode("utf-8"), parser=make_xml_parser())
    except etree.XMLSyntaxError as exc:
        raise LogParseError(f"dupFinder log is not well-formed XML: {exc}", cause=exc) from exc

    clusters: list[DuplicateCluster] = []
    for duplicate in iter_descendants(root, "Duplicate", include_self=True):
        cluster = _extract_cluster(duplicate, warn, strict=strict_numbers)
        if cluster.ok:
            clusters.append(cluster.value)
    return clusters


def parse_log_bytes(content: bytes, warn: WarnCallback, *, strict_numbers: bool = True) -> list[DuplicateCluster]:
    """Decode raw log bytes (UTF-8, optional BOM) and parse them."""

    try:
        log_text = content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise LogParseError(f"dupFinder log is not valid UTF-8: {exc}", cause=exc) from exc
    return parse_log(log_text, warn, strict_numbers=strict_numbers)
