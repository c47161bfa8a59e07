"""Raw tree records and the line-oriented tree file reader.

A tree file holds one node per line as three whitespace separated integers::

    node_id parent_id value

The root carries ``rules.NO_PARENT`` as its parent. The first non-blank line
may be a header, and any line that does not start with three integers is
skipped without complaint.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from . import rules
from .exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

# ASCII digits only: no underscores, no other Unicode digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class RawRecord:
    """One ``(id, parent, value)`` triple as read from input."""

    node_id: int
    parent_id: int
    value: int

    @classmethod
    def coerce(cls, item: object) -> RawRecord:
        """Convert a record-like item into a RawRecord.

        Accepts an existing RawRecord or any three-item sequence whose fields
        are ints or integer strings.

        Raises:
            MalformedRecordError: If the item is not exactly three integers.
        """
        if isinstance(item, RawRecord):
            return item
        if isinstance(item, (str, bytes)):
            raise MalformedRecordError(item)
        try:
            fields = tuple(item)  # type: ignore[arg-type]
        except TypeError:
            raise MalformedRecordError(item) from None
        if len(fields) != rules.FIELD_COUNT:
            raise MalformedRecordError(item)
        node_id, parent_id, value = (_as_int(field, item) for field in fields)
        return cls(node_id=node_id, parent_id=parent_id, value=value)

    @property
    def is_root(self) -> bool:
        return self.parent_id == rules.NO_PARENT


def _as_int(field: object, item: object) -> int:
    # bool is an int subclass but never a valid id or score
    if isinstance(field, bool):
        raise MalformedRecordError(item)
    if isinstance(field, str):
        text = field.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            raise MalformedRecordError(item)
        field = int(text)
    if not isinstance(field, int) or not rules.INT_MIN <= field <= rules.INT_MAX:
        raise MalformedRecordError(item)
    return field


def parse_line(line: str) -> RawRecord | None:
    """Parse a single tree file line.

    Only the first three fields are read; trailing fields are ignored.

    Returns:
        The record, or None for blank, short or non-numeric lines.
    """
    parts = line.split()
    if len(parts) < rules.FIELD_COUNT:
        return None
    try:
        return RawRecord.coerce(parts[: rules.FIELD_COUNT])
    except MalformedRecordError:
        return None


def is_header(line: str, header_markers: Iterable[str] = rules.HEADER_MARKERS) -> bool:
    """Return True if the line contains one of the header markers."""
    return any(marker in line for marker in header_markers)


def iter_records(
    lines: Iterable[str],
    header_markers: Iterable[str] = rules.HEADER_MARKERS,
) -> Iterator[RawRecord]:
    """Yield records from tree file lines in file order.

    Args:
        lines: Text lines, with or without trailing newlines.
        header_markers: Markers recognised on the first non-blank line.

    Yields:
        One RawRecord per well-formed line.
    """
    markers = tuple(header_markers)
    seen_content = False

    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        if not seen_content:
            seen_content = True
            if is_header(line, markers):
                logger.debug("Skipping header on line %d", lineno)
                continue

        record = parse_line(line)
        if record is None:
            logger.debug("Skipping malformed line %d: %r", lineno, line.rstrip("\n"))
            continue
        yield record


def read_records(path: str | Path, header_markers: Iterable[str] = rules.HEADER_MARKERS) -> list[RawRecord]:
    """Read every well-formed record from a UTF-8 tree file.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    # Undecodable bytes become U+FFFD, so such lines fall through as malformed.
    with open(path, encoding="utf-8", errors="replace") as f:
        records = list(iter_records(f, header_markers))
    logger.info("Read %d records from %s", len(records), path)
    return records


__all__ = [
    "RawRecord",
    "is_header",
    "iter_records",
    "parse_line",
    "read_records",
]
