"""Line classification and per-table accumulation."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .columns import Column, clean_text, extract_columns, slice_row

TITLE_MARKER = "*"
HEADER_MARKER = "@"


class LineKind(enum.Enum):
    TITLE = "title"
    HEADER = "header"
    DATA = "data"


@dataclass
class Table:
    """A titled table with its column layout and sliced rows."""

    title: str
    columns: List[Column] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


def classify_line(line: str) -> LineKind:
    if not line:
        raise ValueError("Cannot classify an empty line")
    if line[0] == TITLE_MARKER:
        return LineKind.TITLE
    if line[0] == HEADER_MARKER:
        return LineKind.HEADER
    return LineKind.DATA


class TableAccumulator:
    """Builds tables from classified lines.

    ``current`` is None until the first title line arrives. A table moves to
    ``tables`` when the next title line starts a new one, or on
    :meth:`finish`.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.tables: List[Table] = []
        self.current: Optional[Table] = None

    @property
    def last_completed(self) -> Optional[Table]:
        return self.tables[-1] if self.tables else None

    def feed(self, line: str, line_number: Optional[int] = None) -> LineKind:
        """Classify ``line`` and apply it to the accumulated state."""

        kind = classify_line(line)
        if kind is LineKind.TITLE:
            self._push_current()
            self.current = Table(title=clean_text(line.strip(" ")))
            self.logger.debug("Started table %r at line %s", self.current.title, line_number)
            return kind

        if self.current is None:
            self.logger.warning("Dropping %s line %s seen before any table title", kind.value, line_number)
            return kind

        if kind is LineKind.HEADER:
            self.current.columns = extract_columns(line[len(HEADER_MARKER):])
            self.logger.debug(
                "Table %r columns: %s",
                self.current.title,
                [(c.title, c.byte_length) for c in self.current.columns],
            )
        else:
            self.current.rows.append(slice_row(line, self.current.columns, line_number))
        return kind

    def finish(self) -> List[Table]:
        """Flush the in-progress table and return every table in input order."""

        self._push_current()
        return self.tables

    def _push_current(self) -> None:
        if self.current is None:
            return
        self.tables.append(self.current)
        self.logger.debug("Completed table %r with %d rows", self.current.title, len(self.current.rows))
        self.current = None
