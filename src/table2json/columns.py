"""Column boundaries from header lines and fixed-width row slicing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import RowTooShortError

SPACE = ord(" ")


def to_bytes(text: str) -> bytes:
    """Recover the input bytes of ``text``, including undecodable ones."""

    return text.encode("utf-8", errors="surrogateescape")


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def clean_text(text: str) -> str:
    """Replace undecodable input bytes with U+FFFD."""

    return _decode(to_bytes(text))


@dataclass(frozen=True)
class Column:
    """A column title and the number of bytes it spans in every data row."""

    title: str
    byte_length: int


class _ScanState(enum.Enum):
    LEADING = "leading"
    TOKEN = "token"
    WHITESPACE = "whitespace"


def _column_from(segment: bytes) -> Column:
    return Column(title=_decode(segment).strip(" "), byte_length=len(segment))


def extract_columns(header: str) -> List[Column]:
    """Split a header line into fixed-width columns.

    A column starts at the beginning of the line and at every non-space byte
    that follows a space, so each column owns the spaces trailing its title.
    Spaces before the first title belong to the first column. A header made
    only of spaces has no columns.

    Args:
        header: Header text with the ``@`` marker already removed.

    Returns:
        Columns in left-to-right order.
    """

    raw = to_bytes(header)
    columns: List[Column] = []
    start = 0
    state = _ScanState.LEADING

    for index, byte in enumerate(raw):
        if byte == SPACE:
            if state is _ScanState.TOKEN:
                state = _ScanState.WHITESPACE
            continue
        if state is _ScanState.WHITESPACE:
            columns.append(_column_from(raw[start:index]))
            start = index
        state = _ScanState.TOKEN

    if state is not _ScanState.LEADING:
        columns.append(_column_from(raw[start:]))
    return columns


def slice_row(line: str, columns: Sequence[Column], line_number: Optional[int] = None) -> List[str]:
    """Cut a data line into one trimmed value per column.

    Raises:
        RowTooShortError: if the line ends before the last column does.
    """

    raw = to_bytes(line)
    values: List[str] = []
    offset = 0
    for column in columns:
        end = offset + column.byte_length
        if end > len(raw):
            required = sum(c.byte_length for c in columns)
            raise RowTooShortError(required=required, actual=len(raw), line_number=line_number)
        # Byte slices may split a multi-byte character.
        values.append(_decode(raw[offset:end]).strip(" "))
        offset = end
    return values
