"""Failures raised while converting fixed-width tables."""

from __future__ import annotations

from typing import Optional


class TableConversionError(Exception):
    """Base class for conversion errors."""


class SearchNotFoundError(TableConversionError):
    """No table with the requested title was seen before end of input."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Table not found: {title!r}")


class RowTooShortError(TableConversionError, ValueError):
    """A data row ends before the widths of the current columns are covered."""

    def __init__(self, required: int, actual: int, line_number: Optional[int] = None):
        self.required = required
        self.actual = actual
        self.line_number = line_number
        location = f"line {line_number}" if line_number is not None else "data row"
        super().__init__(f"{location} is {actual} bytes long but the columns require {required}")
