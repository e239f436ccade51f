"""Drive lines through the accumulator and project the result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from . import serialization
from .accumulator import LineKind, TableAccumulator
from .errors import SearchNotFoundError
from .ingestion import iter_lines


@dataclass
class ConvertConfig:
    """Options for a single conversion run."""

    search: Optional[str] = None
    pretty: bool = False


def convert(lines: Iterable[str], config: ConvertConfig, logger: logging.Logger) -> serialization.Payload:
    """Parse fixed-width tables from ``lines`` and build the JSON projection.

    With ``config.search`` set, reading stops at the first completed table
    whose title equals it exactly and only that table is projected.

    Args:
        lines: Raw input lines, terminators included or not.
        config: Run options.
        logger: Logger configured by the CLI.

    Returns:
        A single OutputTable in search mode, otherwise one per table.

    Raises:
        SearchNotFoundError: if ``config.search`` never matched.
        RowTooShortError: if a data row is narrower than its columns.
    """

    logger.info("Conversion starting")
    accumulator = TableAccumulator(logger)

    for line_number, line in iter_lines(lines):
        kind = accumulator.feed(line, line_number)
        if kind is LineKind.TITLE and config.search:
            completed = accumulator.last_completed
            if completed is not None and completed.title == config.search:
                logger.info("Found table %r before line %d", completed.title, line_number)
                return serialization.table_to_output(completed)

    tables = accumulator.finish()
    if config.search:
        completed = accumulator.last_completed
        if completed is None or completed.title != config.search:
            raise SearchNotFoundError(config.search)
        logger.info("Found table %r at end of input", completed.title)
        return serialization.table_to_output(completed)

    logger.info("Conversion complete: %d tables", len(tables))
    return serialization.tables_to_output(tables)
