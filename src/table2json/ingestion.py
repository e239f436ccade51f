"""Ingestion layer for reading table text from stdin or a file."""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Tuple

COMMENT_MARKER = "!"
# Undecodable bytes become lone surrogates so every input byte keeps its
# width when rows are sliced.
INPUT_ERRORS = "surrogateescape"


@contextmanager
def open_source(path: Optional[Path]) -> Iterator[TextIO]:
    """Yield a text stream for ``path``, or standard input when it is None."""

    if path is not None:
        with path.open(encoding="utf-8", errors=INPUT_ERRORS) as handle:
            yield handle
        return

    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        yield sys.stdin
        return

    stream = io.TextIOWrapper(buffer, encoding="utf-8", errors=INPUT_ERRORS)
    try:
        yield stream
    finally:
        stream.detach()


def iter_lines(stream: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs worth classifying.

    Line terminators are removed but trailing spaces are kept because they
    take part in column widths. Empty lines and ``!`` comments are skipped;
    numbering still counts them.
    """

    for line_number, line in enumerate(stream, start=1):
        line = line.rstrip("\r\n")
        if not line or line.startswith(COMMENT_MARKER):
            continue
        yield line_number, line
