"""table2json package for converting fixed-width text tables to JSON."""

__all__ = [
    "ingestion",
    "columns",
    "accumulator",
    "serialization",
    "conversion",
    "errors",
]
