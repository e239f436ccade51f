"""Projection of accumulated tables into JSON documents."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Union

from .accumulator import Table


@dataclass(frozen=True)
class OutputTable:
    """A table whose rows are keyed by column title."""

    title: str
    values: List[Dict[str, str]]

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "values": [dict(row) for row in self.values]}


Payload = Union[OutputTable, List[OutputTable]]


def table_to_output(table: Table) -> OutputTable:
    """Turn positional rows into title-keyed mappings.

    Duplicate column titles keep the value of the rightmost column.
    """

    values: List[Dict[str, str]] = []
    for row in table.rows:
        mapping: Dict[str, str] = {}
        for column, cell in zip(table.columns, row):
            mapping[column.title] = cell
        values.append(mapping)
    return OutputTable(title=table.title, values=values)


def tables_to_output(tables: Sequence[Table]) -> List[OutputTable]:
    return [table_to_output(table) for table in tables]


def payload_to_json_data(payload: Payload) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    if isinstance(payload, OutputTable):
        return payload.to_dict()
    return [table.to_dict() for table in payload]


def render_json(payload: Payload, pretty: bool = False) -> str:
    """Serialize a projection as compact single-line JSON or indented JSON."""

    data = payload_to_json_data(payload)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
