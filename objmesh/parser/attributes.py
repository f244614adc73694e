# -*- coding: utf-8 -*-
"""
Разбор вершинных записей v / vn / vt в кортежи float64.
"""

from __future__ import annotations

import re

import numpy as np

from objmesh.errors import MalformedNumberError
from objmesh.parser.scanner import ObjRecord, RecordKind

# Десятичное число: знак, дробная часть и экспонента – опциональны.
# nan / inf сюда сознательно не попадают.
_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

COMPONENT_COUNT = {
    RecordKind.POSITION: 3,
    RecordKind.NORMAL: 3,
    RecordKind.TEXCOORD: 2,
}


def parse_number(token: str, record: ObjRecord) -> float:
    if not _NUMBER.fullmatch(token):
        raise MalformedNumberError(
            f"cannot parse {token!r} as a number in '{record.kind.value}' record",
            kind=record.kind.value,
            line_number=record.line_number,
            line=record.line,
        )
    return float(token)


def parse_attribute_record(record: ObjRecord) -> tuple:
    """
    Превратить запись v/vn/vt в кортеж фиксированной длины
    (3 для v/vn, 2 для vt).  Лишние компоненты (например, w) отбрасываются.
    """
    size = COMPONENT_COUNT[record.kind]
    values = tuple(parse_number(tok, record) for tok in record.tokens)
    if len(values) < size:
        raise MalformedNumberError(
            f"'{record.kind.value}' record needs {size} components, got {len(values)}",
            kind=record.kind.value,
            line_number=record.line_number,
            line=record.line,
        )
    return values[:size]


def parse_attribute_records(records) -> np.ndarray:
    """Массив (N, k) float64 для последовательности однотипных записей."""
    records = list(records)
    if not records:
        raise ValueError("no records to parse")
    size = COMPONENT_COUNT[records[0].kind]
    rows = [parse_attribute_record(record) for record in records]
    return np.array(rows, dtype=np.float64).reshape(-1, size)
