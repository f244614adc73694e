# -*- coding: utf-8 -*-
"""
Построчный сканер Wavefront OBJ.

Каждая строка классифицируется в типизированную запись ``ObjRecord``:
POSITION (v), NORMAL (vn), TEXCOORD (vt), FACE (f) или IGNORED.
Разбор чисел и индексов здесь НЕ выполняется – сканер отвечает только
на вопрос «что это за строка».

Форматы face‑vertex токена: v, v/vt, v//vn, v/vt/vn.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, NamedTuple

from objmesh.utils.logger import logger


class RecordKind(Enum):
    POSITION = "v"
    NORMAL = "vn"
    TEXCOORD = "vt"
    FACE = "f"
    IGNORED = None


VERTEX_KINDS = (RecordKind.POSITION, RecordKind.NORMAL, RecordKind.TEXCOORD)

_TAGS = {
    "v": RecordKind.POSITION,
    "vn": RecordKind.NORMAL,
    "vt": RecordKind.TEXCOORD,
    "f": RecordKind.FACE,
}

# Одно‑три поля через «/», первое (позиция) обязательно.
_FACE_TOKEN = re.compile(r"[^/\s]+(/[^/\s]*){0,2}")
_LINE_BREAK = re.compile(r"\r?\n")


class ObjRecord(NamedTuple):
    kind: RecordKind
    tokens: tuple          # токены после тега
    line_number: int       # 1‑based
    line: str

    @property
    def arity(self) -> int:
        return len(self.tokens)


def _strip_comment(line: str) -> str:
    hash_pos = line.find("#")
    if hash_pos >= 0:
        line = line[:hash_pos]
    return line.strip()


def classify_line(line: str, line_number: int = 0) -> ObjRecord:
    """Определить тип одной строки."""
    parts = _strip_comment(line).split()
    if not parts:
        return ObjRecord(RecordKind.IGNORED, (), line_number, line)

    kind = _TAGS.get(parts[0], RecordKind.IGNORED)
    tokens = tuple(parts[1:])
    if kind in VERTEX_KINDS and not tokens:
        kind = RecordKind.IGNORED
    elif kind is RecordKind.FACE:
        if not all(_FACE_TOKEN.fullmatch(tok) for tok in tokens):
            kind = RecordKind.IGNORED
    return ObjRecord(kind, tokens, line_number, line)


def scan_records(text: str) -> Iterable[ObjRecord]:
    """Генератор записей всех строк текста в исходном порядке."""
    # только \n и \r\n: номера строк совпадают с редактором
    for number, line in enumerate(_LINE_BREAK.split(text), start=1):
        yield classify_line(line, number)


class ScannedText(NamedTuple):
    """Записи, сгруппированные по типу (порядок внутри группы – исходный)."""
    positions: list
    normals: list
    texcoords: list
    faces: list
    ignored: int


def scan_text(text: str) -> ScannedText:
    groups = {kind: [] for kind in RecordKind}
    for record in scan_records(text):
        groups[record.kind].append(record)

    ignored = groups[RecordKind.IGNORED]
    if ignored:
        logger.debug(f"[Scanner] Ignored {len(ignored)} unrecognised line(s).")

    return ScannedText(
        positions=groups[RecordKind.POSITION],
        normals=groups[RecordKind.NORMAL],
        texcoords=groups[RecordKind.TEXCOORD],
        faces=groups[RecordKind.FACE],
        ignored=len(ignored),
    )
