# -*- coding: utf-8 -*-
"""
Декодер граней.

Поле face‑vertex токена выбирается позицией:
    0 – позиция, 1 – texcoord, 2 – нормаль.
Индексы в OBJ 1‑based, на выходе – 0‑based.

Наличие texcoord / нормалей определяется ОДИН раз – по первому токену
первой грани (``infer_face_presence``) – и применяется ко всем граням.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Sequence

import numpy as np

from objmesh.errors import IndexOutOfRangeError, MalformedFaceIndexError
from objmesh.parser.scanner import ObjRecord

POSITION_FIELD = 0
TEXCOORD_FIELD = 1
NORMAL_FIELD = 2

FIELD_ATTRIBUTE = {
    POSITION_FIELD: "positions",
    TEXCOORD_FIELD: "texcoords",
    NORMAL_FIELD: "normals",
}

_INDEX = re.compile(r"\d+")
# индексы дальше упаковываются в int64
_MAX_INDEX = int(np.iinfo(np.int64).max)


class FacePresence(NamedTuple):
    """Какие поля объявлены в гранях (позиция есть всегда)."""
    texcoords: bool
    normals: bool

    def fields(self) -> tuple:
        result = [POSITION_FIELD]
        if self.texcoords:
            result.append(TEXCOORD_FIELD)
        if self.normals:
            result.append(NORMAL_FIELD)
        return tuple(result)


def _field(token: str, field: int) -> Optional[str]:
    parts = token.split("/")
    if field < len(parts) and parts[field]:
        return parts[field]
    return None


def infer_face_presence(first_record: ObjRecord) -> FacePresence:
    """Определить состав атрибутов по первому токену первой грани."""
    token = first_record.tokens[0]
    return FacePresence(
        texcoords=_field(token, TEXCOORD_FIELD) is not None,
        normals=_field(token, NORMAL_FIELD) is not None,
    )


def decode_face(record: ObjRecord, field: int) -> tuple:
    """Кортеж 0‑based индексов выбранного поля для одной грани."""
    indices = []
    for slot, token in enumerate(record.tokens):
        value = _field(token, field)
        if value is None:
            raise MalformedFaceIndexError(
                f"face vertex {slot + 1} has no {FIELD_ATTRIBUTE[field]} index "
                f"although the first face declares one",
                kind="f",
                line_number=record.line_number,
                line=record.line,
                attribute=FIELD_ATTRIBUTE[field],
            )
        if not _INDEX.fullmatch(value):
            raise MalformedFaceIndexError(
                f"cannot parse {value!r} as a {FIELD_ATTRIBUTE[field]} index",
                kind="f",
                line_number=record.line_number,
                line=record.line,
                attribute=FIELD_ATTRIBUTE[field],
            )
        index = int(value) - 1
        if index >= _MAX_INDEX:
            raise IndexOutOfRangeError(
                f"face vertex {slot + 1}: {FIELD_ATTRIBUTE[field]} index {value} is out of range",
                kind="f",
                line_number=record.line_number,
                line=record.line,
                attribute=FIELD_ATTRIBUTE[field],
                index=index,
            )
        indices.append(index)
    return tuple(indices)


def pack_faces(faces: Sequence[tuple]):
    """
    (F, arity) int64, если арность у всех граней одинакова,
    иначе – список кортежей как есть.
    """
    arities = {len(face) for face in faces}
    if len(arities) == 1:
        return np.array(faces, dtype=np.int64).reshape(len(faces), arities.pop())
    return list(faces)


def decode_faces(records: Sequence[ObjRecord], field: int):
    """Декодировать поле ``field`` всех граней."""
    return pack_faces([decode_face(record, field) for record in records])
