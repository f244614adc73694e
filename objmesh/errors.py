# -*- coding: utf-8 -*-
"""
Исключения пакета objmesh.

Все ошибки синхронные и пробрасываются вызывающему коду как есть.
Неподдерживаемая арность грани ошибкой не является – такие строки
просто пропускаются (см. objmesh.parser.scanner).
"""

from __future__ import annotations

from typing import Optional


class ObjError(ValueError):
    """Базовый класс ошибок разбора и обработки меша."""

    def __init__(self,
                 message: str,
                 *,
                 kind: Optional[str] = None,
                 line_number: Optional[int] = None,
                 line: Optional[str] = None,
                 attribute: Optional[str] = None,
                 index: Optional[int] = None):
        self.kind = kind
        self.line_number = line_number
        self.line = line
        self.attribute = attribute
        self.index = index
        if line_number is not None:
            message = f"line {line_number}: {message}"
        if line is not None:
            message = f"{message} ({line!r})"
        super().__init__(message)


class MalformedNumberError(ObjError):
    """Числовой токен в записи v/vn/vt не разбирается как float."""


class MalformedFaceIndexError(ObjError):
    """Поле face‑vertex токена не является индексом или отсутствует."""


class IndexOutOfRangeError(ObjError):
    """Индекс грани выходит за пределы соответствующего массива вершин."""


class MissingPositionsForNormalsError(ObjError):
    """Нет позиций / граней или арность граней не равна 3."""


class MeshLayoutError(ObjError):
    """Массивы индексов граней не согласованы по длине или арности."""


class IndexWidthError(ObjError):
    """Индекс не помещается в выбранную ширину индексного буфера."""
