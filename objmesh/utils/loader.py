# -*- coding: utf-8 -*-
"""
Загрузка OBJ‑файла с диска – тонкая обёртка над parse_obj_text().
"""

from pathlib import Path

from objmesh.parser.obj_parser import parse_obj_text


def load_obj_file(path, encoding: str = "utf-8", **options):
    """Прочитать файл целиком и разобрать его (options -> parse_obj_text)."""
    text = Path(path).read_text(encoding=encoding)
    return parse_obj_text(text, **options)
