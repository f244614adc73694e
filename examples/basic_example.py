#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Пример: разбор OBJ‑файла, синтез нормалей и расплющивание под glDrawArrays.

    python examples/basic_example.py model.obj [vertex|face]

Без аргументов разбирается встроенный куб из квадов.
"""

from __future__ import annotations

import logging
import sys

from objmesh import flatten_mesh, load_obj_file, parse_obj_text, unify_mesh
from objmesh.utils import init_logger

# --------------------------------------------------------------
# 1️⃣  Куб: 8 вершин, 6 квадов, без нормалей
# --------------------------------------------------------------
CUBE_OBJ = """\
# unit cube
v -1 -1  1
v  1 -1  1
v  1  1  1
v -1  1  1
v -1 -1 -1
v  1 -1 -1
v  1  1 -1
v -1  1 -1
f 1 2 3 4
f 6 5 8 7
f 5 1 4 8
f 2 6 7 3
f 4 3 7 8
f 5 6 2 1
"""


def main(argv):
    logger = init_logger(logging.DEBUG)
    mode = argv[2] if len(argv) > 2 else "vertex"

    # --------------------------------------------------------------
    # 2️⃣  Разбор + нормали
    # --------------------------------------------------------------
    if len(argv) > 1:
        mesh = load_obj_file(argv[1], normals=mode)
    else:
        mesh = parse_obj_text(CUBE_OBJ, normals=mode)
    logger.info(f"[Example] {mesh!r}")

    # --------------------------------------------------------------
    # 3️⃣  Под один индексный буфер и без индексов вовсе
    # --------------------------------------------------------------
    indexed = unify_mesh(mesh)
    flat = flatten_mesh(mesh)
    logger.info(f"[Example] shared-index: {indexed.vertex_count} vertices, "
                f"{len(indexed.indices)} triangles")
    logger.info(f"[Example] flat: {flat.vertex_count} vertices")


if __name__ == "__main__":
    main(sys.argv)
