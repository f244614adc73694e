# -*- coding: utf-8 -*-
"""
Синтез нормалей по позициям и топологии граней.

* ``compute_vertex_normals`` – сглаженные нормали: сумма ненормированных
  нормалей инцидентных граней, затем нормировка (|n| <= eps -> ноль).
  Индексы нормалей – структурная копия индексов позиций.
* ``compute_face_normals`` – плоские нормали: одна новая запись на грань,
  все три индекса грани указывают на неё.  По умолчанию нормали НЕ
  нормируются (``normalize=True`` включает нормировку).

Обе функции возвращают НОВЫЙ меш; исходный не изменяется.
Любые существующие нормали перезаписываются целиком.
"""

from __future__ import annotations

import numpy as np

from objmesh.errors import MissingPositionsForNormalsError
from objmesh.math.vector import NORMAL_EPSILON, normalize_rows, triangle_normals
from objmesh.mesh.mesh import Mesh, validate_face_indices
from objmesh.utils.logger import logger

NORMAL_MODES = ("vertex", "face")


def _require_triangles(mesh: Mesh) -> np.ndarray:
    if "positions" not in mesh.vertex:
        raise MissingPositionsForNormalsError(
            "mesh has no positions vertex array", attribute="positions")
    if "positions" not in mesh.face_vertex_indices:
        raise MissingPositionsForNormalsError(
            "mesh has no positions face index array", attribute="positions")
    arity = mesh.face_arity("positions")
    if arity != 3:
        raise MissingPositionsForNormalsError(
            f"normal synthesis needs triangle faces, got arity "
            f"{'mixed' if arity is None else arity}; triangulate first",
            attribute="positions")
    faces = mesh.face_vertex_indices["positions"]
    validate_face_indices(faces, len(mesh.vertex["positions"]), "positions")
    return np.asarray(faces, dtype=np.int64)


def compute_vertex_normals(mesh: Mesh, eps: float = NORMAL_EPSILON) -> Mesh:
    """Сглаженные (усреднённые по граням) нормали вершин."""
    triangles = _require_triangles(mesh)
    positions = mesh.vertex["positions"]

    face_normals = triangle_normals(positions, triangles)
    accumulated = np.zeros((len(positions), 3), dtype=np.float64)
    # np.add.at корректно суммирует повторяющиеся индексы
    for slot in range(3):
        np.add.at(accumulated, triangles[:, slot], face_normals)

    result = mesh.copy()
    result.vertex["normals"] = normalize_rows(accumulated, eps)
    result.face_vertex_indices["normals"] = triangles.astype(np.uint32)
    logger.debug(f"[Normals] Computed {len(positions)} per-vertex normals.")
    return result


def compute_face_normals(mesh: Mesh,
                         normalize: bool = False,
                         eps: float = NORMAL_EPSILON) -> Mesh:
    """Плоские нормали: одна запись нормали на грань."""
    triangles = _require_triangles(mesh)
    face_normals = triangle_normals(mesh.vertex["positions"], triangles)
    if normalize:
        face_normals = normalize_rows(face_normals, eps)

    face_ids = np.arange(len(triangles), dtype=np.uint32)
    result = mesh.copy()
    result.vertex["normals"] = face_normals
    result.face_vertex_indices["normals"] = np.repeat(face_ids[:, None], 3, axis=1)
    logger.debug(f"[Normals] Computed {len(triangles)} per-face normals "
                 f"({'unit' if normalize else 'unnormalized'}).")
    return result


def synthesize_normals(mesh: Mesh,
                       mode: str,
                       eps: float = NORMAL_EPSILON,
                       normalize_face_normals: bool = False) -> Mesh:
    """Выбрать алгоритм по имени режима: "vertex" или "face"."""
    if mode == "vertex":
        return compute_vertex_normals(mesh, eps)
    if mode == "face":
        return compute_face_normals(mesh, normalize=normalize_face_normals, eps=eps)
    raise ValueError(f"Unknown normals mode: {mode!r} (expected one of {NORMAL_MODES})")
