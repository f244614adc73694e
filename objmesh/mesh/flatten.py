# -*- coding: utf-8 -*-
"""
Унификация мульти‑индексного меша для рендереров с одним индексным
буфером (glDrawElements) или вообще без индексов (glDrawArrays).

* ``flatten_mesh``  – по записи атрибута на каждое вхождение вершины
  в грань: flat.vertex[attr][face * arity + slot].
* ``unify_mesh``    – общее пространство индексов: одинаковые сочетания
  (pos, tex, norm) превращаются в одну вершину.
"""

from __future__ import annotations

import itertools

import numpy as np

from objmesh.mesh.mesh import AttributeSet, FlatMesh, IndexedMesh, Mesh
from objmesh.utils.logger import logger


def _flat_indices(faces) -> np.ndarray:
    if isinstance(faces, np.ndarray):
        return faces.reshape(-1).astype(np.int64)
    return np.fromiter(itertools.chain.from_iterable(faces), dtype=np.int64)


def flatten_array_of_arrays(arrays, dtype=np.float32) -> np.ndarray:
    """[[1,2,3], [4,5,6]] -> [1,2,3,4,5,6] (непрерывный 1‑D массив)."""
    if isinstance(arrays, np.ndarray):
        return np.ascontiguousarray(arrays, dtype=dtype).reshape(-1)
    return np.fromiter(itertools.chain.from_iterable(arrays), dtype=dtype)


def flatten_mesh(mesh: Mesh) -> FlatMesh:
    """Развернуть каждый атрибут, имеющий массив индексов граней."""
    mesh.validate()

    vertex = AttributeSet()
    for name, faces in mesh.face_vertex_indices.items():
        # fancy‑indexing всегда создаёт копию – данные не разделяются с mesh
        vertex[name] = mesh.vertex[name][_flat_indices(faces)]

    flat = FlatMesh(vertex)
    logger.debug(f"[Flatten] {mesh.face_count} faces -> {flat.vertex_count} vertices.")
    return flat


def unify_mesh(mesh: Mesh) -> IndexedMesh:
    """
    Собрать единый индексный буфер.  Каждое уникальное сочетание индексов
    атрибутов становится новой вершиной (в порядке первого появления).
    """
    mesh.validate()

    names = list(mesh.face_vertex_indices)
    if not names:
        return IndexedMesh(AttributeSet(), np.zeros((0, 3), dtype=np.uint32))
    columns = [_flat_indices(mesh.face_vertex_indices[name]) for name in names]

    vert_dict = {}   # (p, t, n) -> новый индекс
    flat_index = []
    for key in zip(*(column.tolist() for column in columns)):
        if key not in vert_dict:
            vert_dict[key] = len(vert_dict)
        flat_index.append(vert_dict[key])

    keys = np.array(list(vert_dict), dtype=np.int64).reshape(len(vert_dict), len(names))
    vertex = AttributeSet()
    for column, name in enumerate(names):
        vertex[name] = mesh.vertex[name][keys[:, column]]

    flat_index = np.array(flat_index, dtype=np.uint32)
    arity = mesh.face_arity(names[0])
    if arity is not None:
        indices = flat_index.reshape(-1, arity)
    else:
        # рваные грани: режем по длинам исходных граней
        lengths = [len(face) for face in mesh.face_vertex_indices[names[0]]]
        bounds = np.cumsum([0] + lengths)
        indices = [tuple(flat_index[start:end].tolist())
                   for start, end in zip(bounds[:-1], bounds[1:])]

    logger.debug(f"[Flatten] Unified {len(flat_index)} face vertices "
                 f"into {len(vert_dict)} shared vertices.")
    return IndexedMesh(vertex, indices)
