# -*- coding: utf-8 -*-
"""
Загрузка массивов меша в буферы графического бекенда.

* ``BufferSelection`` – какие атрибуты загружать (``which``); None = все.
* ``create_mesh_buffers`` – по буферу на атрибут: вершинные данные как
  float32, индексы – uint16 или uint32 (с проверкой ширины).
* ``attach_buffers_to_shader`` – связать имена атрибутов шейдера с
  именами вершинных свойств меша.

Перед сменой шейдера локации нужно отключить:
``detach_shader_attributes(backend, locations)``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

import numpy as np

from objmesh.errors import IndexWidthError
from objmesh.graphics.backend import BufferBackend, INDEX_BUFFER, VERTEX_BUFFER
from objmesh.mesh.flatten import flatten_array_of_arrays
from objmesh.utils.config import ParserConfig
from objmesh.utils.logger import logger

INDEX_DTYPES = {
    "uint16": np.uint16,
    "uint32": np.uint32,
}


class BufferSelection:
    """Набор имён атрибутов для загрузки; None означает «все присутствующие»."""

    def __init__(self,
                 vertex: Optional[Iterable[str]] = None,
                 face_vertex_indices: Optional[Iterable[str]] = None):
        self.vertex = None if vertex is None else list(vertex)
        self.face_vertex_indices = (None if face_vertex_indices is None
                                    else list(face_vertex_indices))

    @staticmethod
    def _resolve(requested, present, kind: str) -> list:
        if requested is None:
            return list(present)
        for name in requested:
            if name not in present:
                raise KeyError(f"mesh has no {kind} attribute {name!r}")
        return list(requested)

    def resolve(self, mesh) -> tuple:
        return (
            self._resolve(self.vertex, mesh.vertex, "vertex"),
            self._resolve(self.face_vertex_indices, mesh.face_vertex_indices, "face index"),
        )


class MeshBuffers:
    """Хэндлы буферов бекенда по именам атрибутов."""

    def __init__(self):
        self.vertex: Dict[str, Any] = {}
        self.face_vertex_indices: Dict[str, Any] = {}
        self.index_counts: Dict[str, int] = {}

    def release(self, backend: BufferBackend) -> None:
        for buffer in self.vertex.values():
            backend.delete_buffer(buffer)
        for buffer in self.face_vertex_indices.values():
            backend.delete_buffer(buffer)
        self.vertex.clear()
        self.face_vertex_indices.clear()
        self.index_counts.clear()


def _index_dtype(index_dtype):
    if isinstance(index_dtype, str):
        if index_dtype not in INDEX_DTYPES:
            raise ValueError(f"Unsupported index dtype: {index_dtype!r}")
        return INDEX_DTYPES[index_dtype]
    return np.dtype(index_dtype).type


def pack_indices(faces, name: str, index_dtype=np.uint16) -> np.ndarray:
    """Развернуть индексы граней и проверить, что они помещаются в ширину типа."""
    dtype = _index_dtype(index_dtype)
    flat = flatten_array_of_arrays(faces, dtype=np.int64)
    limit = np.iinfo(dtype).max
    if flat.size and int(flat.max()) > limit:
        raise IndexWidthError(
            f"{name} index {int(flat.max())} does not fit into {np.dtype(dtype).name}",
            attribute=name,
            index=int(flat.max()),
        )
    return flat.astype(dtype)


def create_mesh_buffers(backend: BufferBackend,
                        mesh,
                        which: Optional[BufferSelection] = None,
                        index_dtype=None,
                        config: Optional[ParserConfig] = None) -> MeshBuffers:
    """
    Создать по буферу на каждый выбранный массив ``mesh`` (Mesh или FlatMesh).
    Тип индексов: аргумент ``index_dtype``, иначе ключ ``index_dtype`` конфигурации.
    """
    if index_dtype is None:
        index_dtype = (config or ParserConfig.defaults())["index_dtype"]
    if which is None:
        which = BufferSelection()
    vertex_names, index_names = which.resolve(mesh)

    # проверяем ширину индексов до того, как что‑то загружено
    packed = {name: pack_indices(mesh.face_vertex_indices[name], name, index_dtype)
              for name in index_names}

    buffers = MeshBuffers()
    for name in vertex_names:
        data = flatten_array_of_arrays(mesh.vertex[name], dtype=np.float32)
        buffers.vertex[name] = backend.create_buffer(data.tobytes(), target=VERTEX_BUFFER)
    for name in index_names:
        buffers.face_vertex_indices[name] = backend.create_buffer(
            packed[name].tobytes(), target=INDEX_BUFFER)
        buffers.index_counts[name] = int(packed[name].size)

    logger.debug(f"[Buffers] Uploaded vertex {vertex_names}, indices {index_names} "
                 f"({np.dtype(_index_dtype(index_dtype)).name}).")
    return buffers


def attach_buffers_to_shader(backend: BufferBackend,
                             mesh,
                             buffers: MeshBuffers,
                             program: Any,
                             attribute_map: Mapping[str, str]) -> Dict[str, int]:
    """
    attribute_map: имя атрибута в шейдере -> имя вершинного свойства меша.
    Возвращает имя атрибута шейдера -> локация.
    """
    locations = {}
    for attrib, prop in attribute_map.items():
        location = backend.get_attrib_location(program, attrib)
        if location < 0:
            logger.warning(f"[Buffers] Shader has no active attribute {attrib!r}.")
            continue
        size = int(np.shape(mesh.vertex[prop])[1])
        backend.bind_vertex_attribute(buffers.vertex[prop], location, size)
        locations[attrib] = location
    return locations


def detach_shader_attributes(backend: BufferBackend, locations: Mapping[str, int]) -> None:
    for location in locations.values():
        backend.disable_vertex_attribute(location)
