# objmesh/mesh/mesh.py
"""
Модель мульти‑индексного меша.

* ``AttributeSet`` – набор именованных массивов (positions / normals /
  texcoords), каждый присутствует только если был объявлен в источнике.
* ``Mesh`` – вершинные массивы + массивы индексов граней по атрибутам.
* ``FlatMesh`` – результат «расплющивания»: только вершинные массивы.
* ``IndexedMesh`` – результат унификации: одно общее пространство индексов.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

import numpy as np

from objmesh.errors import IndexOutOfRangeError, MeshLayoutError

ATTRIBUTES = ("positions", "normals", "texcoords")

# Число компонент вершинного атрибута.
COMPONENTS = {"positions": 3, "normals": 3, "texcoords": 2}

# Массив индексов: (F, arity) uint32, либо список кортежей разной длины.
FaceArray = Union[np.ndarray, list]


def _copy_array(value):
    if isinstance(value, np.ndarray):
        return value.copy()
    return [tuple(face) for face in value]


def _first_out_of_range(faces, vertex_count: int):
    if isinstance(faces, np.ndarray):
        bad = np.argwhere((faces < 0) | (faces >= vertex_count))
        if len(bad) == 0:
            return None
        face, slot = (int(v) for v in bad[0])
        return face, slot, int(faces[face, slot])
    for face, entry in enumerate(faces):
        for slot, index in enumerate(entry):
            if not 0 <= index < vertex_count:
                return face, slot, index
    return None


def validate_face_indices(faces, vertex_count: int, attribute: str) -> None:
    """Все индексы должны лежать в [0, vertex_count)."""
    offender = _first_out_of_range(faces, vertex_count)
    if offender is None:
        return
    face, slot, index = offender
    raise IndexOutOfRangeError(
        f"face {face + 1}, vertex {slot + 1}: {attribute} index {index + 1} "
        f"is out of range (1..{vertex_count})",
        kind="f",
        attribute=attribute,
        index=index,
    )


class AttributeSet:
    """Словаре‑подобный контейнер присутствующих атрибутов."""

    __slots__ = ("_arrays",)

    def __init__(self, **arrays):
        self._arrays = {}
        for name, value in arrays.items():
            if value is not None:
                self[name] = value

    # -----------------------------------------------------------------
    @staticmethod
    def _check_name(name: str) -> None:
        if name not in ATTRIBUTES:
            raise KeyError(f"Unknown mesh attribute: {name!r}")

    def __getitem__(self, name: str):
        self._check_name(name)
        return self._arrays[name]

    def __setitem__(self, name: str, value) -> None:
        self._check_name(name)
        self._arrays[name] = value

    def __delitem__(self, name: str) -> None:
        self._check_name(name)
        del self._arrays[name]

    def __contains__(self, name: object) -> bool:
        return name in self._arrays

    def __iter__(self) -> Iterator[str]:
        # канонический порядок, а не порядок вставки
        return (name for name in ATTRIBUTES if name in self._arrays)

    def __len__(self) -> int:
        return len(self._arrays)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{n}={len(self._arrays[n])}" for n in self)
        return f"AttributeSet({sizes})"

    def get(self, name: str, default=None):
        self._check_name(name)
        return self._arrays.get(name, default)

    def items(self):
        return [(name, self._arrays[name]) for name in self]

    def copy(self) -> "AttributeSet":
        return AttributeSet(**{name: _copy_array(value) for name, value in self.items()})

    # -----------------------------------------------------------------
    # доступ атрибутами: mesh.vertex.positions -> ndarray | None
    # -----------------------------------------------------------------
    @property
    def positions(self):
        return self._arrays.get("positions")

    @property
    def normals(self):
        return self._arrays.get("normals")

    @property
    def texcoords(self):
        return self._arrays.get("texcoords")


class Mesh:
    """Мульти‑индексный меш: каждый атрибут адресуется своим массивом индексов."""

    def __init__(self,
                 vertex: Optional[AttributeSet] = None,
                 face_vertex_indices: Optional[AttributeSet] = None):
        self.vertex = vertex if vertex is not None else AttributeSet()
        self.face_vertex_indices = (face_vertex_indices
                                    if face_vertex_indices is not None
                                    else AttributeSet())

    # -----------------------------------------------------------------
    @property
    def face_count(self) -> int:
        """Количество граней (0, если граней нет вообще)."""
        for name in self.face_vertex_indices:
            return len(self.face_vertex_indices[name])
        return 0

    def face_arity(self, name: str = "positions") -> Optional[int]:
        """Общая арность граней атрибута; None для «рваного» массива."""
        faces = self.face_vertex_indices[name]
        if isinstance(faces, np.ndarray):
            return int(faces.shape[1])
        arities = {len(face) for face in faces}
        if len(arities) == 1:
            return arities.pop()
        return None

    def validate(self) -> None:
        """
        Проверить согласованность меша перед разыменованием индексов:

        1. у каждого массива индексов есть вершинный массив;
        2. все индексы в диапазоне;
        3. все массивы индексов одной длины и с одинаковой арностью граней.
        """
        reference = None
        for name, faces in self.face_vertex_indices.items():
            if name not in self.vertex:
                raise MeshLayoutError(f"{name} face indices without {name} vertex data",
                                      attribute=name)
            validate_face_indices(faces, len(self.vertex[name]), name)

            arities = [len(face) for face in faces]
            if reference is None:
                reference = (name, arities)
                continue
            ref_name, ref_arities = reference
            if len(arities) != len(ref_arities):
                raise MeshLayoutError(
                    f"{name} has {len(arities)} faces but {ref_name} has {len(ref_arities)}",
                    attribute=name)
            if arities != ref_arities:
                raise MeshLayoutError(f"{name} face arities differ from {ref_name}",
                                      attribute=name)

    def copy(self) -> "Mesh":
        """Глубокая копия: новый меш не разделяет массивы с исходным."""
        return Mesh(self.vertex.copy(), self.face_vertex_indices.copy())

    def __repr__(self) -> str:
        return f"Mesh(vertex={self.vertex!r}, faces={self.face_count})"


class FlatMesh:
    """Меш без индексов: одна запись атрибута на каждое вхождение вершины в грань."""

    def __init__(self, vertex: Optional[AttributeSet] = None):
        self.vertex = vertex if vertex is not None else AttributeSet()
        self.face_vertex_indices = AttributeSet()

    @property
    def vertex_count(self) -> int:
        for name in self.vertex:
            return len(self.vertex[name])
        return 0

    def __repr__(self) -> str:
        return f"FlatMesh(vertex={self.vertex!r})"


class IndexedMesh:
    """Меш с единым пространством индексов для всех атрибутов."""

    def __init__(self, vertex: AttributeSet, indices: FaceArray):
        self.vertex = vertex
        self.indices = indices

    @property
    def vertex_count(self) -> int:
        for name in self.vertex:
            return len(self.vertex[name])
        return 0

    def __repr__(self) -> str:
        return f"IndexedMesh(vertex={self.vertex!r}, faces={len(self.indices)})"
