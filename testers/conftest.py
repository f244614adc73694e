# -*- coding: utf-8 -*-
"""
conftest.py – мок‑бэкенд буферов и типовые OBJ‑тексты.
Не требует GL‑контекста: MockBackend только записывает вызовы.
"""

from typing import Any, Tuple

import pytest

from objmesh.graphics.backend import BufferBackend


# ----------------------------------------------------------------------
# MockBackend – полностью реализует интерфейс BufferBackend.
# ----------------------------------------------------------------------
class MockBackend(BufferBackend):
    """Каждый метод только записывает вызов в `self.calls`."""

    def __init__(self, attrib_locations=None) -> None:
        # (method_name, args)
        self.calls: list[Tuple[str, Tuple[Any, ...]]] = []
        self.buffers: dict[int, Tuple[bytes, str]] = {}
        self.attrib_locations = attrib_locations or {}
        self._next_handle = 1

    def _record(self, name: str, *a) -> None:
        self.calls.append((name, a))

    def create_buffer(self, data: bytes, target: str = "vertex") -> Any:
        self._record("create_buffer", data, target)
        handle = self._next_handle
        self._next_handle += 1
        self.buffers[handle] = (data, target)
        return handle

    def delete_buffer(self, buffer: Any) -> None:
        self._record("delete_buffer", buffer)
        del self.buffers[buffer]

    def get_attrib_location(self, program: Any, name: str) -> int:
        self._record("get_attrib_location", program, name)
        return self.attrib_locations.get(name, -1)

    def bind_vertex_attribute(self, buffer: Any, location: int, size: int) -> None:
        self._record("bind_vertex_attribute", buffer, location, size)

    def disable_vertex_attribute(self, location: int) -> None:
        self._record("disable_vertex_attribute", location)

    def called(self, name: str) -> list:
        return [args for method, args in self.calls if method == name]


@pytest.fixture
def backend():
    return MockBackend(attrib_locations={"aPosition": 0, "aNormal": 1, "aUV": 2})


# ----------------------------------------------------------------------
# OBJ‑тексты
# ----------------------------------------------------------------------
TRIANGLE_OBJ = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3"

QUAD_OBJ = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4"

TEXTURED_QUADS_OBJ = """\
# two quads sharing an edge
mtllib plane.mtl
o Plane
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 1.0 1.0 0.0
v 0.0 1.0 0.0
v 2.0 0.0 0.0
v 2.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
vn 0.0 0.0 1.0
usemtl Default
s off
f 1/1/1 2/2/1 3/3/1 4/4/1
f 2/1/1 5/2/1 6/3/1 3/4/1
"""


@pytest.fixture
def triangle_text():
    return TRIANGLE_OBJ


@pytest.fixture
def quad_text():
    return QUAD_OBJ


@pytest.fixture
def textured_quads_text():
    return TEXTURED_QUADS_OBJ
