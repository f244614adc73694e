# -*- coding: utf-8 -*-
"""
GLBufferBackend поверх записывающей заглушки GL‑функций
(настоящий контекст OpenGL в тестах не создаётся).
"""

import logging

import numpy as np

from objmesh import parse_obj_text
from objmesh.graphics import attach_buffers_to_shader, create_mesh_buffers
from objmesh.graphics.gl_backend import GLBufferBackend


class RecordingGL:
    GL_NO_ERROR = 0
    GL_ARRAY_BUFFER = 0x8892
    GL_ELEMENT_ARRAY_BUFFER = 0x8893
    GL_STATIC_DRAW = 0x88E4
    GL_FLOAT = 0x1406

    def __init__(self, error=0):
        self.calls = []
        self.error = error
        self._next = 100

    def glGenBuffers(self, n):
        self._next += 1
        self.calls.append(("glGenBuffers", n))
        return self._next

    def __getattr__(self, name):
        if not name.startswith("gl"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, *args))
            if name == "glGetAttribLocation":
                return 3
        return record

    def glGetError(self):
        return self.error


def test_buffers_are_created_with_gl_calls(triangle_text):
    gl = RecordingGL()
    backend = GLBufferBackend(gl)
    buffers = create_mesh_buffers(backend, parse_obj_text(triangle_text))

    assert buffers.vertex["positions"] == 101
    assert buffers.face_vertex_indices["positions"] == 102
    data_calls = [c for c in gl.calls if c[0] == "glBufferData"]
    assert [c[1] for c in data_calls] == [gl.GL_ARRAY_BUFFER, gl.GL_ELEMENT_ARRAY_BUFFER]
    assert data_calls[0][2] == 9 * np.dtype(np.float32).itemsize
    assert data_calls[1][2] == 3 * np.dtype(np.uint16).itemsize


def test_attribute_binding_and_release(triangle_text):
    gl = RecordingGL()
    backend = GLBufferBackend(gl)
    mesh = parse_obj_text(triangle_text)
    buffers = create_mesh_buffers(backend, mesh)
    locations = attach_buffers_to_shader(backend, mesh, buffers, 5, {"aPosition": "positions"})

    assert locations == {"aPosition": 3}
    assert ("glVertexAttribPointer", 3, 3, gl.GL_FLOAT, False, 0, None) in gl.calls
    assert ("glEnableVertexAttribArray", 3) in gl.calls

    buffers.release(backend)
    assert [c for c in gl.calls if c[0] == "glDeleteBuffers"] == [
        ("glDeleteBuffers", 1, [101]), ("glDeleteBuffers", 1, [102])]


def test_gl_errors_are_logged(caplog, triangle_text):
    backend = GLBufferBackend(RecordingGL(error=0x0505))
    with caplog.at_level(logging.ERROR, logger="objmesh"):
        create_mesh_buffers(backend, parse_obj_text(triangle_text))
    assert "OpenGL error 0x0505" in caplog.text
