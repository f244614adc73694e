# objmesh/graphics/gl_backend.py
"""
OpenGL‑бекенд загрузки буферов (PyOpenGL).
Требует активного GL‑контекста у вызывающего кода.
"""

from typing import Any

from objmesh.graphics.backend import BufferBackend, INDEX_BUFFER, VERTEX_BUFFER
from objmesh.utils.logger import logger


def gl_check_error(gl, context: str = "") -> int:
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = gl.glGetError()
    if err != gl.GL_NO_ERROR:
        logger.error(f"OpenGL error 0x{int(err):04X} [{context}]")
    return err


class GLBufferBackend(BufferBackend):
    """Создаёт VBO/EBO через чистый OpenGL."""

    def __init__(self, gl=None):
        if gl is None:
            from OpenGL import GL as gl
        self.gl = gl
        self._targets = {
            VERTEX_BUFFER: gl.GL_ARRAY_BUFFER,
            INDEX_BUFFER: gl.GL_ELEMENT_ARRAY_BUFFER,
        }

    def create_buffer(self, data: bytes, target: str = VERTEX_BUFFER) -> Any:
        gl = self.gl
        gl_target = self._targets[target]
        buffer = gl.glGenBuffers(1)
        gl.glBindBuffer(gl_target, buffer)
        gl.glBufferData(gl_target, len(data), data, gl.GL_STATIC_DRAW)
        gl_check_error(gl, f"create_buffer({target})")
        return buffer

    def delete_buffer(self, buffer: Any) -> None:
        self.gl.glDeleteBuffers(1, [buffer])

    def get_attrib_location(self, program: Any, name: str) -> int:
        return int(self.gl.glGetAttribLocation(program, name))

    def bind_vertex_attribute(self, buffer: Any, location: int, size: int) -> None:
        gl = self.gl
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, buffer)
        gl.glVertexAttribPointer(location, size, gl.GL_FLOAT, False, 0, None)
        gl.glEnableVertexAttribArray(location)
        gl_check_error(gl, f"bind_vertex_attribute({location})")

    def disable_vertex_attribute(self, location: int) -> None:
        self.gl.glDisableVertexAttribArray(location)
