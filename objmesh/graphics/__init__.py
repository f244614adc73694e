"""
Графический слой: интерфейс бекенда и загрузка буферов меша.
GL‑реализация (objmesh.graphics.gl_backend) импортируется явно –
ей нужен PyOpenGL и активный контекст.
"""

from objmesh.graphics.backend import BufferBackend, VERTEX_BUFFER, INDEX_BUFFER
from objmesh.graphics.buffers import (
    BufferSelection,
    MeshBuffers,
    create_mesh_buffers,
    attach_buffers_to_shader,
    detach_shader_attributes,
)

__all__ = ["BufferBackend", "VERTEX_BUFFER", "INDEX_BUFFER", "BufferSelection",
           "MeshBuffers", "create_mesh_buffers", "attach_buffers_to_shader",
           "detach_shader_attributes"]
