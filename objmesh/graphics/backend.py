"""
Абстрактный интерфейс графического бекенда для загрузки буферов меша.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

# target‑ы буферов
VERTEX_BUFFER = "vertex"
INDEX_BUFFER = "index"


class BufferBackend(ABC):
    """Base interface for mesh buffer upload backends."""

    @abstractmethod
    def create_buffer(self, data: bytes, target: str = VERTEX_BUFFER) -> Any:
        pass

    @abstractmethod
    def delete_buffer(self, buffer: Any) -> None:
        pass

    @abstractmethod
    def get_attrib_location(self, program: Any, name: str) -> int:
        pass

    @abstractmethod
    def bind_vertex_attribute(self, buffer: Any, location: int, size: int) -> None:
        pass

    @abstractmethod
    def disable_vertex_attribute(self, location: int) -> None:
        pass
