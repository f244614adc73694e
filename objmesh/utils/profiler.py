"""
Замер времени разбора.

``Profiler`` – контекст‑менеджер на весь блок; внутри него ``stage(name)``
засекает отдельные этапы (scan / attributes / faces …). После выхода
доступны ``elapsed_ms`` и ``stages`` (имя этапа -> мс, в порядке запуска).
"""

import logging
import time
from contextlib import contextmanager
from typing import Dict

from objmesh.utils.logger import logger


class Profiler:
    """Контекст‑менеджер для измерения времени выполнения."""

    def __init__(self, name: str, level: int = logging.DEBUG):
        self.name = name
        self.level = level
        self._start = 0.0
        self.elapsed_ms = 0.0
        self.stages: Dict[str, float] = {}

    def __enter__(self):
        self._start = time.perf_counter()
        self.stages.clear()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        if exc_type is None:
            logger.log(self.level, f"[Profiler] {self.summary()}")
        return False

    @contextmanager
    def stage(self, name: str):
        """Засечь этап; повторный запуск с тем же именем суммируется."""
        start = time.perf_counter()
        try:
            yield
        finally:
            spent = (time.perf_counter() - start) * 1000.0
            self.stages[name] = self.stages.get(name, 0.0) + spent

    def summary(self) -> str:
        text = f"{self.name}: {self.elapsed_ms:.2f} ms"
        if self.stages:
            parts = ", ".join(f"{k} {v:.2f}" for k, v in self.stages.items())
            text += f" ({parts})"
        return text
