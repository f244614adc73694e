# objmesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger / init_logger – логгер пакета и его настройка
    * ParserConfig         – настройки разбора из JSON
    * Profiler             – замер времени блока кода
"""

from .logger import logger, init_logger
from .config import ParserConfig, DEFAULT_CONFIG
from .profiler import Profiler

__all__ = ["logger", "init_logger", "ParserConfig", "DEFAULT_CONFIG", "Profiler"]
