# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета.  Конфигурация (формат, уровень) – по запросу
# через init_logger(), библиотека сама root‑логгер не трогает.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "objmesh"

logger = logging.getLogger(LOGGER_NAME)


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.setLevel(level)
    return logger
