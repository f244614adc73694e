"""
Настройки разбора OBJ в формате JSON.
Если файл не найден или не читается – используются значения по‑умолчанию.
Файл записывается только явным вызовом save().
"""

import json
from pathlib import Path
from objmesh.utils.logger import logger

DEFAULT_CONFIG = {
    "triangulate": True,
    "normals": None,                 # None | "vertex" | "face"
    "normalize_face_normals": False,
    "normal_epsilon": 1e-5,
    "index_dtype": "uint16",         # uint16 | uint32
}

NORMAL_MODES = (None, "vertex", "face")
INDEX_DTYPES = ("uint16", "uint32")


class ParserConfig:
    """Объект конфигурации парсера (без глобального состояния)."""

    def __init__(self, path: str = "objmesh.json", data: dict = None):
        self.path = Path(path)
        if data is not None:
            self.data = {**DEFAULT_CONFIG, **data}
        else:
            self._load()
        self._validate()

    @classmethod
    def defaults(cls) -> "ParserConfig":
        return cls(data={})

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data = {**DEFAULT_CONFIG, **loaded}
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.info(f"[Config] No config file {self.path} – using defaults.")
            self.data = DEFAULT_CONFIG.copy()

    def _validate(self):
        if self.data["normals"] not in NORMAL_MODES:
            raise ValueError(f"[Config] Unknown normals mode: {self.data['normals']!r}")
        if self.data["index_dtype"] not in INDEX_DTYPES:
            raise ValueError(f"[Config] Unknown index dtype: {self.data['index_dtype']!r}")

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self._validate()

    def get(self, key, default=None):
        return self.data.get(key, default)
