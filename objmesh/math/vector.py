# -*- coding: utf-8 -*-
"""
Векторные помощники на базе NumPy (float64).

Все функции работают как с одиночными 3‑векторами, так и с массивами
формы (N, 3) – операции применяются построчно.
"""

import numpy as np

NORMAL_EPSILON = 1e-5


def as_vectors(values) -> np.ndarray:
    """Привести вход к float64‑массиву (копия не гарантируется)."""
    return np.asarray(values, dtype=np.float64)


def triangle_normals(positions: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """
    Ненормированные нормали треугольников: (p1 - p0) x (p2 - p0).

    Порядок обхода берётся как есть, без проверки согласованности.
    """
    p0 = positions[triangles[:, 0]]
    p1 = positions[triangles[:, 1]]
    p2 = positions[triangles[:, 2]]
    return np.cross(p1 - p0, p2 - p0)


def normalize_rows(vectors: np.ndarray, eps: float = NORMAL_EPSILON) -> np.ndarray:
    """
    Нормировать каждую строку.  Строки длиной <= eps обнуляются
    (вырожденная или неиспользуемая вершина).
    """
    vectors = as_vectors(vectors)
    lengths = np.linalg.norm(vectors, axis=-1, keepdims=True)
    scale = np.zeros_like(lengths)
    mask = lengths > eps
    scale[mask] = 1.0 / lengths[mask]
    return vectors * scale
