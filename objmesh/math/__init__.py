"""
Математический суб‑пакет: векторные операции над массивами NumPy.
"""

from objmesh.math.vector import NORMAL_EPSILON, normalize_rows, triangle_normals

__all__ = ["NORMAL_EPSILON", "normalize_rows", "triangle_normals"]
