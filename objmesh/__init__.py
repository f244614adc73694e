"""
objmesh – разбор Wavefront OBJ в мульти‑индексный меш для рендеринга.
Позиции, нормали и texcoords, треугольные и четырёхугольные грани,
синтез нормалей, расплющивание под один индексный буфер.
"""

from objmesh.utils import logger
from objmesh.errors import (
    ObjError,
    MalformedNumberError,
    MalformedFaceIndexError,
    IndexOutOfRangeError,
    MissingPositionsForNormalsError,
    MeshLayoutError,
    IndexWidthError,
)
from objmesh.mesh import (
    AttributeSet, Mesh, FlatMesh, IndexedMesh,
    compute_vertex_normals, compute_face_normals, synthesize_normals,
    flatten_mesh, unify_mesh, flatten_array_of_arrays,
)
from objmesh.parser import parse_obj_text, triangulate_faces, TriangulationReport
from objmesh.utils.config import ParserConfig
from objmesh.utils.loader import load_obj_file

__version__ = "1.0.0"

__all__ = [
    "parse_obj_text",
    "load_obj_file",
    "triangulate_faces",
    "TriangulationReport",
    "AttributeSet",
    "Mesh",
    "FlatMesh",
    "IndexedMesh",
    "compute_vertex_normals",
    "compute_face_normals",
    "synthesize_normals",
    "flatten_mesh",
    "unify_mesh",
    "flatten_array_of_arrays",
    "ParserConfig",
    "ObjError",
    "MalformedNumberError",
    "MalformedFaceIndexError",
    "IndexOutOfRangeError",
    "MissingPositionsForNormalsError",
    "MeshLayoutError",
    "IndexWidthError",
]
