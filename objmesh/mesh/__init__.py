"""
Пакет mesh – модель меша, синтез нормалей, расплющивание.
"""

from objmesh.mesh.mesh import AttributeSet, Mesh, FlatMesh, IndexedMesh
from objmesh.mesh.normals import compute_vertex_normals, compute_face_normals, synthesize_normals
from objmesh.mesh.flatten import flatten_mesh, unify_mesh, flatten_array_of_arrays

__all__ = ["AttributeSet", "Mesh", "FlatMesh", "IndexedMesh",
           "compute_vertex_normals", "compute_face_normals", "synthesize_normals",
           "flatten_mesh", "unify_mesh", "flatten_array_of_arrays"]
