"""
Пакет parser – сканер строк OBJ, разбор вершин и граней, триангуляция.
"""

from objmesh.parser.scanner import ObjRecord, RecordKind, classify_line, scan_text
from objmesh.parser.faces import FacePresence, decode_face, infer_face_presence
from objmesh.parser.triangulate import TriangulationReport, triangulate_faces
from objmesh.parser.obj_parser import parse_obj_text

__all__ = ["ObjRecord", "RecordKind", "classify_line", "scan_text",
           "FacePresence", "decode_face", "infer_face_presence",
           "TriangulationReport", "triangulate_faces", "parse_obj_text"]
