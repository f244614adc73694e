# -*- coding: utf-8 -*-
"""
Разбор текста Wavefront OBJ в мульти‑индексный ``Mesh``.

Поток данных:
    текст -> сканер -> (вершинные записи | триангуляция -> декодер граней)
          -> проверка индексов -> Mesh [-> синтез нормалей]

Поддерживаются только v / vn / vt / f; материалы, группы, сглаживание,
относительные индексы и кривые игнорируются.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from objmesh.mesh.mesh import AttributeSet, Mesh, validate_face_indices
from objmesh.mesh.normals import synthesize_normals
from objmesh.parser.attributes import parse_attribute_records
from objmesh.parser.faces import FIELD_ATTRIBUTE, decode_faces, infer_face_presence
from objmesh.parser.scanner import scan_text
from objmesh.parser.triangulate import triangulate_faces
from objmesh.utils.config import ParserConfig
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler


def _to_index_array(faces):
    if isinstance(faces, np.ndarray):
        return faces.astype(np.uint32)
    return faces


def _decode_face_arrays(face_records, vertex, face_vertex_indices) -> None:
    """Декодировать и проверить индексы всех объявленных полей граней."""
    if not face_records:
        return
    presence = infer_face_presence(face_records[0])
    for field in presence.fields():
        name = FIELD_ATTRIBUTE[field]
        faces = decode_faces(face_records, field)
        if name not in vertex:
            logger.warning(f"[Parser] Faces reference {name} but the source "
                           f"declares none; dropping {name} face indices.")
            continue
        validate_face_indices(faces, len(vertex[name]), name)
        face_vertex_indices[name] = _to_index_array(faces)


def parse_obj_text(text: str,
                   triangulate: Optional[bool] = None,
                   normals: Optional[str] = None,
                   config: Optional[ParserConfig] = None) -> Mesh:
    """
    Разобрать OBJ‑текст.

    triangulate – превращать квады в пары треугольников (по умолчанию да);
    normals     – None | "vertex" | "face": синтезировать нормали после разбора.
    Явные аргументы имеют приоритет над ``config``.
    """
    if config is None:
        config = ParserConfig.defaults()
    if triangulate is None:
        triangulate = config["triangulate"]
    if normals is None:
        normals = config["normals"]

    with Profiler("parse_obj_text") as timer:
        with timer.stage("scan"):
            scanned = scan_text(text)

        vertex = AttributeSet()
        with timer.stage("attributes"):
            for name in ("positions", "normals", "texcoords"):
                records = getattr(scanned, name)
                if records:
                    vertex[name] = parse_attribute_records(records)

        face_records = []
        for record in scanned.faces:
            if record.arity < 3:
                logger.debug(f"[Parser] Skipping {record.arity}-vertex face "
                             f"at line {record.line_number}.")
                continue
            face_records.append(record)
        if triangulate:
            face_records, _ = triangulate_faces(face_records)

        face_vertex_indices = AttributeSet()
        with timer.stage("faces"):
            _decode_face_arrays(face_records, vertex, face_vertex_indices)

        mesh = Mesh(vertex, face_vertex_indices)

    logger.info(f"[Parser] Parsed {mesh!r} in {timer.elapsed_ms:.2f} ms.")

    if normals is not None:
        mesh = synthesize_normals(
            mesh,
            normals,
            eps=config["normal_epsilon"],
            normalize_face_normals=config["normalize_face_normals"],
        )
    return mesh
