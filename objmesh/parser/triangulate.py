# -*- coding: utf-8 -*-
"""
Триангуляция квадов: (t1, t2, t3, t4) -> (t1, t2, t3), (t1, t3, t4).
Работает над записями граней ДО декодирования индексов.
Грани с арностью вне 3..4 отбрасываются (n‑угольники не поддерживаются).
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from objmesh.parser.scanner import ObjRecord
from objmesh.utils.logger import logger


class TriangulationReport(NamedTuple):
    input_faces: int
    quads_converted: int
    triangles: int


def triangulate_faces(records: Sequence[ObjRecord]) -> Tuple[List[ObjRecord], TriangulationReport]:
    triangles = []
    quads = 0
    accepted = 0
    for record in records:
        if record.arity == 3:
            triangles.append(record)
        elif record.arity == 4:
            t1, t2, t3, t4 = record.tokens
            triangles.append(record._replace(tokens=(t1, t2, t3)))
            triangles.append(record._replace(tokens=(t1, t3, t4)))
            quads += 1
        else:
            logger.debug(f"[Triangulator] Skipping {record.arity}-vertex face "
                         f"at line {record.line_number}.")
            continue
        accepted += 1

    report = TriangulationReport(input_faces=accepted,
                                 quads_converted=quads,
                                 triangles=len(triangles))
    logger.info(f"[Triangulator] Converted {quads} quad faces "
                f"(out of {accepted}) into triangles; {len(triangles)} triangles total.")
    return triangles, report
