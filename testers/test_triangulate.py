# -*- coding: utf-8 -*-
import logging

import numpy as np

from objmesh import parse_obj_text
from objmesh.parser.scanner import scan_text
from objmesh.parser.triangulate import TriangulationReport, triangulate_faces


def test_quad_scenario(quad_text):
    mesh = parse_obj_text(quad_text)
    assert mesh.face_vertex_indices["positions"].tolist() == [[0, 1, 2], [0, 2, 3]]


def test_triangles_pass_through_unchanged():
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nv 1 1 0\nf 1 2 3\nf 2 4 3"
    with_tri = parse_obj_text(text, triangulate=True)
    without = parse_obj_text(text, triangulate=False)
    assert with_tri.face_vertex_indices["positions"].tolist() == [[0, 1, 2], [1, 3, 2]]
    assert np.array_equal(with_tri.face_vertex_indices["positions"],
                          without.face_vertex_indices["positions"])


def test_quads_become_pairs_sharing_diagonal():
    text = ("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nv 2 0 0\nv 2 1 0\n"
            "f 1 2 3 4\nf 2 5 6 3")
    faces = parse_obj_text(text).face_vertex_indices["positions"]
    assert len(faces) == 4
    quads = [(0, 1, 2, 3), (1, 4, 5, 2)]
    for i, (t1, _, t3, _) in enumerate(quads):
        first, second = faces[2 * i], faces[2 * i + 1]
        assert (first[0], first[2]) == (t1, t3)
        assert (second[0], second[1]) == (t1, t3)


def test_order_is_preserved_for_mixed_faces():
    text = ("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\n"
            "f 1 2 3\nf 1 2 3 4\nf 4 3 2")
    faces = parse_obj_text(text).face_vertex_indices["positions"].tolist()
    assert faces == [[0, 1, 2], [0, 1, 2], [0, 2, 3], [3, 2, 1]]


def test_report_and_log(caplog):
    records = scan_text("f 1 2 3\nf 1 2 3 4\nf 1 2 3 4 5\nf 5 6 7 8").faces
    with caplog.at_level(logging.INFO, logger="objmesh"):
        triangles, report = triangulate_faces(records)
    assert report == TriangulationReport(input_faces=3, quads_converted=2, triangles=5)
    assert [r.arity for r in triangles] == [3, 3, 3, 3, 3]
    assert triangles[1].line_number == triangles[2].line_number == 2
    assert "Converted 2 quad faces (out of 3)" in caplog.text


def test_ngons_dropped_only_when_triangulating():
    text = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nv 0 2 0\nf 1 2 3\nf 1 2 3 4 5"
    assert parse_obj_text(text).face_count == 1

    ragged = parse_obj_text(text, triangulate=False)
    assert ragged.face_vertex_indices["positions"] == [(0, 1, 2), (0, 1, 2, 3, 4)]
    assert ragged.face_arity("positions") is None


def test_disabled_triangulation_keeps_quads(quad_text):
    mesh = parse_obj_text(quad_text, triangulate=False)
    assert mesh.face_vertex_indices["positions"].tolist() == [[0, 1, 2, 3]]
    assert mesh.face_arity() == 4
