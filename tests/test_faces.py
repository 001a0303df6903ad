"""Tests for faces.py — cycle search through a starting edge."""

from collections import Counter

import pytest

from facesketch.faces import (
    edges_to_points,
    get_faces,
    get_paths,
    has_only_paired_vertices,
    is_face,
    next_edges,
    smallest_face,
)
from facesketch.models import Edge


def _edge_sets(faces):
    return {frozenset(e.key() for e in face) for face in faces}


@pytest.fixture
def square():
    return [Edge(1, 2), Edge(2, 3), Edge(3, 4), Edge(4, 1)]


@pytest.fixture
def triangle_with_tail():
    return [Edge("b", "a"), Edge("c", "b"), Edge("c", "a"), Edge("c", "d")]


@pytest.fixture
def split_rectangle():
    #  4 ---- 7 ---- 2
    #  |      |      |
    #  1 ---- 6 ---- 3
    return [
        Edge(3, 2),
        Edge(4, 1),
        Edge(1, 6),
        Edge(6, 3),
        Edge(2, 7),
        Edge(7, 4),
        Edge(6, 7),
    ]


class TestIsFace:
    def test_empty(self):
        assert not is_face([])

    def test_triangle(self):
        assert is_face([Edge("b", "a"), Edge("c", "b"), Edge("c", "a")])

    def test_square(self, square):
        assert is_face(square)

    def test_two_edges_are_not_a_face(self):
        assert not is_face([Edge(1, 2), Edge(2, 1)])

    def test_open_path(self):
        assert not is_face([Edge(1, 2), Edge(2, 3), Edge(3, 4)])

    def test_figure_eight_rejected(self):
        path = [
            Edge(1, 2), Edge(2, 3), Edge(3, 1),
            Edge(1, 4), Edge(4, 5), Edge(5, 1),
        ]
        assert not has_only_paired_vertices(path)
        assert not is_face(path)

    def test_face_properties_hold(self, split_rectangle):
        for face in get_paths(split_rectangle, split_rectangle[-1]):
            if not is_face(face):
                continue
            first, last = face[0], face[-1]
            assert len(face) >= 3
            assert last.to_id == first.from_id or last.from_id == first.to_id
            counts = Counter(pid for e in face for pid in e.key())
            assert set(counts.values()) == {2}


class TestNextEdges:
    def test_undirected_adjacency(self, square):
        assert next_edges(square, Edge(1, 2), []) == [Edge(2, 3), Edge(4, 1)]

    def test_skips_used_edges(self, square):
        assert next_edges(square, Edge(2, 3), [Edge(1, 2)]) == [Edge(3, 4)]

    def test_excludes_current_edge(self, square):
        assert Edge(1, 2) not in next_edges(square, Edge(1, 2), [])

    def test_reversed_copy_is_a_different_edge(self):
        edges = [Edge(1, 2), Edge(2, 1), Edge(2, 3)]
        assert next_edges(edges, Edge(2, 3), [Edge(1, 2)]) == [Edge(2, 1)]


class TestGetFaces:
    def test_square(self, square):
        faces = get_faces(square, Edge(1, 2))
        assert faces
        assert _edge_sets(faces) == {frozenset(e.key() for e in square)}
        for face in faces:
            assert len(face) == 4
            assert face[0] == Edge(1, 2)

    def test_triangle_with_tail(self, triangle_with_tail):
        faces = get_faces(triangle_with_tail, Edge("b", "a"))
        assert faces == [[Edge("b", "a"), Edge("c", "a"), Edge("c", "b")]]
        for face in faces:
            assert Edge("c", "d") not in face

    def test_open_chain_has_no_faces(self):
        edges = [Edge(1, 2), Edge(2, 3), Edge(3, 4)]
        assert get_faces(edges, Edge(1, 2)) == []
        assert get_paths(edges, Edge(1, 2)) == [edges]

    def test_isolated_edge(self):
        assert get_paths([Edge(1, 2)], Edge(1, 2)) == [[Edge(1, 2)]]
        assert get_faces([Edge(1, 2)], Edge(1, 2)) == []

    def test_two_cells_share_the_new_edge(self):
        edges = [
            Edge(7, 2), Edge(2, 3), Edge(3, 6),
            Edge(7, 4), Edge(4, 1), Edge(1, 6),
            Edge(6, 7),
        ]
        faces = get_faces(edges, Edge(6, 7))
        assert _edge_sets(faces) == {
            frozenset({(6, 7), (7, 2), (2, 3), (3, 6)}),
            frozenset({(6, 7), (7, 4), (4, 1), (1, 6)}),
        }

    def test_closure_depends_on_stored_direction(self, split_rectangle):
        # the right cell never ends on an edge into 6 or out of 7
        faces = get_faces(split_rectangle, Edge(6, 7))
        assert _edge_sets(faces) == {frozenset({(6, 7), (1, 6), (4, 1), (7, 4)})}

    def test_never_shorter_than_three(self, split_rectangle):
        for edge in split_rectangle:
            for face in get_faces(split_rectangle, edge):
                assert len(face) >= 3

    def test_repeatable(self, split_rectangle):
        first = get_faces(split_rectangle, Edge(6, 7))
        second = get_faces(split_rectangle, Edge(6, 7))
        assert first == second

    def test_does_not_mutate_input(self, square):
        before = list(square)
        get_faces(square, Edge(1, 2))
        assert square == before


def test_edges_to_points():
    edges = [Edge(1, 2), Edge(2, 3), Edge(3, 1)]
    assert edges_to_points(edges) == [1, 2, 3]
    assert edges_to_points([]) == []


def test_smallest_face_prefers_first_on_ties():
    a = [Edge(1, 2), Edge(2, 3), Edge(3, 1)]
    b = [Edge(4, 5), Edge(5, 6), Edge(6, 4)]
    c = [Edge(1, 2), Edge(2, 3), Edge(3, 4), Edge(4, 1)]
    assert smallest_face([c, a, b]) is a
    assert smallest_face([]) is None
