import importlib
import logging

import numpy as np
import pytest
from scipy.spatial import QhullError
from scipy.spatial.distance import pdist, squareform
from scipy.sparse.csgraph import minimum_spanning_tree

from pyboruvka.EuclideanMST import EuclideanMST, complete_edges, delaunay_edges

# the package re-exports the class under the module name
emst_module = importlib.import_module("pyboruvka.EuclideanMST")


def reference_length(points: np.ndarray) -> float:
    return minimum_spanning_tree(squareform(pdist(points))).sum()


def test_unit_square():
    points = np.array([[0, 0], [1, 0], [0, 1], [1, 1]])
    tree = EuclideanMST(points)
    assert len(tree.edges) == 3
    assert np.isclose(tree.total_weight, 3.0)


def test_complete_edges_count_and_order():
    points = np.random.rand(5, 2)
    edges = complete_edges(points)
    assert len(edges) == 10
    assert [(e.source, e.destination) for e in edges[:4]] == [(0, 1), (0, 2), (0, 3), (0, 4)]
    assert np.isclose(edges[0].weight, np.linalg.norm(points[0] - points[1]))


def test_delaunay_edges_subset_of_complete():
    points = np.random.rand(20, 2)
    d_pairs = {(e.source, e.destination) for e in delaunay_edges(points)}
    c_pairs = {(e.source, e.destination) for e in complete_edges(points)}
    assert d_pairs <= c_pairs
    assert len(d_pairs) < len(c_pairs)
    assert all(i < j for i, j in d_pairs)


@pytest.mark.parametrize("dim", [2, 3])
def test_delaunay_matches_complete_graph(dim):
    rng = np.random.default_rng(dim)
    points = rng.random((30, dim))
    fast = EuclideanMST(points)
    slow = EuclideanMST(points, use_delaunay=False)
    assert np.isclose(fast.total_weight, slow.total_weight)
    assert np.isclose(fast.total_weight, reference_length(points))
    assert len(fast.edges) == 29


def test_one_dimensional_points():
    points = np.array([[3.0], [0.0], [1.0], [7.0]])
    tree = EuclideanMST(points)
    assert np.isclose(tree.total_weight, 7.0)


def test_collinear_points_still_span():
    points = np.array([[0, 0], [1, 0], [2, 0], [3, 0], [4, 0]])
    tree = EuclideanMST(points)
    assert len(tree.edges) == 4
    assert np.isclose(tree.total_weight, 4.0)


def test_delaunay_failure_falls_back(monkeypatch, caplog):
    def fail(points):
        raise QhullError("QH6154 initial simplex is flat")

    monkeypatch.setattr(emst_module, "delaunay_edges", fail)
    points = np.random.rand(10, 2)
    with caplog.at_level(logging.WARNING, logger="pyboruvka.EuclideanMST"):
        tree = EuclideanMST(points)
    assert "complete graph" in caplog.text
    assert len(tree.edges) == 9
    assert np.isclose(tree.total_weight, reference_length(points))


def test_duplicate_points_are_connected():
    points = np.array([[0, 0], [0, 0], [1, 0], [0, 1], [1, 1]], dtype=float)
    tree = EuclideanMST(points)
    assert len(tree.edges) == 4
    assert np.isclose(tree.total_weight, 3.0)


def test_single_point():
    tree = EuclideanMST(np.array([[1.0, 2.0]]))
    assert tree.edges == []
    assert tree.graph is None
    assert tree.total_weight == 0.0


def test_invalid_points():
    with pytest.raises(ValueError):
        EuclideanMST(np.array([1.0, 2.0, 3.0]))
    with pytest.raises(ValueError):
        EuclideanMST(np.empty((0, 2)))


def test_edge_coordinates_and_degree():
    points = np.array([[0, 0], [1, 0], [2, 0]], dtype=float)
    tree = EuclideanMST(points)
    coords = tree.edge_coordinates
    assert len(coords) == 2
    for p, q in coords:
        assert np.isclose(np.linalg.norm(p - q), 1.0)
    assert tree.degree.tolist() == [1, 2, 1]
