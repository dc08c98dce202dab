import numpy as np
import pytest
from scipy import sparse
from pyboruvka.Graph import Edge, Graph


def test_graph_keeps_edge_order():
    edges = [(2, 3, 4), (0, 1, 10), (0, 3, 5)]
    graph = Graph(4, edges)
    assert graph.vertex_count == 4
    assert graph.edges == (Edge(2, 3, 4), Edge(0, 1, 10), Edge(0, 3, 5))
    assert len(graph) == 3
    assert list(graph) == list(graph.edges)


def test_edges_are_immutable():
    graph = Graph(2, [(0, 1, 1.5)])
    edge = graph.edges[0]
    assert edge.weight == 1.5
    with pytest.raises(AttributeError):
        edge.weight = 2.0


def test_accepts_numpy_integers():
    graph = Graph(3, [(np.int64(0), np.int32(2), 1.0)])
    assert graph.edges[0].destination == 2


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1, [(0, 1, 1)])


def test_non_integer_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(2.5, [(0, 2, 1.0), (0, 1, 1.0)])
    with pytest.raises(ValueError):
        Graph("3", [(0, 1, 1.0)])


def test_numpy_integer_vertex_count():
    graph = Graph(np.int64(3), [(0, 2, 1.0)])
    assert graph.vertex_count == 3
    assert type(graph.vertex_count) is int


def test_empty_edge_list_rejected():
    with pytest.raises(ValueError):
        Graph(3, [])
    with pytest.raises(ValueError):
        Graph(3, None)


def test_out_of_range_vertex_rejected():
    with pytest.raises(ValueError):
        Graph(3, [(0, 1, 1), (1, 5, 2)])
    with pytest.raises(ValueError):
        Graph(3, [(-1, 1, 1)])


def test_malformed_edge_rejected():
    with pytest.raises(ValueError):
        Graph(3, [(0, 1)])
    with pytest.raises(ValueError):
        Graph(3, [(0.5, 1, 2)])


def test_self_loop_accepted():
    graph = Graph(2, [(1, 1, 3)])
    assert graph.edges[0] == Edge(1, 1, 3)


def test_weights_array():
    graph = Graph(3, [(0, 1, 2.0), (1, 2, 0.5)])
    assert np.allclose(graph.weights, [2.0, 0.5])


def test_from_adjacency_upper_and_lower():
    m = np.array([
        [0, 3, 0],
        [3, 0, 0],
        [7, 0, 0],  # only the lower triangle holds (0, 2)
    ])
    graph = Graph.from_adjacency(m)
    assert graph.vertex_count == 3
    assert graph.edges == (Edge(0, 1, 3.0), Edge(0, 2, 7.0))


def test_from_adjacency_null_value():
    inf = np.inf
    m = np.array([
        [inf, 0.0, 2.0],
        [0.0, inf, inf],
        [2.0, inf, inf],
    ])
    graph = Graph.from_adjacency(m, null_value=inf)
    assert graph.edges == (Edge(0, 1, 0.0), Edge(0, 2, 2.0))


def test_from_adjacency_requires_square():
    with pytest.raises(ValueError):
        Graph.from_adjacency(np.zeros((2, 3)))


def test_from_sparse_round_trip_through_csgraph():
    graph = Graph(4, [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0), (0, 3, 4.0)])
    again = Graph.from_sparse(graph.to_sparse())
    assert again.vertex_count == 4
    assert set(again.edges) == set(graph.edges)


def test_from_sparse_symmetric_and_diagonal():
    m = sparse.csr_matrix(np.array([
        [5, 1, 0],
        [1, 0, 2],
        [0, 9, 0],
    ], dtype=float))
    graph = Graph.from_sparse(m)
    # upper triangle wins, diagonal ignored
    assert graph.edges == (Edge(0, 1, 1.0), Edge(1, 2, 2.0))


def test_to_sparse_shape_and_entries():
    graph = Graph(3, [(0, 2, 1.5)])
    mat = graph.to_sparse()
    assert mat.shape == (3, 3)
    assert mat.toarray()[0, 2] == 1.5
    assert mat.nnz == 1
