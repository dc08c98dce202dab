"""
Graph module
============

Weighted undirected graphs as consumed by the Borůvka builder.

A :class:`Graph` is a vertex count plus an *ordered* tuple of :class:`Edge`
triples.  The order given by the caller is kept exactly as supplied, since it
decides which of several equal-weight edges the builder picks.  Graphs are
validated once, when they are constructed, and never change afterwards.

Helpers convert to and from ``scipy.sparse`` matrices and dense numpy
adjacency arrays so a graph can be cross-checked against
``scipy.sparse.csgraph``.
"""

import operator
from typing import Any, Iterable, NamedTuple, Sequence, Tuple, Union

import numpy as np
from scipy import sparse


class Edge(NamedTuple):
    """An undirected weighted edge between two vertex indices."""

    source: int
    destination: int
    weight: float


def _as_edge(item: Union[Edge, Sequence[Any]], vertex_count: int) -> Edge:
    """Coerce a 3-sequence into an :class:`Edge` and range-check its endpoints."""
    try:
        source, destination, weight = item
        source = operator.index(source)
        destination = operator.index(destination)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"edge must be a (source, destination, weight) triple, got {item!r}"
        ) from e

    for vertex in (source, destination):
        if vertex < 0 or vertex >= vertex_count:
            raise ValueError(
                f"edge vertex {vertex} out of range [0, {vertex_count})"
            )
    return Edge(source, destination, weight)


class Graph:
    """An immutable weighted undirected graph on vertices ``0 .. vertex_count - 1``."""

    __slots__ = ("_vertex_count", "_edges")

    def __init__(
        self,
        vertex_count: int,
        edges: Iterable[Union[Edge, Sequence[Any]]],
    ):
        """Validate and store a graph.

        Parameters
        ----------
        vertex_count : int
            Number of vertices. Must be non-negative.
        edges : Iterable of Edge or (source, destination, weight)
            The edges, in the order the builder should scan them. Must not be
            empty, and every endpoint must lie in ``[0, vertex_count)``.

        Raises
        ------
        ValueError
            If the vertex count is not an integer or is negative, the edge
            list is empty or None, or any edge is malformed or references an
            out-of-range vertex.

        """
        try:
            vertex_count = operator.index(vertex_count)
        except TypeError as e:
            raise ValueError(
                f"number of vertices must be an integer, got {vertex_count!r}"
            ) from e
        if vertex_count < 0:
            raise ValueError("number of vertices must be non-negative")
        if edges is None:
            raise ValueError("edge list must not be None or empty")

        checked = tuple(_as_edge(e, vertex_count) for e in edges)
        if not checked:
            raise ValueError("edge list must not be None or empty")

        self._vertex_count = vertex_count
        self._edges: Tuple[Edge, ...] = checked

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def weights(self) -> np.ndarray:
        """Edge weights as an array, in edge order."""
        return np.array([e.weight for e in self._edges])

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self):
        return iter(self._edges)

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edges={len(self._edges)})"

    @classmethod
    def from_adjacency(cls, matrix: np.ndarray, null_value: float = 0) -> "Graph":
        """Build a graph from a dense ``(V, V)`` adjacency array.

        Entries equal to ``null_value``, as well as non-finite entries, mean
        "no edge".  Each unordered pair contributes at most one edge, taken
        from the upper triangle when present and from the lower triangle
        otherwise.  Edges are emitted in row-major order of the upper triangle.

        Parameters
        ----------
        matrix : np.ndarray
            Square array of edge weights.
        null_value : float, optional
            Value marking a missing edge. Default is 0.

        Returns
        -------
        Graph
            The graph described by the array.

        """
        arr = np.asarray(matrix, dtype=float)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError("adjacency matrix must be square")

        n = arr.shape[0]
        present = np.isfinite(arr) & (arr != null_value)
        iu, ju = np.triu_indices(n, k=1)
        upper = present[iu, ju]
        lower = present[ju, iu]
        keep = upper | lower
        weights = np.where(upper, arr[iu, ju], arr[ju, iu])

        return cls(
            n,
            [
                Edge(int(i), int(j), float(w))
                for i, j, w in zip(iu[keep], ju[keep], weights[keep])
            ],
        )

    @classmethod
    def from_sparse(cls, matrix: Any) -> "Graph":
        """Build a graph from a square scipy sparse matrix.

        Explicitly stored zeros and diagonal entries are ignored.  For each
        unordered pair the upper-triangle entry wins over the lower one.
        Edges are emitted sorted by ``(source, destination)``.

        Parameters
        ----------
        matrix : scipy.sparse matrix or array
            Square matrix of edge weights.

        Returns
        -------
        Graph
            The graph described by the matrix.

        """
        if matrix.shape[0] != matrix.shape[1]:
            raise ValueError("adjacency matrix must be square")

        csr = sparse.csr_matrix(matrix)
        csr.sum_duplicates()
        csr.eliminate_zeros()
        coo = csr.tocoo()

        pairs = {}
        for i, j, w in zip(coo.row, coo.col, coo.data):
            if i == j:
                continue
            key = (int(min(i, j)), int(max(i, j)))
            if i < j:
                pairs[key] = w
            else:
                pairs.setdefault(key, w)

        return cls(
            matrix.shape[0],
            [Edge(i, j, pairs[(i, j)].item()) for i, j in sorted(pairs)],
        )

    def to_sparse(self) -> sparse.coo_matrix:
        """Return the graph as a ``(V, V)`` COO matrix.

        Each edge is stored once, at ``(source, destination)``; parallel edges
        are summed by scipy on conversion, and zero-weight edges are dropped by
        ``scipy.sparse.csgraph``.

        Returns
        -------
        scipy.sparse.coo_matrix
            Sparse weight matrix.

        """
        rows = np.array([e.source for e in self._edges], dtype=np.intp)
        cols = np.array([e.destination for e in self._edges], dtype=np.intp)
        return sparse.coo_matrix(
            (self.weights, (rows, cols)),
            shape=(self._vertex_count, self._vertex_count),
        )
