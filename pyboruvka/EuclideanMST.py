"""
Euclidean MST module
====================

The Euclidean minimum spanning tree of a point cloud is always a subgraph of
its Delaunay triangulation, so instead of the ``O(N^2)`` complete graph only
the ``O(N)`` (in 2D) Delaunay edges need to be handed to Borůvka's algorithm.

When the triangulation cannot be formed (too few points, one-dimensional
input, or degenerate geometry such as collinear points) the complete graph is
used instead.
"""

import itertools
import logging
from typing import List, Set, Tuple

import numpy as np
from scipy.spatial import Delaunay
from scipy.spatial import QhullError

from pyboruvka.Boruvka import BoruvkaMST, total_weight
from pyboruvka.Graph import Edge, Graph

logger = logging.getLogger(__name__)


def _weighted(points: np.ndarray, pairs: List[Tuple[int, int]]) -> List[Edge]:
    return [
        Edge(i, j, float(np.linalg.norm(points[i] - points[j])))
        for i, j in pairs
    ]


def complete_edges(points: np.ndarray) -> List[Edge]:
    """Every pair of points, weighted by Euclidean distance.

    Parameters
    ----------
    points : np.ndarray
        An (N, d) array of points.

    Returns
    -------
    List[Edge]
        ``N * (N - 1) / 2`` edges in lexicographic ``(i, j)`` order.

    """
    pts = np.asarray(points, dtype=float)
    return _weighted(pts, list(itertools.combinations(range(len(pts)), 2)))


def delaunay_edges(points: np.ndarray) -> List[Edge]:
    """Unique edges of the Delaunay triangulation, weighted by Euclidean
    distance.

    Parameters
    ----------
    points : np.ndarray
        An (N, d) array of points, ``d >= 2`` and ``N >= d + 2``.

    Returns
    -------
    List[Edge]
        Edges in lexicographic ``(i, j)`` order.

    Raises
    ------
    scipy.spatial.QhullError
        If Qhull cannot triangulate the points.

    """
    pts = np.asarray(points, dtype=float)
    tri = Delaunay(pts, qhull_options="Qz")

    pairs: Set[Tuple[int, int]] = set()
    for simplex in tri.simplices:
        for edge in itertools.combinations(simplex, 2):
            i, j = sorted(edge)
            pairs.add((int(i), int(j)))

    # points Qhull left out (duplicates or near-duplicates) hang off the
    # nearest triangulated vertex
    used = np.zeros(len(pts), dtype=bool)
    used[tri.simplices.ravel()] = True
    for point in np.flatnonzero(~used):
        dist = np.linalg.norm(pts - pts[point], axis=1)
        dist[~used] = np.inf
        i, j = sorted((int(point), int(np.argmin(dist))))
        pairs.add((i, j))

    return _weighted(pts, sorted(pairs))


class EuclideanMST:
    """Compute the Euclidean minimum spanning tree of a point cloud."""

    def __init__(self, points: np.ndarray, use_delaunay: bool = True):
        """Compute the Euclidean minimum spanning tree of a point cloud.

        Parameters
        ----------
        points : np.ndarray
            An (N, d) array of points.
        use_delaunay : bool, default True
            If True, only Delaunay edges are considered as candidates. If
            False, every pair of points is a candidate.

        """
        self.points = np.asarray(points, dtype=float)
        if self.points.ndim != 2:
            raise ValueError("points must be an (N, d) array")
        if len(self.points) == 0:
            raise ValueError("at least one point is required")

        self._dim = self.points.shape[1]
        self.use_delaunay = use_delaunay

        self.graph: Graph | None = None
        self.edges: List[Edge] = []

        # build once
        self._build()

    def _candidate_edges(self) -> List[Edge]:
        n, dim = len(self.points), self._dim
        if not self.use_delaunay or dim < 2 or n < dim + 2:
            return complete_edges(self.points)
        try:
            return delaunay_edges(self.points)
        except QhullError:
            logger.warning(
                "Delaunay triangulation failed. Likely caused by all points "
                "lying in an N-1 space; falling back to the complete graph."
            )
            return complete_edges(self.points)

    def _build(self) -> None:
        if len(self.points) < 2:
            return  # a single point is already spanned
        self.graph = Graph(len(self.points), self._candidate_edges())
        self.edges = BoruvkaMST(self.graph).edges

    @property
    def total_weight(self) -> float:
        """Total length of the tree."""
        return float(total_weight(self.edges))

    @property
    def edge_coordinates(self) -> List[Tuple[np.ndarray, np.ndarray]]:
        """The tree edges as pairs of point coordinates."""
        return [(self.points[e.source], self.points[e.destination]) for e in self.edges]

    @property
    def degree(self) -> np.ndarray:
        """Number of tree edges incident to each point."""
        deg = np.zeros(len(self.points), dtype=int)
        for e in self.edges:
            deg[e.source] += 1
            deg[e.destination] += 1
        return deg
