"""
Borůvka module
==============

Borůvka's algorithm builds a minimum spanning tree by contraction rounds:
in every round each component picks the cheapest edge leaving it, and all of
those edges are added at once, merging components along them.  Because each
progressing round at least halves the number of components, the algorithm
needs ``O(log V)`` rounds of ``O(E)`` work each.

The components are tracked with a :class:`~pyboruvka.DisjointSetForest`.  If
the input graph is disconnected, the rounds stop as soon as no component has
an outgoing edge and the result is a minimum spanning *forest*; use
:func:`is_spanning_tree` to tell the two apart.

This module provides:

* ``cheapest_edges``, one round's cheapest-edge table;
* the :class:`BoruvkaMST` builder, which runs all rounds on construction;
* the ``build_mst`` shortcut returning just the accepted edges; and
* ``total_weight`` / ``is_spanning_tree`` helpers for result sets.
"""

import logging
from typing import List, Sequence

import numpy as np

from pyboruvka.DisjointSet import DisjointSetForest
from pyboruvka.Graph import Edge, Graph

logger = logging.getLogger(__name__)


def cheapest_edges(graph: Graph, forest: DisjointSetForest) -> np.ndarray:
    """Compute the cheapest edge leaving every component of the forest.

    Edges are scanned in graph order and a candidate only replaces the stored
    one when it is strictly lighter, so among equal weights the first edge
    wins.

    Parameters
    ----------
    graph : Graph
        The graph being spanned.
    forest : DisjointSetForest
        The current components, sized to ``graph.vertex_count``.

    Returns
    -------
    np.ndarray
        An integer array of length ``graph.vertex_count``. Entry ``r`` holds
        the index into ``graph.edges`` of the cheapest edge crossing the
        boundary of the component rooted at ``r``, or -1 if there is none
        (or ``r`` is not a root).

    """
    cheapest = np.full(graph.vertex_count, -1, dtype=np.intp)
    edges = graph.edges

    for k, (s, d, w) in enumerate(edges):
        root_s = forest.find(s)
        root_d = forest.find(d)
        if root_s == root_d:
            continue  # internal to a component

        for root in (root_s, root_d):
            current = cheapest[root]
            if current < 0 or w < edges[current].weight:
                cheapest[root] = k

    return cheapest


def total_weight(edges: Sequence[Edge]):
    """Sum the weights of a set of edges.

    Parameters
    ----------
    edges : Sequence[Edge]
        Accepted edges, e.g. the result of :func:`build_mst`.

    Returns
    -------
    number
        The total weight; 0 for an empty sequence.

    """
    return sum(e.weight for e in edges)


def is_spanning_tree(edges: Sequence[Edge], vertex_count: int) -> bool:
    """Return True if a result set with ``len(edges)`` edges spans all
    ``vertex_count`` vertices as a single tree."""
    return len(edges) == vertex_count - 1


class BoruvkaMST:
    """Minimum spanning tree (or forest) of a weighted undirected graph."""

    def __init__(self, graph: Graph):
        """Run Borůvka's algorithm on ``graph``.

        Parameters
        ----------
        graph : Graph
            A validated graph. Its edge order decides ties between
            equal-weight edges.

        """
        self.graph = graph
        self.forest = DisjointSetForest(graph.vertex_count)
        self.edges: List[Edge] = []
        self.rounds = 0

        # build once
        self._build()

    def _merge(self, cheapest: np.ndarray) -> int:
        """Accept the round's cheapest edges in root order and union along
        them. Returns the number of merges performed."""
        edges = self.graph.edges
        merged = 0
        for root in range(self.graph.vertex_count):
            k = cheapest[root]
            if k < 0:
                continue
            edge = edges[k]
            # earlier merges in this pass may already have joined the ends
            root_s = self.forest.find(edge.source)
            root_d = self.forest.find(edge.destination)
            if root_s != root_d:
                self.edges.append(edge)
                self.forest.union(root_s, root_d)
                merged += 1
        return merged

    def _build(self) -> None:
        """Repeat contraction rounds until one tree remains or no component
        has an outgoing edge."""
        target = self.graph.vertex_count - 1

        while len(self.edges) < target:
            cheapest = cheapest_edges(self.graph, self.forest)
            n_entries = int(np.count_nonzero(cheapest >= 0))
            if n_entries == 0:
                logger.info(
                    "Graph is disconnected; returning a spanning forest of %d trees",
                    len(self.forest),
                )
                break

            self.rounds += 1
            merged = self._merge(cheapest)
            logger.debug(
                "Round %d: %d cheapest edges, %d merges, %d components left",
                self.rounds,
                n_entries,
                merged,
                len(self.forest),
            )

    @property
    def total_weight(self):
        """Total weight of the accepted edges."""
        return total_weight(self.edges)

    @property
    def num_components(self) -> int:
        """Number of trees in the resulting spanning forest."""
        return len(self.forest)

    @property
    def is_spanning_tree(self) -> bool:
        """True if the result connects every vertex."""
        return is_spanning_tree(self.edges, self.graph.vertex_count)

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)


def build_mst(graph: Graph) -> List[Edge]:
    """Compute a minimum spanning tree of ``graph`` with Borůvka's algorithm.

    Parameters
    ----------
    graph : Graph
        The graph to span.

    Returns
    -------
    List[Edge]
        The accepted edges in acceptance order. There are
        ``graph.vertex_count - 1`` of them when the graph is connected;
        otherwise they form a minimum spanning forest.

    """
    return BoruvkaMST(graph).edges
