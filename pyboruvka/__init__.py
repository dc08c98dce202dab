from pyboruvka.DisjointSet import DisjointSetForest
from pyboruvka.Graph import Edge, Graph
from pyboruvka.Boruvka import (
    BoruvkaMST,
    build_mst,
    cheapest_edges,
    is_spanning_tree,
    total_weight
)
from pyboruvka.EuclideanMST import EuclideanMST, complete_edges, delaunay_edges
from pyboruvka.plotting import plot_edges, plot_spanning_tree

__all__ = [
    "DisjointSetForest",
    "Edge",
    "Graph",
    "BoruvkaMST",
    "build_mst",
    "cheapest_edges",
    "is_spanning_tree",
    "total_weight",
    "EuclideanMST",
    "complete_edges",
    "delaunay_edges",
    "plot_edges",
    "plot_spanning_tree",
]
