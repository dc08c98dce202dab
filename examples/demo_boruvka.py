import logging
from pyboruvka import Graph, BoruvkaMST

logging.basicConfig(level=logging.DEBUG)

graph = Graph(
    4,
    [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)],
)

mst = BoruvkaMST(graph)
for edge in mst.edges:
    print(f"Edge {edge.source}-{edge.destination} with weight {edge.weight}")
print("Total weight:", mst.total_weight)

# two separate components: the result is a spanning forest
forest = BoruvkaMST(Graph(4, [(0, 1, 1), (2, 3, 1)]))
print("Spanning tree?", forest.is_spanning_tree, "- trees:", forest.num_components)
