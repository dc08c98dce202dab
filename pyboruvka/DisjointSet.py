from typing import Dict, Iterator, List, Set


class DisjointSetForest:
    """
    A Union-Find (Disjoint Set) forest over the vertices ``0 .. num_nodes - 1``
    with path compression and union by rank.

    Used by the Borůvka builder to track which vertices already share a tree.
    """

    def __init__(self, num_nodes: int):
        """
        Initialize the forest with every node in its own component.

        Parameters
        ----------
        num_nodes : int
            The number of nodes in the forest.
        """

        if num_nodes < 0:
            raise ValueError("number of nodes must be non-negative")

        self.parent = list(range(num_nodes))
        self.rank = [0] * num_nodes  # Upper bound on the height of each root's tree
        self.num_nodes = num_nodes
        self._num_components = num_nodes

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.num_nodes:
            raise IndexError(f"node {node} outside [0, {self.num_nodes})")

    def find(self, node: int) -> int:
        """
        Find the root representative of the set containing the node.

        Every node visited on the way up is re-pointed directly at the root,
        so a second call on the same node walks a path of length at most one.

        Parameters
        ----------
        node : int
            The node whose component root is to be found.

        Returns
        -------
        int
            The root node of the component.
        """

        self._check_node(node)
        parent = self.parent

        root = node
        while parent[root] != root:
            root = parent[root]

        # second pass: compress the path
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    def union(self, node1: int, node2: int) -> None:
        """
        Merge the components containing node1 and node2.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.
        """

        root1 = self.find(node1)
        root2 = self.find(node2)

        if root1 == root2:
            return

        # Attach smaller rank tree under the larger rank tree
        if self.rank[root1] < self.rank[root2]:
            self.parent[root1] = root2
        elif self.rank[root1] > self.rank[root2]:
            self.parent[root2] = root1
        else:
            self.parent[root2] = root1
            self.rank[root1] += 1
        self._num_components -= 1

    def is_connected(self, node1: int, node2: int) -> bool:
        """
        Check whether two nodes are in the same component.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if node1 and node2 are connected, False otherwise.
        """

        return self.find(node1) == self.find(node2)

    def subgraph_is_already_connected(self, nodes: List[int]) -> bool:
        """
        Check whether all nodes in the list belong to the same component.

        Parameters
        ----------
        nodes : List[int]
            A list of node indices.

        Returns
        -------
        bool
            True if all nodes are connected, False otherwise.
        """

        if not nodes:
            return True  # Empty list is trivially connected
        root = self.find(nodes[0])
        return all(self.find(node) == root for node in nodes)

    def rank_of(self, node: int) -> int:
        """Return the rank of the root of ``node``'s component."""
        return self.rank[self.find(node)]

    def roots(self) -> List[int]:
        """Return the component roots in increasing index order."""
        return [i for i, p in enumerate(self.parent) if p == i]

    def components(self) -> Dict[int, Set[int]]:
        """
        Group the nodes by component.

        Returns
        -------
        Dict[int, Set[int]]
            Mapping from each root to the set of nodes in its component.
        """

        groups: Dict[int, Set[int]] = {}
        for node in range(self.num_nodes):
            groups.setdefault(self.find(node), set()).add(node)
        return groups

    def __iter__(self) -> Iterator[Set[int]]:
        """
        Iterate over the current components.

        Returns
        -------
        Iterator[Set[int]]
            An iterator over sets of node indices.
        """

        return iter(self.components().values())

    def __len__(self) -> int:
        """
        Return the number of components.

        Returns
        -------
        int
            The number of disjoint components currently in the forest.
        """

        return self._num_components
