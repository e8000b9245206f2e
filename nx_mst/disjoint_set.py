import networkx as nx

from .result import OperationCounter


class DisjointSet:
    """
    Union-find over node labels with path compression and union by rank

    find(x)    -- root representative of x's set
    union(x,y) -- merges the sets holding x and y
    connected(x,y) -- True when x and y already share a set

    Every operation ticks the supplied counter so the owning algorithm can
    fold this work into its own estimate.
    """

    def __init__(self, nodes, counter: OperationCounter = None):
        self._counter = counter if counter is not None else OperationCounter()
        self._parent = {}
        self._rank = {}
        for node in nodes:
            self._parent[node] = node
            self._rank[node] = 0
            self._counter.tick(2)

    @property
    def counter(self) -> OperationCounter:
        return self._counter

    def __len__(self):
        return len(self._parent)

    def __contains__(self, node):
        return node in self._parent

    def rank(self, node) -> int:
        return self._rank[self.find(node)]

    def find(self, node):
        """Walk to the root, then re-point every node on the path straight at it"""
        parent = self._parent
        if node not in parent:
            raise nx.NodeNotFound(f"Node {node!r} is not in the disjoint set")
        self._counter.tick()

        path = []
        root = node
        while parent[root] != root:
            path.append(root)
            root = parent[root]
            self._counter.tick()

        for visited in path:
            if parent[visited] != root:
                parent[visited] = root
                self._counter.tick()
        return root

    def union(self, a, b) -> bool:
        """Merge the sets holding a and b; False if they were already one set"""
        root_a = self.find(a)
        root_b = self.find(b)
        self._counter.tick(2)

        if root_a == root_b:
            self._counter.tick()
            return False

        rank = self._rank
        parent = self._parent
        self._counter.tick(2)

        if rank[root_a] < rank[root_b]:
            parent[root_a] = root_b
            self._counter.tick()
        elif rank[root_a] > rank[root_b]:
            parent[root_b] = root_a
            self._counter.tick()
        else:
            parent[root_b] = root_a
            rank[root_a] += 1
            self._counter.tick(2)
        return True

    def connected(self, a, b) -> bool:
        return self.find(a) == self.find(b)
