"""Rooted weighted tree answering ancestor and path queries by binary lifting."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Optional, Sequence

LOG = 32


class LcaTree:
    """A weighted tree rooted at node 0, built from an undirected edge list.

    ``merge`` combines edge weights along a path (sum, min, max, ...) and
    ``identity`` is its neutral value (0 for sum, +inf for min, and so on).
    """

    def __init__(
        self,
        nodes: int,
        edges: Iterable[Sequence[int]],
        merge: Callable[[Any, Any], Any] = operator.add,
        identity: Any = 0,
    ) -> None:
        if nodes < 1:
            raise ValueError("a tree needs at least one node")
        self._n = nodes
        self._merge = merge
        self._identity = identity
        self._parent: list[list[Optional[int]]] = [[None] * LOG for _ in range(nodes)]
        self._func: list[list[Any]] = [[identity] * LOG for _ in range(nodes)]
        self._depth = [0] * nodes

        adjacency: list[list[tuple[int, Any]]] = [[] for _ in range(nodes)]
        for edge in edges:
            u, v, weight = edge
            self._check(u)
            self._check(v)
            adjacency[u].append((v, weight))
            adjacency[v].append((u, weight))
        self._build(adjacency)

    def _check(self, node: int) -> None:
        if not 0 <= node < self._n:
            raise IndexError(f"node {node} is not in the tree")

    def _build(self, adjacency: list[list[tuple[int, Any]]]) -> None:
        seen = [False] * self._n
        seen[0] = True
        stack = [0]
        while stack:
            node = stack.pop()
            for neighbour, weight in adjacency[node]:
                if seen[neighbour]:
                    continue
                seen[neighbour] = True
                self._depth[neighbour] = self._depth[node] + 1
                parents = self._parent[neighbour]
                funcs = self._func[neighbour]
                parents[0] = node
                funcs[0] = weight
                for i in range(1, LOG):
                    mid = parents[i - 1]
                    if mid is None:
                        break
                    parents[i] = self._parent[mid][i - 1]
                    funcs[i] = self._merge(funcs[i - 1], self._func[mid][i - 1])
                stack.append(neighbour)

    def _climb(self, node: Optional[int], k: int) -> Optional[int]:
        for i in range(LOG - 1, -1, -1):
            if (k >> i) & 1:
                if node is None:
                    return None
                node = self._parent[node][i]
        return node

    def _func_up(self, node: int, ancestor: int) -> Any:
        result = self._identity
        distance = self._depth[node] - self._depth[ancestor]
        current: Optional[int] = node
        for i in range(LOG - 1, -1, -1):
            if (distance >> i) & 1:
                assert current is not None
                result = self._merge(result, self._func[current][i])
                current = self._parent[current][i]
        return result

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of u and v."""
        self._check(u)
        self._check(v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        lifted = self._climb(u, self._depth[u] - self._depth[v])
        assert lifted is not None
        u = lifted
        if u == v:
            return u
        for i in range(LOG - 1, -1, -1):
            if self._parent[u][i] != self._parent[v][i]:
                up_u, up_v = self._parent[u][i], self._parent[v][i]
                assert up_u is not None and up_v is not None
                u, v = up_u, up_v
        parent = self._parent[u][0]
        assert parent is not None
        return parent

    def kth_ancestor(self, node: int, k: int) -> Optional[int]:
        """The ancestor k levels above node, or None if the root is passed."""
        self._check(node)
        if k < 0:
            raise ValueError("k must be non-negative")
        return self._climb(node, k)

    def func_between(self, u: int, v: int) -> Any:
        """Merged edge weights along the path from u to v."""
        ancestor = self.lca(u, v)
        return self._merge(self._func_up(u, ancestor), self._func_up(v, ancestor))

    def _path_split(self, u: int, v: int, k: int) -> tuple[int, int, int]:
        ancestor = self.lca(u, v)
        up = self._depth[u] - self._depth[ancestor]
        down = self._depth[v] - self._depth[ancestor]
        if not 0 <= k <= up + down:
            raise ValueError(f"k must be between 0 and {up + down}, got {k}")
        return ancestor, up, down

    def kth_node_and_func(self, u: int, k: int, v: int) -> tuple[Any, int]:
        """The node k steps from u towards v, with the merged weight up to it.

        The weight of a node past the common ancestor is found by removing
        the tail of the path, so it is only meaningful for an additive merge.
        """
        ancestor, up, down = self._path_split(u, v, k)
        if k <= up:
            node = self._climb(u, k)
            assert node is not None
            return self._func_up(u, node), node
        node = self._climb(v, down - (k - up))
        assert node is not None
        whole = self._merge(self._func_up(u, ancestor), self._func_up(v, ancestor))
        return self._merge(whole, -self._func_up(v, node)), node

    def kth_node_in_path(self, u: int, v: int, k: int) -> int:
        """The node k steps from u on the path from u to v."""
        _, up, down = self._path_split(u, v, k)
        if k <= up:
            node = self._climb(u, k)
        else:
            node = self._climb(v, down - (k - up))
        assert node is not None
        return node

    def depth(self, u: int) -> int:
        """Number of edges between u and the root."""
        self._check(u)
        return self._depth[u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path from u to v."""
        ancestor = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[ancestor]