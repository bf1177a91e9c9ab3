"""Undirected graphs as adjacency matrices, with depth- and breadth-first traversal."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Iterable, Iterator, Optional, Sequence


def adjacency_matrix(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """An n-by-n 0/1 matrix marking each undirected edge in both directions."""
    if n < 0:
        raise ValueError("number of vertices must be non-negative")
    matrix = [[0] * n for _ in range(n)]
    for first, second in edges:
        if not (0 <= first < n and 0 <= second < n):
            raise IndexError(f"edge ({first}, {second}) has a vertex out of range")
        matrix[first][second] = 1
        matrix[second][first] = 1
    return matrix


def _check(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _neighbours(matrix: Sequence[Sequence[int]], vertex: int) -> Iterator[int]:
    return (i for i, linked in enumerate(matrix[vertex]) if linked == 1 and i != vertex)


def _dfs_from(matrix: Sequence[Sequence[int]], start: int, visited: list[bool]) -> list[int]:
    order = [start]
    visited[start] = True
    stack = [_neighbours(matrix, start)]
    while stack:
        for vertex in stack[-1]:
            if not visited[vertex]:
                visited[vertex] = True
                order.append(vertex)
                stack.append(_neighbours(matrix, vertex))
                break
        else:
            stack.pop()
    return order


def _bfs_from(matrix: Sequence[Sequence[int]], start: int, visited: list[bool]) -> list[int]:
    order = []
    visited[start] = True
    pending = deque([start])
    while pending:
        current = pending.popleft()
        order.append(current)
        for vertex in _neighbours(matrix, current):
            if not visited[vertex]:
                visited[vertex] = True
                pending.append(vertex)
    return order


def _start_check(n: int, start: int) -> None:
    if not 0 <= start < n:
        raise IndexError(f"start vertex {start} out of range")


def dfs(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Vertices reachable from start in depth-first order, lower indices first."""
    n = _check(matrix)
    _start_check(n, start)
    return _dfs_from(matrix, start, [False] * n)


def bfs(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Vertices reachable from start in breadth-first order, lower indices first."""
    n = _check(matrix)
    _start_check(n, start)
    return _bfs_from(matrix, start, [False] * n)


def dfs_all(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first order over every component, each started at its lowest vertex."""
    n = _check(matrix)
    visited = [False] * n
    order: list[int] = []
    for vertex in range(n):
        if not visited[vertex]:
            order.extend(_dfs_from(matrix, vertex, visited))
    return order


def bfs_all(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order over every component, each started at its lowest vertex."""
    n = _check(matrix)
    visited = [False] * n
    order: list[int] = []
    for vertex in range(n):
        if not visited[vertex]:
            order.extend(_bfs_from(matrix, vertex, visited))
    return order


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a vertex count, an edge count and the edges; print both traversals."""
    parser = argparse.ArgumentParser(
        description="Depth- and breadth-first traversal of an undirected graph."
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="file holding 'n e' then e pairs of vertices; standard input if omitted",
    )
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError:
        parser.error("the input must contain only integers")
    if len(numbers) < 2:
        parser.error("the vertex and edge counts are required")
    n, e = numbers[0], numbers[1]
    pairs = numbers[2:]
    if len(pairs) < 2 * e:
        parser.error(f"expected {e} edges")
    edges = [(pairs[2 * i], pairs[2 * i + 1]) for i in range(e)]
    try:
        matrix = adjacency_matrix(n, edges)
    except (ValueError, IndexError) as error:
        parser.error(str(error))
    print("DFS: " + " ".join(str(v) for v in dfs_all(matrix)))
    print("BFS: " + " ".join(str(v) for v in bfs_all(matrix)))
    return 0