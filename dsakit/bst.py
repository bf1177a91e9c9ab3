"""Algorithms specific to binary search trees."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from dsakit.binary_tree import BinaryTreeNode, lca


def bst_lca(root: Optional[BinaryTreeNode], a: Any, b: Any) -> Any:
    """Lowest common ancestor of a and b, using the search-tree ordering."""
    if root is None:
        return None
    if root.data == a or root.data == b:
        return root.data
    if root.data < a and root.data < b:
        return bst_lca(root.right, a, b)
    if root.data > a and root.data > b:
        return bst_lca(root.left, a, b)
    return lca(root, a, b)


@dataclass
class _BstInfo:
    minimum: float
    maximum: float
    height: int
    is_bst: bool


def _bst_info(root: Optional[BinaryTreeNode]) -> _BstInfo:
    if root is None:
        return _BstInfo(math.inf, -math.inf, 0, True)
    left = _bst_info(root.left)
    right = _bst_info(root.right)
    minimum = min(left.minimum, right.minimum, root.data)
    maximum = max(left.maximum, right.maximum, root.data)
    if left.is_bst and right.is_bst and left.maximum < root.data < right.minimum:
        return _BstInfo(minimum, maximum, max(left.height, right.height) + 1, True)
    return _BstInfo(minimum, maximum, max(left.height, right.height), False)


def largest_bst_height(root: Optional[BinaryTreeNode]) -> int:
    """Height of the tallest subtree that is a valid search tree."""
    return _bst_info(root).height


def replace_with_larger_sum(root: Optional[BinaryTreeNode]) -> Optional[BinaryTreeNode]:
    """Replace each value with the sum of all values greater than or equal to it."""

    def replace(node: Optional[BinaryTreeNode], larger: Any) -> Any:
        if node is None:
            return 0
        right_total = replace(node.right, larger)
        original = node.data
        node.data = right_total + larger + original
        left_total = replace(node.left, node.data)
        return left_total + right_total + original

    replace(root, 0)
    return root


def root_to_leaf_paths(root: Optional[BinaryTreeNode], k: Any) -> list[list]:
    """All root-to-leaf paths whose values add up to k, left subtree first."""
    paths: list[list] = []

    def walk(node: Optional[BinaryTreeNode], remaining: Any, path: list) -> None:
        if node is None:
            return
        path = path + [node.data]
        walk(node.left, remaining - node.data, path)
        walk(node.right, remaining - node.data, path)
        if node.is_leaf and remaining == node.data:
            paths.append(path)

    walk(root, k, [])
    return paths