"""Binary tree nodes and the classic algorithms that work on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence


@dataclass
class BinaryTreeNode:
    """A node of a binary tree holding a value and two optional children."""

    data: Any
    left: Optional["BinaryTreeNode"] = None
    right: Optional["BinaryTreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def height(root: Optional[BinaryTreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def mirror(root: Optional[BinaryTreeNode]) -> Optional[BinaryTreeNode]:
    """Swap left and right children throughout the tree, in place."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    mirror(root.left)
    mirror(root.right)
    return root


def _root_position(values: list, root_value: Any) -> int:
    try:
        return values.index(root_value)
    except ValueError:
        raise ValueError(f"value {root_value!r} missing from inorder sequence") from None


def build_from_inorder_preorder(
    inorder: Sequence, preorder: Sequence
) -> Optional[BinaryTreeNode]:
    """Rebuild a tree from its inorder and preorder traversals."""
    inorder, preorder = list(inorder), list(preorder)
    if len(inorder) != len(preorder):
        raise ValueError("traversals must have the same length")

    def build(in_seq: list, pre_seq: list) -> Optional[BinaryTreeNode]:
        if not in_seq:
            return None
        root_value = pre_seq[0]
        idx = _root_position(in_seq, root_value)
        return BinaryTreeNode(
            root_value,
            build(in_seq[:idx], pre_seq[1 : idx + 1]),
            build(in_seq[idx + 1 :], pre_seq[idx + 1 :]),
        )

    return build(inorder, preorder)


def build_from_postorder_inorder(
    postorder: Sequence, inorder: Sequence
) -> Optional[BinaryTreeNode]:
    """Rebuild a tree from its postorder and inorder traversals."""
    postorder, inorder = list(postorder), list(inorder)
    if len(inorder) != len(postorder):
        raise ValueError("traversals must have the same length")

    def build(post_seq: list, in_seq: list) -> Optional[BinaryTreeNode]:
        if not post_seq:
            return None
        root_value = post_seq[-1]
        idx = _root_position(in_seq, root_value)
        return BinaryTreeNode(
            root_value,
            build(post_seq[:idx], in_seq[:idx]),
            build(post_seq[idx:-1], in_seq[idx + 1 :]),
        )

    return build(postorder, inorder)


def _preorder(root: Optional[BinaryTreeNode]) -> Iterator[Any]:
    if root is None:
        return
    yield root.data
    yield from _preorder(root.left)
    yield from _preorder(root.right)


def _inorder(root: Optional[BinaryTreeNode]) -> Iterator[Any]:
    if root is None:
        return
    yield from _inorder(root.left)
    yield root.data
    yield from _inorder(root.right)


def preorder(root: Optional[BinaryTreeNode]) -> list:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[BinaryTreeNode]) -> list:
    """Values in left, root, right order."""
    return list(_inorder(root))


def tree_sum(root: Optional[BinaryTreeNode]) -> Any:
    """Sum of all values in the tree."""
    return sum(_preorder(root))


def min_and_max(root: Optional[BinaryTreeNode]) -> tuple:
    """Smallest and largest value in the tree."""
    values = preorder(root)
    if not values:
        raise ValueError("empty tree has no minimum or maximum")
    return min(values), max(values)


def is_balanced(root: Optional[BinaryTreeNode]) -> bool:
    """True if every node's subtree heights differ by at most one."""
    if root is None or root.is_leaf:
        return True
    if abs(height(root.left) - height(root.right)) > 1:
        return False
    return is_balanced(root.left) and is_balanced(root.right)


def level_order(root: Optional[BinaryTreeNode]) -> list[list]:
    """Values grouped by level, each level from left to right."""
    if root is None:
        return []
    levels: list[list] = []
    current = deque([root])
    while current:
        levels.append([node.data for node in current])
        following: deque = deque()
        for node in current:
            if node.left is not None:
                following.append(node.left)
            if node.right is not None:
                following.append(node.right)
        current = following
    return levels


def zigzag_order(root: Optional[BinaryTreeNode]) -> list[list]:
    """Values by level, alternating left-to-right and right-to-left."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(level_order(root))
    ]


def remove_leaves(root: Optional[BinaryTreeNode]) -> Optional[BinaryTreeNode]:
    """Detach every leaf node; returns the new root (None if the root was a leaf)."""
    if root is None or root.is_leaf:
        return None
    root.left = remove_leaves(root.left)
    root.right = remove_leaves(root.right)
    return root


def nodes_without_sibling(root: Optional[BinaryTreeNode]) -> list:
    """Values of nodes that are the only child of their parent."""
    found: list = []

    def visit(node: Optional[BinaryTreeNode]) -> None:
        if node is None:
            return
        if node.left is not None and node.right is None:
            found.append(node.left.data)
        elif node.left is None and node.right is not None:
            found.append(node.right.data)
        visit(node.left)
        visit(node.right)

    visit(root)
    return found


def balanced_bst_from_sorted(values: Sequence) -> Optional[BinaryTreeNode]:
    """Build a height-balanced search tree from sorted values."""
    values = list(values)
    if not values:
        return None
    mid = (len(values) - 1) // 2
    return BinaryTreeNode(
        values[mid],
        balanced_bst_from_sorted(values[:mid]),
        balanced_bst_from_sorted(values[mid + 1 :]),
    )


def pair_sum(root: Optional[BinaryTreeNode], total: Any) -> list[tuple]:
    """Pairs of tree values adding up to total, smaller value first, ascending."""
    values = sorted(_preorder(root))
    pairs: list[tuple] = []
    i, j = 0, len(values) - 1
    while i < j:
        current = values[i] + values[j]
        if current == total:
            pairs.append((values[i], values[j]))
            i += 1
            j -= 1
        elif current > total:
            j -= 1
        else:
            i += 1
    return pairs


def lca(root: Optional[BinaryTreeNode], a: Any, b: Any) -> Any:
    """Lowest common ancestor value of a and b in any binary tree.

    Returns the value found if only one of them is present, None if neither is.
    """
    if root is None:
        return None
    if root.data == a or root.data == b:
        return root.data
    left = lca(root.left, a, b)
    right = lca(root.right, a, b)
    if left is None:
        return right
    if right is None:
        return left
    return root.data