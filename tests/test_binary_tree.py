import pytest

from dsakit.binary_tree import (
    BinaryTreeNode,
    balanced_bst_from_sorted,
    build_from_inorder_preorder,
    build_from_postorder_inorder,
    height,
    inorder,
    is_balanced,
    lca,
    level_order,
    min_and_max,
    mirror,
    nodes_without_sibling,
    pair_sum,
    preorder,
    remove_leaves,
    tree_sum,
    zigzag_order,
)


def sample_tree():
    return BinaryTreeNode(
        1,
        BinaryTreeNode(2, BinaryTreeNode(4), BinaryTreeNode(5)),
        BinaryTreeNode(3, BinaryTreeNode(6), BinaryTreeNode(7)),
    )


def test_inorder_preorder_round_trip():
    values = list(range(1, 12))
    tree = balanced_bst_from_sorted(values)
    rebuilt = build_from_inorder_preorder(inorder(tree), preorder(tree))
    assert rebuilt == tree


def test_build_from_postorder_inorder():
    expected = BinaryTreeNode(
        1, BinaryTreeNode(2, BinaryTreeNode(4), BinaryTreeNode(5)), BinaryTreeNode(3)
    )
    result = build_from_postorder_inorder([4, 5, 2, 3, 1], [4, 2, 5, 1, 3])
    assert result == expected


def test_build_rejects_bad_input():
    with pytest.raises(ValueError):
        build_from_inorder_preorder([1, 2], [1])
    with pytest.raises(ValueError):
        build_from_postorder_inorder([1, 9], [1, 2])


def test_build_empty():
    assert build_from_inorder_preorder([], []) is None


def test_mirror_reverses_inorder():
    tree = sample_tree()
    before = inorder(tree)
    assert inorder(mirror(tree)) == before[::-1]


def test_tree_sum_and_min_max():
    values = [3, -8, 12, 5, 0, 7]
    tree = build_from_inorder_preorder(values, values)
    assert tree_sum(tree) == sum(values)
    assert min_and_max(tree) == (min(values), max(values))


def test_min_and_max_empty():
    with pytest.raises(ValueError):
        min_and_max(None)


def test_balanced_bst_properties():
    values = list(range(20))
    tree = balanced_bst_from_sorted(values)
    assert inorder(tree) == values
    assert is_balanced(tree)


def test_chain_is_not_balanced():
    chain = BinaryTreeNode(1, BinaryTreeNode(2, BinaryTreeNode(3)))
    assert not is_balanced(chain)
    assert height(chain) == 3


def test_level_order_invariants():
    tree = balanced_bst_from_sorted(list(range(15)))
    levels = level_order(tree)
    assert len(levels) == height(tree)
    assert levels[0] == [tree.data]
    assert sorted(v for level in levels for v in level) == list(range(15))
    assert level_order(None) == []


def test_zigzag_order():
    assert zigzag_order(sample_tree()) == [[1], [3, 2], [4, 5, 6, 7]]


def test_remove_leaves():
    result = remove_leaves(sample_tree())
    assert result == BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3))
    assert remove_leaves(BinaryTreeNode(9)) is None


def test_nodes_without_sibling():
    tree = BinaryTreeNode(1, BinaryTreeNode(2, None, BinaryTreeNode(4)), BinaryTreeNode(3))
    assert nodes_without_sibling(tree) == [4]
    assert nodes_without_sibling(sample_tree()) == []


def test_pair_sum():
    tree = balanced_bst_from_sorted([1, 2, 3, 4, 5, 6])
    pairs = pair_sum(tree, 7)
    assert pairs == [(1, 6), (2, 5), (3, 4)]
    assert all(a + b == 7 for a, b in pairs)


def test_lca():
    tree = sample_tree()
    assert lca(tree, 4, 5) == 2
    assert lca(tree, 4, 7) == 1
    assert lca(tree, 4, 2) == 2
    assert lca(tree, 40, 50) is None