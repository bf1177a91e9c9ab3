# dsakit

A compact collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.binary_tree` | `BinaryTreeNode` (a dataclass with `data`, `left`, `right` and an `is_leaf` property); traversals `preorder`, `inorder`, `level_order` (values grouped by level) and `zigzag_order`; `height`, `mirror` (in place), `is_balanced`, `tree_sum`, `min_and_max`, `remove_leaves`, `nodes_without_sibling`, `pair_sum`, `lca`; `build_from_inorder_preorder`, `build_from_postorder_inorder` and `balanced_bst_from_sorted` |
| `dsakit.bst` | Search-tree helpers: `bst_lca`, `largest_bst_height`, `replace_with_larger_sum` (in place), `root_to_leaf_paths` |
| `dsakit.dp` | `fibonacci`, `min_steps_to_one`, `staircase` and `balanced_bt_count` (both modulo 10**9 + 7), `min_square_count`, `min_cost_path` (moves right, down or diagonally), `lcs`, `edit_distance`, `knapsack`, `max_money_looted`, `longest_increasing_subsequence`, `count_power_sums` |
| `dsakit.heaps` | `MinPriorityQueue` and `MaxPriorityQueue` (raise `IndexError` when empty); `heap_sort` (returns a descending copy), `k_sorted`, `k_smallest`, `k_largest`, `kth_largest`, `is_max_heap`, `running_median` (even counts average the middle two, truncated), `merge_k_sorted`, `buy_ticket` |
| `dsakit.numbers` | Immutable `Fraction` and `ComplexNumber` with `+`, `*` (and `/` for fractions, reduced to lowest terms); `Polynomial` with `set_coefficient`, `coefficient`, `+`, `-`, `*` |
| `dsakit.recursion` | `check_ab`, `staircase_ways`, `binary_search`, `subsets`, `subsets_summing_to`, `codes` (a=1 ... z=26 decodings), `permutations`, `tower_of_hanoi` (returns the list of moves) |
| `dsakit.backtracking` | `n_queens` (column per row for every solution), `rat_in_maze` (every path as a 0/1 grid), `solve_sudoku` (solved copy or `None`), `subset_sum_count` |
| `dsakit.lca_tree` | `LcaTree`: a weighted tree rooted at node 0 answering `lca`, `kth_ancestor`, `func_between`, `kth_node_and_func`, `kth_node_in_path`, `depth` and `distance` by binary lifting, with a pluggable merge function and identity |
| `dsakit.segment_tree` | `SegmentTree` with range-sum `query`, point `update` and lazy `range_update` increments |
| `dsakit.stacks` | `ArrayStack` (fixed capacity, raises `StackOverflowError` when full), `DynamicStack` (capacity starts at four and doubles), `LinkedStack`; all raise `IndexError` on `pop`/`top` when empty |
| `dsakit.graph` | `adjacency_matrix`, `dfs`, `bfs` (from one start vertex) and `dfs_all`, `bfs_all` (over every component) |
| `dsakit.numerics` | `gauss_seidel` for three linear equations given as `(a, b, c, d)` and `trapezoid` for the composite trapezoidal rule |

## Examples

```python
from dsakit.binary_tree import build_from_inorder_preorder, level_order
from dsakit.dp import edit_distance, lcs
from dsakit.heaps import MinPriorityQueue
from dsakit.lca_tree import LcaTree
from dsakit.segment_tree import SegmentTree

root = build_from_inorder_preorder([4, 2, 5, 1, 3], [1, 2, 4, 5, 3])
print(level_order(root))          # [[1], [2, 3], [4, 5]]

print(lcs("adebc", "dcadb"))      # 3
print(edit_distance("abc", "dc")) # 2

queue = MinPriorityQueue()
for value in (5, 1, 4):
    queue.insert(value)
print(queue.remove_min())         # 1

edges = [[0, 1, 3], [1, 2, 2], [1, 3, 4], [3, 4, 1]]
tree = LcaTree(5, edges, lambda a, b: a + b, 0)
print(tree.lca(2, 4), tree.func_between(2, 4))  # 1 7

seg = SegmentTree([1, 2, 3, 4, 5])
seg.range_update(0, 3, -1)
print(seg.query(0, 4))            # 11
```

## Command-line tools

```
dsakit-lcs [STRING STRING]   # length of the longest common subsequence;
                             # reads two words from standard input if none are given
dsakit-sudoku [FILE]         # 81 integers, 0 for empty cells; prints the solved
                             # grid followed by "true", or "false" if there is none
dsakit-graph [FILE]          # "n e" then e vertex pairs; prints the DFS and BFS
                             # orders over every component
```

Without a file argument, `dsakit-sudoku` and `dsakit-graph` read standard input.
For example:

```
echo "adebc dcadb" | dsakit-lcs
```

## What is not included

The package has no queue or deque classes, no linked-list type, and no
general (n-ary) tree; it also does not read trees interactively from the
terminal. The binary-tree functions work on `BinaryTreeNode` objects that
you build yourself or obtain from the `build_*` helpers.