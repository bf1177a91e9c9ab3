"""Backtracking searches: N queens, rat in a maze, sudoku and subset sums."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

SUDOKU_SIZE = 9
_BOX = 3


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Every placement of n non-attacking queens, as the column used in each row."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    solutions: list[tuple[int, ...]] = []
    columns: list[int] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(tuple(columns))
            return
        for col in range(n):
            if all(
                c != col and abs(c - col) != row - r for r, c in enumerate(columns)
            ):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return solutions


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[list[list[int]]]:
    """Every simple path from the top-left to the bottom-right cell of a square maze.

    Open cells are 1, walls 0. Each path is a 0/1 grid marking the cells used.
    Moves are tried in the order up, down, left, right.
    """
    grid = [list(row) for row in maze]
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    if n == 0:
        return []
    path = [[0] * n for _ in range(n)]
    solutions: list[list[list[int]]] = []

    def visit(x: int, y: int) -> None:
        if not (0 <= x < n and 0 <= y < n) or grid[x][y] == 0 or path[x][y]:
            return
        path[x][y] = 1
        if (x, y) == (n - 1, n - 1):
            solutions.append([row[:] for row in path])
        else:
            for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                visit(x + dx, y + dy)
        path[x][y] = 0

    visit(0, 0)
    return solutions


def _is_safe(board: list[list[int]], row: int, col: int, num: int) -> bool:
    if num in board[row]:
        return False
    if any(board[i][col] == num for i in range(SUDOKU_SIZE)):
        return False
    top, left = row - row % _BOX, col - col % _BOX
    return all(
        board[top + i][left + j] != num for i in range(_BOX) for j in range(_BOX)
    )


def _first_empty(board: list[list[int]]) -> Optional[tuple[int, int]]:
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            if value == 0:
                return i, j
    return None


def _solve(board: list[list[int]]) -> bool:
    empty = _first_empty(board)
    if empty is None:
        return True
    row, col = empty
    for num in range(1, SUDOKU_SIZE + 1):
        if _is_safe(board, row, col, num):
            board[row][col] = num
            if _solve(board):
                return True
            board[row][col] = 0
    return False


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """Solved copy of a 9x9 sudoku (0 marks an empty cell), or None if none exists."""
    board = [list(row) for row in grid]
    if len(board) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in board):
        raise ValueError("sudoku grid must be 9 by 9")
    return board if _solve(board) else None


def subset_sum_count(values: Sequence[int], k: int) -> int:
    """Number of subsets of values (the empty one included) that add up to k."""
    values = list(values)

    def count(index: int, remaining: int) -> int:
        if index == len(values):
            return int(remaining == 0)
        return count(index + 1, remaining - values[index]) + count(index + 1, remaining)

    return count(0, k)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a sudoku as 81 integers, print the solution and whether one exists."""
    parser = argparse.ArgumentParser(description="Solve a 9x9 sudoku (0 = empty).")
    parser.add_argument(
        "file", nargs="?", help="file holding 81 integers; standard input if omitted"
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
        parser.error("the grid must contain only integers")
    if len(numbers) != SUDOKU_SIZE * SUDOKU_SIZE:
        parser.error("exactly 81 integers are required")
    grid = [
        numbers[i : i + SUDOKU_SIZE] for i in range(0, len(numbers), SUDOKU_SIZE)
    ]
    print()
    solution = solve_sudoku(grid)
    if solution is None:
        print("false")
        return 0
    for row in solution:
        print(" ".join(str(value) for value in row))
    print("true")
    return 0