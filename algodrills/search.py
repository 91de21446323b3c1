"""Search problems: N-queens counting, minimum coin change and island counting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_NEIGHBOUR_OFFSETS = ((0, 1), (1, 0), (-1, 0), (0, -1))


def total_n_queens(n: int) -> int:
    """Return how many ways ``n`` queens fit on an n-by-n board with no two attacking.

    A board of size 0 has one (empty) solution and a negative size has none.
    """
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        found = 0
        for col in range(n):
            diagonal = row - col
            anti_diagonal = row + col
            if col in columns or diagonal in diagonals or anti_diagonal in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(diagonal)
            anti_diagonals.add(anti_diagonal)
            found += place(row + 1)
            columns.discard(col)
            diagonals.discard(diagonal)
            anti_diagonals.discard(anti_diagonal)
        return found

    return place(0)


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if it cannot be made.

    Each denomination may be used any number of times; non-positive
    denominations are never useful and are ignored.

    Raises ValueError for a negative amount.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")

    denominations = sorted({coin for coin in coins if coin > 0})
    best: list[int | None] = [None] * (amount + 1)
    best[0] = 0

    for target in range(1, amount + 1):
        for coin in denominations:
            if coin > target:
                break
            previous = best[target - coin]
            if previous is not None:
                candidate = previous + 1
                current = best[target]
                if current is None or candidate < current:
                    best[target] = candidate

    result = best[amount]
    return -1 if result is None else result


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of islands of 1-cells joined horizontally or vertically.

    The grid is left unchanged.
    """
    visited: set[tuple[int, int]] = set()

    def is_land(row: int, col: int) -> bool:
        return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] == 1

    islands = 0
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            if cell != 1 or (row, col) in visited:
                continue
            islands += 1
            visited.add((row, col))
            stack = [(row, col)]
            while stack:
                r, c = stack.pop()
                for dr, dc in _NEIGHBOUR_OFFSETS:
                    nr, nc = r + dr, c + dc
                    if (nr, nc) not in visited and is_land(nr, nc):
                        visited.add((nr, nc))
                        stack.append((nr, nc))
    return islands