"""The n-queens puzzle and its solutions up to the symmetries of the board."""

from __future__ import annotations

Solution = tuple[int, ...]


def solve_queens(n: int) -> list[Solution]:
    """All placements of n non-attacking queens, in lexicographic order.

    A placement lists, for rows 1..n, the 1-based column of that row's queen.
    """
    if n < 1:
        raise ValueError("the board needs at least one row")
    solutions: list[Solution] = []
    placed: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        for col in range(1, n + 1):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            placed.append(col)
            if row == n:
                solutions.append(tuple(placed))
            else:
                place(row + 1)
            placed.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(1)
    return solutions


def symmetries(solution: Solution) -> list[Solution]:
    """The seven other images of a placement under the board's symmetries.

    In order: flipped top to bottom, flipped left to right, reflected in the
    main diagonal, reflected in the anti-diagonal, and turned by 90, 180 and
    270 degrees.
    """
    n = len(solution)
    if sorted(solution) != list(range(1, n + 1)):
        raise ValueError("a placement must put one queen in each column")

    def remap(cell_map) -> Solution:
        board = [0] * (n + 1)
        for row, col in enumerate(solution, 1):
            new_row, new_col = cell_map(row, col)
            board[new_row] = new_col
        return tuple(board[1:])

    return [
        remap(lambda r, c: (n - r + 1, c)),
        remap(lambda r, c: (r, n - c + 1)),
        remap(lambda r, c: (c, r)),
        remap(lambda r, c: (n - c + 1, n - r + 1)),
        remap(lambda r, c: (c, n - r + 1)),
        remap(lambda r, c: (n - r + 1, n - c + 1)),
        remap(lambda r, c: (n - c + 1, r)),
    ]


def distinct_solutions(n: int) -> list[Solution]:
    """One placement from each symmetry class, the first found in each."""
    kept: list[Solution] = []
    covered: set[Solution] = set()
    for solution in solve_queens(n):
        if solution in covered:
            continue
        kept.append(solution)
        covered.add(solution)
        covered.update(symmetries(solution))
    return kept