"""Square matrix multiplication by Strassen's seven-product scheme."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(m: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(m)
    cols = len(m[0]) if rows else 0
    if any(len(row) != cols for row in m):
        raise ValueError("matrix rows must have equal length")
    return rows, cols


def matrix_add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Elementwise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def matrix_sub(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Elementwise difference of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _quarters(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    h = len(m) // 2
    return (
        [row[:h] for row in m[:h]],
        [row[h:] for row in m[:h]],
        [row[:h] for row in m[h:]],
        [row[h:] for row in m[h:]],
    )


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    if len(a) == 1:
        return [[a[0][0] * b[0][0]]]
    a11, a12, a21, a22 = _quarters(a)
    b11, b12, b21, b22 = _quarters(b)
    p1 = _multiply(a11, matrix_sub(b12, b22))
    p2 = _multiply(matrix_add(a11, a12), b22)
    p3 = _multiply(matrix_add(a21, a22), b11)
    p4 = _multiply(a22, matrix_sub(b21, b11))
    p5 = _multiply(matrix_add(a11, a22), matrix_add(b11, b22))
    p6 = _multiply(matrix_sub(a12, a22), matrix_add(b21, b22))
    p7 = _multiply(matrix_sub(a11, a21), matrix_add(b11, b12))
    c11 = matrix_add(p5, matrix_add(p4, matrix_sub(p6, p2)))
    c12 = matrix_add(p1, p2)
    c21 = matrix_add(p3, p4)
    c22 = matrix_add(p5, matrix_sub(matrix_sub(p1, p3), p7))
    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def strassen_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Product of two n-by-n matrices; they are padded with zeros to a power of two."""
    n, cols = _shape(a)
    if n != cols or _shape(b) != (n, n):
        raise ValueError("both matrices must be square and of the same size")
    if n == 0:
        return []
    size = 1
    while size < n:
        size *= 2

    def padded(m: Sequence[Sequence[int]]) -> Matrix:
        rows = [list(row) + [0] * (size - n) for row in m]
        return rows + [[0] * size for _ in range(size - n)]

    product = _multiply(padded(a), padded(b))
    return [row[:n] for row in product[:n]]