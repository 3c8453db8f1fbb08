import random

import pytest

from algonotes.strassen import matrix_add, matrix_sub, strassen_multiply


def _identity(n):
    return [[int(i == j) for j in range(n)] for i in range(n)]


def _random_matrix(rng, n):
    return [[rng.randint(-9, 9) for _ in range(n)] for _ in range(n)]


def test_worked_two_by_two_product():
    assert strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_identity_is_neutral(n):
    a = _random_matrix(random.Random(n), n)
    assert strassen_multiply(a, _identity(n)) == a
    assert strassen_multiply(_identity(n), a) == a


@pytest.mark.parametrize("n", [2, 3, 6, 7])
def test_associative(n):
    rng = random.Random(10 + n)
    a, b, c = (_random_matrix(rng, n) for _ in range(3))
    assert strassen_multiply(strassen_multiply(a, b), c) == strassen_multiply(a, strassen_multiply(b, c))


@pytest.mark.parametrize("n", [3, 4, 5])
def test_distributive(n):
    rng = random.Random(20 + n)
    a, b, c = (_random_matrix(rng, n) for _ in range(3))
    left = strassen_multiply(a, matrix_add(b, c))
    right = matrix_add(strassen_multiply(a, b), strassen_multiply(a, c))
    assert left == right


def test_permutation_matrix_reorders_rows():
    rng = random.Random(3)
    n = 5
    a = _random_matrix(rng, n)
    order = [3, 0, 4, 1, 2]
    perm = [[int(j == order[i]) for j in range(n)] for i in range(n)]
    assert strassen_multiply(perm, a) == [a[k] for k in order]


def test_zero_matrix_annihilates():
    a = _random_matrix(random.Random(4), 3)
    zero = [[0] * 3 for _ in range(3)]
    assert strassen_multiply(a, zero) == zero


def test_empty_matrices():
    assert strassen_multiply([], []) == []


def test_add_and_sub_round_trip():
    rng = random.Random(5)
    a, b = _random_matrix(rng, 4), _random_matrix(rng, 4)
    assert matrix_sub(matrix_add(a, b), b) == a
    assert matrix_sub(a, a) == [[0] * 4 for _ in range(4)]


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        strassen_multiply([[1, 2]], [[1, 2]])
    with pytest.raises(ValueError):
        strassen_multiply([[1]], [[1, 0], [0, 1]])
    with pytest.raises(ValueError):
        matrix_add([[1, 2]], [[1]])