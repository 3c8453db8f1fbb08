from itertools import product

import pytest

from algonotes.gf16 import GF16, addition_table, format_table, multiplication_table

ELEMENTS = [GF16(v) for v in range(16)]
ZERO, ONE = GF16(0), GF16(1)


def test_str_formats_polynomials():
    assert str(GF16(0)) == "0"
    assert str(GF16(1)) == "1"
    assert str(GF16(0b1011)) == "x3+x+1"
    assert str(GF16(0b0100)) == "x2"


def test_addition_is_its_own_inverse():
    for a in ELEMENTS:
        assert a + a == ZERO
        assert a + ZERO == a


def test_field_axioms():
    for a, b, c in product(ELEMENTS, repeat=3):
        assert (a * b) * c == a * (b * c)
        assert a * (b + c) == a * b + a * c
    for a, b in product(ELEMENTS, repeat=2):
        assert a * b == b * a
        assert a + b == b + a


def test_every_nonzero_element_has_an_inverse():
    for a in ELEMENTS[1:]:
        assert sum(1 for b in ELEMENTS if a * b == ONE) == 1


def test_x_generates_the_multiplicative_group():
    x = GF16(2)
    seen = []
    power = ONE
    for _ in range(15):
        seen.append(power)
        power = power * x
    assert power == ONE
    assert set(seen) == set(ELEMENTS[1:])


def test_x4_reduces_by_modulus():
    x = GF16(2)
    assert x * x * x * x == GF16(0b1001)


def test_tables_agree_with_operators():
    add = addition_table()
    mul = multiplication_table()
    order = add[0]
    assert sorted(e.value for e in order) == list(range(16))
    for i, a in enumerate(order):
        for j, b in enumerate(order):
            assert add[i][j] == a + b
            assert mul[i][j] == b * a
        assert add[i][i] == ZERO
        assert mul[0][i] == ZERO
        assert mul[i][0] == ZERO


def test_addition_rows_are_permutations():
    for row in addition_table():
        assert set(row) == set(ELEMENTS)


def test_format_table_layout():
    table = addition_table()
    text = format_table("PLUS", table)
    lines = text.splitlines()
    assert lines[0] == "PLUS"
    assert lines[1].split() == [str(e) for e in table[0]]
    for label, line, row in zip(table[0], lines[2:], table):
        assert line.split() == [str(label)] + [str(e) for e in row]
    assert len(lines) == len(table) + 2
    assert {len(line) for line in lines[1:]} == {11 * (len(table) + 1)}
    assert text.endswith("\n")


def test_format_table_rejects_wrong_shape():
    with pytest.raises(ValueError):
        format_table("PLUS", addition_table()[:3])


def test_out_of_range_element_raises():
    with pytest.raises(ValueError):
        GF16(16)