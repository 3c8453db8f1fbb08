"""Arithmetic in the field of sixteen elements built on x^4 + x^3 + 1."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_MODULUS = 0b11001
_WIDTH = 11


def _powers() -> list[int]:
    powers = []
    value = 1
    for _ in range(15):
        powers.append(value)
        value <<= 1
        if value & 0b10000:
            value ^= _MODULUS
    return powers


_EXP = _powers()
_LOG = {value: k for k, value in enumerate(_EXP)}


@dataclass(frozen=True)
class GF16:
    """A field element; bit m of ``value`` is the coefficient of x^m."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < 16:
            raise ValueError(f"{self.value} is not an element of GF(16)")

    def __add__(self, other: object) -> GF16:
        if not isinstance(other, GF16):
            return NotImplemented
        return GF16(self.value ^ other.value)

    def __mul__(self, other: object) -> GF16:
        if not isinstance(other, GF16):
            return NotImplemented
        if self.value == 0 or other.value == 0:
            return GF16(0)
        return GF16(_EXP[(_LOG[self.value] + _LOG[other.value]) % 15])

    def __str__(self) -> str:
        terms = []
        for power in (3, 2, 1):
            if self.value >> power & 1:
                terms.append("x" if power == 1 else f"x{power}")
        if self.value & 1:
            terms.append("1")
        return "+".join(terms) or "0"


_ELEMENTS = [GF16(0)] + [GF16(v) for v in _EXP]


def addition_table() -> list[list[GF16]]:
    """Sums of all pairs, rows and columns ordered 0, 1, x, x^2, ..., x^14."""
    return [[a + b for b in _ELEMENTS] for a in _ELEMENTS]


def multiplication_table() -> list[list[GF16]]:
    """Products of all pairs, in the same order as :func:`addition_table`."""
    return [[a * b for b in _ELEMENTS] for a in _ELEMENTS]


def format_table(title: str, table: Sequence[Sequence[GF16]]) -> str:
    """The table under its title, every cell right-aligned in 11 columns."""
    if len(table) != len(_ELEMENTS) or any(len(row) != len(_ELEMENTS) for row in table):
        raise ValueError("a table must have 16 rows of 16 elements")
    lines = [title, " " * _WIDTH + "".join(str(e).rjust(_WIDTH) for e in _ELEMENTS)]
    for label, row in zip(_ELEMENTS, table):
        lines.append(str(label).rjust(_WIDTH) + "".join(str(e).rjust(_WIDTH) for e in row))
    return "\n".join(lines) + "\n"