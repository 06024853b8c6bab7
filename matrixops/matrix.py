"""Square integer matrices with a bounded element range."""

from __future__ import annotations

import operator
from typing import Callable, TextIO

from matrixops.input_line import LineReader

MIN_ELEMENT = -1024
MAX_ELEMENT = 1000


def check_element(value: int) -> None:
    """Raise ValueError if value lies outside the allowed element range."""
    if value > MAX_ELEMENT or value < MIN_ELEMENT:
        raise ValueError("Matrix element out of range")


class SquareMatrix:
    """A size x size matrix of integers."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, value: int = 0) -> None:
        if size < 0:
            raise ValueError("matrix size must not be negative")
        if size:
            check_element(value)
        self._rows = [[value] * size for _ in range(size)]

    @classmethod
    def _from_rows(cls, rows: list[list[int]]) -> SquareMatrix:
        matrix = cls.__new__(cls)
        matrix._rows = rows
        return matrix

    @classmethod
    def sequence(cls, size: int) -> SquareMatrix:
        """A matrix filled with 0, 1, 2, ... in row-major order."""
        if size < 0:
            raise ValueError("matrix size must not be negative")
        return cls._from_rows(
            [[row * size + col for col in range(size)] for row in range(size)]
        )

    @classmethod
    def read(cls, stream: TextIO, size: int) -> SquareMatrix:
        """Read size lines of size integers each from stream."""
        rows = []
        for _ in range(size):
            reader = LineReader(stream)
            rows.append([reader.get_int() for _ in range(size)])
            reader.check_end_of_input()
        return cls._from_rows(rows)

    @property
    def size(self) -> int:
        return len(self._rows)

    def __getitem__(self, key: tuple[int, int]) -> int:
        row, col = key
        return self._rows[row][col]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        row, col = key
        self._rows[row][col] = value

    def _combine(
        self, other: SquareMatrix, op: Callable[[int, int], int]
    ) -> SquareMatrix:
        if other.size != self.size:
            raise ValueError("matrix sizes differ")
        rows = []
        for mine, theirs in zip(self._rows, other._rows):
            row = [op(a, b) for a, b in zip(mine, theirs)]
            for value in row:
                check_element(value)
            rows.append(row)
        return self._from_rows(rows)

    def __add__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._combine(other, operator.add)

    def __sub__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._combine(other, operator.sub)

    def __mul__(self, scalar: object) -> SquareMatrix:
        if not isinstance(scalar, int):
            return NotImplemented
        rows = [[value * scalar for value in row] for row in self._rows]
        for row in rows:
            for value in row:
                check_element(value)
        return self._from_rows(rows)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._rows == other._rows

    def transpose(self) -> SquareMatrix:
        return self._from_rows([list(col) for col in zip(*self._rows)])

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"SquareMatrix.from_rows({self._rows!r})"