"""Composable operations on square matrices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from matrixops.matrix import SquareMatrix


class Operation(ABC):
    """An operation that turns a list of input matrices into one matrix."""

    @abstractmethod
    def input_count(self) -> int:
        """Number of input matrices compute() consumes."""

    @abstractmethod
    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        """Compute the result from the inputs."""

    @abstractmethod
    def describe(self, top_level: bool = False) -> str:
        """A textual form of the operation."""

    def describe_with_inputs(self, inputs: Sequence[SquareMatrix]) -> str:
        """The operation's text followed by each input matrix it uses."""
        count = self.input_count()
        if len(inputs) < count:
            raise ValueError("not enough input matrices")
        return self.describe() + "".join(f"(\n{matrix})" for matrix in inputs[:count])


class UnaryOperation(Operation):
    """An operation applied to a single matrix."""

    def input_count(self) -> int:
        return 1

    @staticmethod
    def _only_input(inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        if not inputs:
            raise ValueError("no input matrix")
        return inputs[0]


class BinaryOperation(Operation):
    """An operation combining the results of two sub-operations."""

    def __init__(self, first: Operation, second: Operation) -> None:
        self._first = first
        self._second = second

    @property
    def first(self) -> Operation:
        return self._first

    @property
    def second(self) -> Operation:
        return self._second

    def input_count(self) -> int:
        return self._first.input_count() + self._second.input_count()

    @abstractmethod
    def symbol(self) -> str:
        """The infix symbol of the operation."""

    def describe(self, top_level: bool = False) -> str:
        text = f"{self._first.describe()} {self.symbol()} {self._second.describe()}"
        return text if top_level else f"({text})"

    def _split(
        self, inputs: Sequence[SquareMatrix]
    ) -> tuple[SquareMatrix, list[SquareMatrix]]:
        result = self._first.compute(inputs)
        return result, list(inputs[self._first.input_count():])


class Identity(UnaryOperation):
    """Returns its input unchanged."""

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        return self._only_input(inputs)

    def describe(self, top_level: bool = False) -> str:
        return "id"


class Transpose(UnaryOperation):
    """Returns the transpose of its input."""

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        return self._only_input(inputs).transpose()

    def describe(self, top_level: bool = False) -> str:
        return "tran"


class Scalar(UnaryOperation):
    """Multiplies its input by a fixed integer."""

    def __init__(self, scalar: int) -> None:
        self.scalar = scalar

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        return self._only_input(inputs) * self.scalar

    def describe(self, top_level: bool = False) -> str:
        return f"scal {self.scalar}"


class Add(BinaryOperation):
    """Sum of the two sub-operations' results."""

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        a, rest = self._split(inputs)
        return a + self.second.compute(rest)

    def symbol(self) -> str:
        return "+"


class Sub(BinaryOperation):
    """Difference of the two sub-operations' results."""

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        a, rest = self._split(inputs)
        return a - self.second.compute(rest)

    def symbol(self) -> str:
        return "-"


class Comp(BinaryOperation):
    """Feeds the first operation's result into the second as its first input."""

    def input_count(self) -> int:
        return self.first.input_count() + self.second.input_count() - 1

    def compute(self, inputs: Sequence[SquareMatrix]) -> SquareMatrix:
        result, rest = self._split(inputs)
        return self.second.compute([result, *rest])

    def symbol(self) -> str:
        return " -> "