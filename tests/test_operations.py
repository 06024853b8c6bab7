import pytest

from matrixops.matrix import SquareMatrix
from matrixops.operations import (
    Add,
    BinaryOperation,
    Comp,
    Identity,
    Scalar,
    Sub,
    Transpose,
)


@pytest.fixture
def a():
    return SquareMatrix.sequence(3)


@pytest.fixture
def b():
    return SquareMatrix(3, 2)


def test_unary_input_counts():
    assert Identity().input_count() == 1
    assert Transpose().input_count() == 1
    assert Scalar(5).input_count() == 1


def test_identity(a):
    assert Identity().compute([a]) == a


def test_identity_without_input():
    with pytest.raises(ValueError):
        Identity().compute([])


def test_transpose(a):
    assert Transpose().compute([a]) == a.transpose()


def test_scalar(a):
    assert Scalar(3).compute([a]) == a * 3


def test_scalar_out_of_range():
    with pytest.raises(ValueError, match="Matrix element out of range"):
        Scalar(1000).compute([SquareMatrix(1, 2)])


def test_add(a, b):
    op = Add(Identity(), Transpose())
    assert op.input_count() == 2
    assert op.compute([a, b]) == a + b.transpose()


def test_sub(a, b):
    op = Sub(Identity(), Identity())
    assert op.compute([a, b]) == a - b


def test_nested_add(a, b):
    op = Add(Add(Identity(), Identity()), Identity())
    assert op.input_count() == 3
    assert op.compute([a, b, a]) == a + b + a


def test_comp_single(a):
    op = Comp(Scalar(2), Transpose())
    assert op.input_count() == 1
    assert op.compute([a]) == (a * 2).transpose()


def test_comp_passes_rest(a, b):
    op = Comp(Add(Identity(), Identity()), Scalar(3))
    assert op.input_count() == 2
    assert op.compute([a, b]) == (a + b) * 3


def test_comp_with_binary_second(a, b):
    op = Comp(Identity(), Sub(Identity(), Identity()))
    assert op.input_count() == 2
    assert op.compute([a, b]) == a - b


def test_binary_is_abstract():
    with pytest.raises(TypeError):
        BinaryOperation(Identity(), Identity())


def test_unary_descriptions():
    assert Identity().describe() == "id"
    assert Transpose().describe(True) == "tran"
    assert Scalar(4).describe() == "scal 4"


def test_binary_description_top_level():
    assert Add(Identity(), Transpose()).describe(True) == "id + tran"
    assert Comp(Identity(), Transpose()).describe(True) == "id  ->  tran"


@pytest.mark.parametrize(
    "op",
    [
        Add(Identity(), Scalar(2)),
        Sub(Transpose(), Identity()),
        Comp(Add(Identity(), Identity()), Transpose()),
    ],
)
def test_nested_description_has_parentheses(op):
    assert op.describe(False) == "(" + op.describe(True) + ")"


def test_inner_operations_are_parenthesised():
    inner = Sub(Identity(), Identity())
    outer = Add(inner, Identity())
    assert outer.describe(True).startswith(inner.describe(False))


def test_describe_with_inputs(a):
    text = Identity().describe_with_inputs([a])
    assert text == "id" + "(\n" + str(a) + ")"


def test_describe_with_inputs_uses_only_needed(a, b):
    text = Identity().describe_with_inputs([a, b])
    assert text.count("(\n") == 1
    assert str(b) not in text


def test_describe_with_inputs_binary(a, b):
    op = Add(Identity(), Identity())
    text = op.describe_with_inputs([a, b])
    assert text.startswith(op.describe())
    assert text.endswith("(\n" + str(b) + ")")


def test_describe_with_too_few_inputs(a):
    with pytest.raises(ValueError):
        Add(Identity(), Identity()).describe_with_inputs([a])