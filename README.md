# matrixops

Square integer matrices, and operations on them that can be combined into
trees and evaluated against a list of input matrices.

Matrix elements are kept within the range -1024 to 1000. Creating a filled
matrix, adding, subtracting or scaling raises `ValueError` when an element
would leave that range.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Matrices

`matrixops.matrix.SquareMatrix` holds a `size` x `size` grid of integers.

```python
from matrixops.matrix import SquareMatrix

a = SquareMatrix(2, 3)            # 2x2 filled with 3
b = SquareMatrix.sequence(2)      # 0 1 / 2 3
c = a + b
print(c)                          # "3 4 \n5 6 \n"
print(c[1, 0])                    # 5
print(b.transpose())              # "0 2 \n1 3 \n"
print(b * 2)                      # "0 2 \n4 6 \n"
print(a == SquareMatrix(2, 3))    # True
```

- `SquareMatrix(size, value=0)` fills every element with `value`; a negative
  size raises `ValueError`.
- `SquareMatrix.sequence(size)` fills the matrix with 0, 1, 2, ... row by row.
- `m[row, col]` reads an element; `m[row, col] = v` sets one (without a range
  check).
- `+` and `-` work element by element and raise `ValueError` when the sizes
  differ; `*` multiplies by an integer from either side.
- `str(m)` gives each row as numbers followed by a space, one row per line.
- `matrixops.matrix.check_element(value)` raises `ValueError` for a value
  outside the allowed range.

A matrix can be read from a text stream, one row per line:

```python
import io
from matrixops.matrix import SquareMatrix

m = SquareMatrix.read(io.StringIO("1 2\n3 4\n"), 2)
```

A row with too few numbers, extra characters, or a number out of range raises
`ValueError`.

## Operations

`matrixops.operations` provides the operations. Every operation knows how many
input matrices it consumes (`input_count()`), computes a result from a list of
inputs (`compute(inputs)`), and describes itself as text
(`describe(top_level=False)`; a binary operation is wrapped in parentheses
unless `top_level` is true).

- `Identity()` – returns its input unchanged; described as `id`.
- `Transpose()` – transposes its input; described as `tran`.
- `Scalar(k)` – multiplies its input by `k`; described as `scal k`.
- `Add(f, g)` / `Sub(f, g)` – give the first `f.input_count()` inputs to `f`,
  the rest to `g`, and add or subtract the results.
- `Comp(f, g)` – feed the result of `f` into `g` as its first input, followed
  by the inputs left over after `f`.

```python
from matrixops.matrix import SquareMatrix
from matrixops.operations import Add, Comp, Identity, Scalar, Transpose

op = Comp(Transpose(), Add(Scalar(2), Identity()))
print(op.input_count())           # 2
print(op.describe(True))          # tran  ->  (scal 2 + id)

m = SquareMatrix.sequence(2)
print(op.compute([m, m]))         # "0 5 \n4 9 \n"
print(op.describe_with_inputs([m, m]))
```

`describe_with_inputs(inputs)` returns the description followed by each input
matrix the operation uses, each wrapped as `(\n<matrix>)`; it raises
`ValueError` if fewer inputs are given than `input_count()`.

New binary operations can be made by subclassing `BinaryOperation` and
providing `compute` and `symbol`; new single-input ones by subclassing
`UnaryOperation`.

## Reading input lines

`matrixops.input_line.LineReader(stream)` reads one line from a stream and
hands out its tokens with `get_int(error, minimum, maximum)`, `get_char()` and
`get_string()`. A missing token raises `ValueError`, as does an integer
outside `minimum`..`maximum` (by default -1024..1000), with `error` as the
message. `check_end_of_input()` raises `ValueError("Too many characters")` if
anything other than whitespace is left on the line.

## What it does not do

The package is a library only. It has no command and no interactive
calculator: there is no prompt for entering commands, no stored list of
operations to build up, delete or evaluate by number, and no reading of
commands from a file. Those would have to be built on top of the classes
above.