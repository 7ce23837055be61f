"""Dense 2D matrix algebra backing the network.

Every operation returns a fresh :class:`Matrix`; operands are never mutated.
Storage is a ``float64`` numpy array in row-major order.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

import numpy as np

from .errors import ShapeMismatch

ScalarFn = Callable[[float], float]


def _check_dims(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ShapeMismatch(f"Matrix dimensions must be non-negative, got {rows}x{cols}")


class Matrix:
    """A dense ``rows x cols`` matrix of 64-bit floats."""

    __slots__ = ("_data",)

    def __init__(
        self,
        rows: int | None = None,
        cols: int | None = None,
        data: np.ndarray | None = None,
    ) -> None:
        if data is None:
            rows, cols = rows or 0, cols or 0
            _check_dims(rows, cols)
            self._data = np.zeros((rows, cols), dtype=np.float64)
            return
        array = np.array(data, dtype=np.float64, copy=True)
        if array.ndim != 2:
            raise ShapeMismatch(f"Matrix storage must be two dimensional, got ndim={array.ndim}")
        if (rows is not None and rows != array.shape[0]) or (
            cols is not None and cols != array.shape[1]
        ):
            raise ShapeMismatch(
                f"Requested {rows}x{cols} but data has shape "
                f"{array.shape[0]}x{array.shape[1]}"
            )
        self._data = array

    # ------------------------------------------------------------------
    # Constructors

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """Return a zero-filled ``rows x cols`` matrix."""

        return cls(rows, cols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a sequence of equally sized rows.

        The column count is taken from the first row, so an empty outer
        sequence is rejected rather than treated as ``0x0``.
        """

        rows = [list(row) for row in rows]
        if not rows:
            raise ShapeMismatch("Cannot build a matrix from an empty sequence of rows")
        width = len(rows[0])
        for idx, row in enumerate(rows):
            if len(row) != width:
                raise ShapeMismatch(
                    f"Row {idx} has {len(row)} entries but row 0 has {width}"
                )
        if width == 0:
            return cls(len(rows), 0)
        return cls(data=np.asarray(rows, dtype=np.float64))

    @classmethod
    def column(cls, values: Iterable[float]) -> "Matrix":
        """Return a single-column matrix holding ``values`` top to bottom."""

        flat = np.asarray(list(values), dtype=np.float64)
        return cls(data=flat.reshape(-1, 1))

    @classmethod
    def random(
        cls, rows: int, cols: int, rng: np.random.Generator | None = None
    ) -> "Matrix":
        """Return a matrix with entries drawn uniformly from ``[-1.0, 1.0)``."""

        _check_dims(rows, cols)
        rng = rng if rng is not None else np.random.default_rng()
        return cls(data=rng.uniform(-1.0, 1.0, size=(rows, cols)))

    # ------------------------------------------------------------------
    # Shape and storage

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the backing array."""

        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def column_values(self) -> List[float]:
        """Flatten a single-column matrix into a list."""

        if self.cols != 1:
            raise ShapeMismatch(f"Expected a column vector, got shape {self.shape}")
        return self._data[:, 0].tolist()

    def copy(self) -> "Matrix":
        return Matrix(data=self._data)

    # ------------------------------------------------------------------
    # Algebra

    def multiply(self, other: "Matrix") -> "Matrix":
        """Standard matrix product ``self @ other``."""

        if self.cols != other.rows:
            raise ShapeMismatch(
                f"Cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}: "
                "columns of the left operand must match rows of the right"
            )
        return Matrix(data=self._data @ other._data)

    def add(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "add")
        return Matrix(data=self._data + other._data)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "subtract")
        return Matrix(data=self._data - other._data)

    def elementwise_multiply(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "elementwise multiply")
        return Matrix(data=self._data * other._data)

    def scale(self, factor: float) -> "Matrix":
        return Matrix(data=self._data * float(factor))

    def map(self, func: ScalarFn) -> "Matrix":
        """Apply the scalar function ``func`` to every entry."""

        out = np.empty_like(self._data)
        for idx, value in np.ndenumerate(self._data):
            out[idx] = func(float(value))
        return Matrix(data=out)

    def transpose(self) -> "Matrix":
        return Matrix(data=self._data.T)

    T = property(transpose)

    def _require_same_shape(self, other: "Matrix", op: str) -> None:
        if self.shape != other.shape:
            raise ShapeMismatch(
                f"Cannot {op} {self.rows}x{self.cols} and {other.rows}x{other.cols}: "
                "matrices must have the same number of rows and columns"
            )

    # Operators only accept matrices; scalars go through ``scale``.
    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.elementwise_multiply(other)

    # ------------------------------------------------------------------
    # Comparison and rendering

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.to_list()!r})"

    def format(self) -> str:
        """Bracketed rendering, rows top to bottom and columns left to right."""

        lines = ["["]
        for row in self._data:
            lines.append("[" + " ".join(repr(float(v)) for v in row) + "]")
        lines.append("]")
        return "\n".join(lines)

    __str__ = format

    def print(self) -> None:
        print(self.format())


def new(rows: int, cols: int) -> Matrix:
    return Matrix.zeros(rows, cols)


def from_rows(rows: Sequence[Sequence[float]]) -> Matrix:
    return Matrix.from_rows(rows)


def random(rows: int, cols: int, rng: np.random.Generator | None = None) -> Matrix:
    return Matrix.random(rows, cols, rng=rng)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    return a.multiply(b)


def add(a: Matrix, b: Matrix) -> Matrix:
    return a.add(b)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    return a.subtract(b)


def elementwise_multiply(a: Matrix, b: Matrix) -> Matrix:
    return a.elementwise_multiply(b)


def map(m: Matrix, func: ScalarFn) -> Matrix:  # noqa: A001 - mirrors Matrix.map
    return m.map(func)


def transpose(m: Matrix) -> Matrix:
    return m.transpose()


__all__ = [
    "Matrix",
    "new",
    "from_rows",
    "random",
    "multiply",
    "add",
    "subtract",
    "elementwise_multiply",
    "map",
    "transpose",
]
