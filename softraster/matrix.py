"""Dense row-major matrices of floats."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .vec import Vec2, Vec3, VecHomogenous

Vector = Vec2 | Vec3 | VecHomogenous


class Matrix:
    """An immutable rows x columns matrix."""

    __slots__ = ("_data", "_rows", "_columns")

    def __init__(self, data: Iterable[float], rows: int, columns: int) -> None:
        values = tuple(float(value) for value in data)
        if rows < 0 or columns < 0 or len(values) != rows * columns:
            raise ValueError("matrix rows and columns do not match the data size")
        self._data = values
        self._rows = rows
        self._columns = columns

    @classmethod
    def from_vec(cls, vec: Vector) -> Matrix:
        """Column matrix holding the components of a vector."""
        if isinstance(vec, VecHomogenous):
            return cls((vec.x, vec.y, vec.z, vec.w), 4, 1)
        if isinstance(vec, Vec3):
            return cls((vec.x, vec.y, vec.z), 3, 1)
        if isinstance(vec, Vec2):
            return cls((vec.x, vec.y), 2, 1)
        raise TypeError(f"cannot build a matrix from {type(vec).__name__}")

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls(
            (1.0 if row == column else 0.0 for row in range(size) for column in range(size)),
            size,
            size,
        )

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def _lines(self) -> Iterator[tuple[float, ...]]:
        for start in range(0, len(self._data), self._columns or 1):
            yield self._data[start:start + self._columns]

    def __getitem__(self, key: int | tuple[int, int]) -> float | tuple[float, ...]:
        """``m[row]`` gives a row, ``m[row, column]`` a single value."""
        if isinstance(key, tuple):
            return self.get(*key)
        if not 0 <= key < self._rows:
            raise IndexError("matrix row out of range")
        start = key * self._columns
        return self._data[start:start + self._columns]

    def get(self, row: int, column: int) -> float:
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError("matrix index out of range")
        return self._data[row * self._columns + column]

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        size = self._rows
        if size != self._columns:
            raise ValueError("determinant needs a square matrix")
        if size == 1:
            return self._data[0]
        if size == 2:
            a, b, c, d = self._data
            return a * d - b * c
        first_row = self[0]
        return sum(
            (1 if column % 2 == 0 else -1) * value * self.minor(0, column).determinant()
            for column, value in enumerate(first_row)
        )

    def minor(self, row: int, column: int) -> Matrix:
        """The matrix with one row and one column removed."""
        data = [
            value
            for row_index, line in enumerate(self._lines())
            if row_index != row
            for column_index, value in enumerate(line)
            if column_index != column
        ]
        return Matrix(data, self._rows - 1, self._columns - 1)

    def cofactor(self) -> Matrix:
        data = [
            (1 if (row + column) % 2 == 0 else -1) * self.minor(row, column).determinant()
            for row in range(self._rows)
            for column in range(self._columns)
        ]
        return Matrix(data, self._rows, self._columns)

    def adjoint(self) -> Matrix:
        return self.cofactor().transpose()

    def transpose(self) -> Matrix:
        data = [value for column in zip(*self._lines()) for value in column]
        return Matrix(data, self._columns, self._rows)

    def inverse(self) -> Matrix:
        determinant = self.determinant()
        if determinant == 0:
            raise ValueError("cannot invert a matrix whose determinant is 0")
        return self.adjoint() * (1 / determinant)

    def to_vec(self) -> Vector:
        """Convert a column matrix of 2, 3 or 4 rows into a vector."""
        if self._columns != 1:
            raise ValueError("only a single-column matrix converts to a vector")
        if self._rows == 2:
            return Vec2(*self._data)
        if self._rows == 3:
            return Vec3(*self._data)
        if self._rows == 4:
            return VecHomogenous(*self._data)
        raise ValueError("only 2, 3 or 4 rows convert to a vector")

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self._columns != other._rows:
                raise ValueError("matrix dimensions do not allow multiplication")
            other_columns = list(zip(*other._lines()))
            data = [
                sum(a * b for a, b in zip(line, column))
                for line in self._lines()
                for column in other_columns
            ]
            return Matrix(data, self._rows, other._columns)
        if isinstance(other, (Vec2, Vec3, VecHomogenous)):
            return (self * Matrix.from_vec(other)).to_vec()
        if isinstance(other, (int, float)):
            return Matrix((value * other for value in self._data), self._rows, self._columns)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self._rows, self._columns, self._data) == (other._rows, other._columns, other._data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({list(self._data)!r}, {self._rows}, {self._columns})"

    def __str__(self) -> str:
        return "\n".join(
            "[" + "".join(f"{value:f}," for value in line) + "]" for line in self._lines()
        )