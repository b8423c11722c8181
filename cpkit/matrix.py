"""Dense integer matrices with multiplication and fast exponentiation."""

from __future__ import annotations


class Matrix:
    """A ``rows`` x ``cols`` matrix stored as a list of rows in ``mat``."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self.mat = [[0] * cols for _ in range(rows)]

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """The ``n`` x ``n`` identity matrix."""
        result = cls(n, n)
        for i, row in enumerate(result.mat):
            row[i] = 1
        return result

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}")
        columns = list(zip(*other.mat)) if other.rows else [()] * other.cols
        result = Matrix(self.rows, other.cols)
        result.mat = [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.mat]
        return result

    def power(self, p: int) -> Matrix:
        """Raise a square matrix to the non-negative power ``p``."""
        if self.rows != self.cols:
            raise ValueError("only square matrices can be raised to a power")
        if p < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(self.rows)
        base = self
        while p:
            if p & 1:
                result = result * base
            base = base * base
            p >>= 1
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self.mat) == (other.rows, other.cols, other.mat)

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, {self.mat!r})"