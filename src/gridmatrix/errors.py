"""Exception hierarchy shared by every matrix operation."""

from __future__ import annotations

from typing import Tuple

Shape = Tuple[int, int]

__all__ = [
    "MatrixError",
    "DimensionMismatchError",
    "OutOfBoundsError",
    "RaggedRowsError",
    "SemiringLookupError",
    "InvalidExponentError",
]


class MatrixError(Exception):
    """Base class for all errors raised by :mod:`gridmatrix`."""


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operand shapes do not satisfy an operation's precondition."""

    def __init__(self, operation: str, left: Shape, right: Shape | None = None) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        if right is None:
            message = f"Invalid dimensions for {operation}: {left[0]}x{left[1]}"
        else:
            message = (
                f"Invalid dimensions for {operation}: "
                f"{left[0]}x{left[1]} and {right[0]}x{right[1]}"
            )
        super().__init__(message)


class OutOfBoundsError(MatrixError, IndexError):
    """Raised when a coordinate or region falls outside a matrix."""

    def __init__(self, index: Tuple[int, ...], shape: Shape) -> None:
        self.index = index
        self.shape = shape
        super().__init__(f"Index {index} is out of bounds for a {shape[0]}x{shape[1]} matrix")


class RaggedRowsError(MatrixError, ValueError):
    """Raised when rows of differing length are used to build a matrix."""


class SemiringLookupError(MatrixError, TypeError):
    """Raised when no single semiring binding covers the operands' element types."""


class InvalidExponentError(MatrixError, ValueError):
    """Raised for exponents outside the supported range (integers >= 1)."""
