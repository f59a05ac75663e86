"""Matrix products and powers over arbitrary semirings."""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Callable, Optional, Sequence

from . import semiring as _semiring
from .errors import DimensionMismatchError, InvalidExponentError
from .grid import new_grid
from .matrix import Matrix

LOGGER = logging.getLogger(__name__)

Product = Callable[[Matrix, Matrix], Matrix]

__all__ = [
    "multiply_general",
    "multiply",
    "multiply_inner",
    "power_general",
    "power",
]


def _check_aligned(left: Matrix, right: Matrix, operation: str) -> None:
    if left.columns != right.rows:
        raise DimensionMismatchError(operation, left.dim(), right.dim())


def multiply_general(
    left: Matrix,
    right: Matrix,
    combine: Callable[[Any, Any], Any],
    reduce: Callable[[Any, Any], Any],
    identity: Any,
) -> Matrix:
    """Textbook product with pluggable ``combine``/``reduce`` operations.

    Cell ``(i, j)`` of the result is the left fold, ``k`` ascending, of
    ``combine(left[i, k], right[k, j])`` into an accumulator seeded with
    ``identity``.  Neither operand is modified.
    """

    _check_aligned(left, right, "multiply")
    return _fold_product(left, right, _semiring.Semiring(combine, reduce, identity))


def _fold_product(left: Matrix, right: Matrix, structure: _semiring.Semiring) -> Matrix:
    rows, inner = left.dim()
    cols = right.columns
    LOGGER.debug("Multiplying %dx%d by %dx%d", rows, inner, inner, cols)
    right_columns = [right.column(j) for j in range(cols)]
    out = new_grid(rows, cols)
    for i in range(rows):
        left_row = left.row(i)
        for j, right_column in enumerate(right_columns):
            out.set(i, j, structure.fold(zip(left_row, right_column)))
    return Matrix._wrap(out)


def multiply(left: Matrix, right: Matrix, semiring: Optional[_semiring.Semiring] = None) -> Matrix:
    """Multiply under ``semiring``, or the binding registered for the element type."""

    _check_aligned(left, right, "multiply")
    if semiring is None:
        semiring = _semiring.resolve(left, right)
    return _fold_product(left, right, semiring)


def multiply_inner(
    left: Matrix,
    right: Matrix,
    inner: Callable[[Sequence[Any], Sequence[Any]], Any],
) -> Matrix:
    """Product whose ``(i, j)`` cell is ``inner(left.row(i), right.column(j))``."""

    _check_aligned(left, right, "multiply_inner")
    rows, cols = left.rows, right.columns
    right_columns = [right.column(j) for j in range(cols)]
    out = new_grid(rows, cols)
    for i in range(rows):
        left_row = left.row(i)
        for j, right_column in enumerate(right_columns):
            out.set(i, j, inner(left_row, right_column))
    return Matrix._wrap(out)


def _check_exponent(exponent: Any) -> int:
    if isinstance(exponent, bool) or not isinstance(exponent, Integral):
        raise InvalidExponentError(f"exponent must be an integer, got {exponent!r}")
    if exponent < 1:
        raise InvalidExponentError(f"exponent must be >= 1, got {exponent}")
    return int(exponent)


def power_general(matrix: Matrix, exponent: int, product: Product) -> Matrix:
    """Raise a square ``matrix`` to ``exponent`` using O(log exponent) calls to ``product``.

    ``exponent == 1`` returns ``matrix`` itself rather than a copy.
    """

    if not matrix.is_square():
        raise DimensionMismatchError("power", matrix.dim())
    exponent = _check_exponent(exponent)
    return _power(matrix, exponent, product)


def _power(matrix: Matrix, exponent: int, product: Product) -> Matrix:
    if exponent == 1:
        return matrix
    if exponent % 2 == 1:
        return product(matrix, _power(matrix, exponent - 1, product))
    half = _power(matrix, exponent // 2, product)
    return product(half, half)


def power(matrix: Matrix, exponent: int, semiring: Optional[_semiring.Semiring] = None) -> Matrix:
    """Raise ``matrix`` to ``exponent`` under ``semiring`` or the registered binding.

    The semiring is resolved once and shared by every intermediate product.
    """

    if not matrix.is_square():
        raise DimensionMismatchError("power", matrix.dim())
    exponent = _check_exponent(exponent)
    if exponent == 1:
        return matrix
    if semiring is None:
        semiring = _semiring.resolve(matrix)
    LOGGER.debug("Raising %dx%d matrix to power %d under %s", matrix.rows, matrix.columns, exponent, semiring.name)

    def product(left: Matrix, right: Matrix) -> Matrix:
        _check_aligned(left, right, "multiply")
        return _fold_product(left, right, semiring)

    return _power(matrix, exponent, product)
