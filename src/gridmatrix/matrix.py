"""Generic two-dimensional matrix container."""

from __future__ import annotations

from copy import copy
from functools import partial
from numbers import Integral
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import DimensionMismatchError, OutOfBoundsError
from .grid import Grid, grid_from_rows, new_grid

Index = Tuple[int, int]

__all__ = ["Matrix", "Index"]


class Matrix:
    """A rectangular matrix of arbitrary elements.

    Each instance owns its backing :class:`~gridmatrix.grid.Grid`.  Operations
    that produce a matrix (``map``, ``entrywise``, ``transpose``,
    ``submatrix``, products and powers) always allocate a new one; only
    ``set``, ``set_row`` and item assignment mutate in place.

    >>> m = Matrix([[1, 2], [3, 4]])
    >>> m.dim()
    (2, 2)
    >>> m[1, 0]
    3
    """

    __slots__ = ("_grid",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[Any]] = ()) -> None:
        self._grid = grid_from_rows(rows)

    @classmethod
    def _wrap(cls, grid: Grid) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._grid = grid
        return matrix

    # construction -----------------------------------------------------

    @classmethod
    def filled(
        cls,
        rows: int,
        cols: int,
        value: Any = None,
        *,
        factory: Optional[Callable[[], Any]] = None,
    ) -> "Matrix":
        """Return a ``rows`` x ``cols`` matrix with every cell set to ``value``.

        Each cell receives its own shallow copy of ``value``, so mutating one
        cell never changes another.  ``factory`` is called once per cell
        instead, e.g. ``Matrix.filled(2, 2, factory=list)``.
        """

        if factory is not None and value is not None:
            raise ValueError("pass either value or factory, not both")
        if factory is None:
            factory = partial(copy, value)
        return cls._wrap(new_grid(rows, cols, factory=factory))

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Matrix":
        """Return a ``rows`` x ``cols`` matrix whose cells are all ``None``."""

        return cls._wrap(new_grid(rows, cols))

    @classmethod
    def unflatten(cls, columns: int, values: Sequence[Any]) -> "Matrix":
        """Build a matrix from row-major ``values`` split into rows of ``columns``."""

        values = list(values)
        if columns <= 0:
            raise ValueError("columns must be a positive integer")
        if len(values) % columns:
            raise ValueError(
                f"{len(values)} values cannot be split into rows of {columns}"
            )
        return cls(values[start : start + columns] for start in range(0, len(values), columns))

    @classmethod
    def identity(cls, n: int, one: Any = 1, zero: Any = 0) -> "Matrix":
        """Return an ``n`` x ``n`` matrix with ``one`` on the diagonal and ``zero`` elsewhere.

        The diagonal and off-diagonal elements are explicit because no
        multiplicative identity can be derived from a semiring binding.
        """

        grid = new_grid(n, n, zero)
        for i in range(n):
            grid.set(i, i, one)
        return cls._wrap(grid)

    # information ------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._grid.row_count

    @property
    def columns(self) -> int:
        return self._grid.col_count

    def dim(self) -> Index:
        return (self._grid.row_count, self._grid.col_count)

    def is_square(self) -> bool:
        return self._grid.row_count == self._grid.col_count

    # element access ---------------------------------------------------

    def get(self, r: int, c: int) -> Any:
        return self._grid.get(r, c)

    def set(self, r: int, c: int, value: Any) -> None:
        self._grid.set(r, c, value)

    @staticmethod
    def _cell_key(key: Any) -> Index:
        if (
            isinstance(key, tuple)
            and len(key) == 2
            and all(isinstance(part, Integral) and not isinstance(part, bool) for part in key)
        ):
            return key
        raise TypeError(f"Matrix indices must be an int row or an (int, int) pair, not {key!r}")

    def __getitem__(self, key):
        if isinstance(key, Integral) and not isinstance(key, bool):
            return self.row(key)
        r, c = self._cell_key(key)
        return self._grid.get(r, c)

    def __setitem__(self, key: Index, value: Any) -> None:
        r, c = self._cell_key(key)
        self._grid.set(r, c, value)

    def row(self, r: int) -> Tuple[Any, ...]:
        """Return row ``r`` as a read-only tuple; writes never reach the matrix."""

        return tuple(self._grid.row(r))

    def set_row(self, r: int, values: Sequence[Any]) -> None:
        values = list(values)
        if len(values) != self.columns:
            raise DimensionMismatchError("Matrix.set_row", self.dim(), (1, len(values)))
        self._grid.replace_row(r, values)

    def column(self, c: int) -> List[Any]:
        if not 0 <= c < self.columns:
            raise OutOfBoundsError((c,), self.dim())
        return [self._grid.get(i, c) for i in range(self.rows)]

    def submatrix(self, top_left: Index, bottom_right: Index) -> "Matrix":
        """Copy the inclusive rectangle spanned by ``top_left`` and ``bottom_right``."""

        for corner in (top_left, bottom_right):
            if not self.valid(corner):
                raise OutOfBoundsError(tuple(corner), self.dim())
        (r0, c0), (r1, c1) = top_left, bottom_right
        if r1 < r0 or c1 < c0:
            raise ValueError(f"bottom_right {bottom_right} lies above or left of top_left {top_left}")
        return Matrix(
            [self._grid.get(i, j) for j in range(c0, c1 + 1)] for i in range(r0, r1 + 1)
        )

    # coordinates ------------------------------------------------------

    def valid(self, point: Index) -> bool:
        r, c = point
        return 0 <= r < self.rows and 0 <= c < self.columns

    def all_indices(self) -> List[Index]:
        return [(i, j) for i in range(self.rows) for j in range(self.columns)]

    def neighbours4(self, point: Index) -> Iterator[Index]:
        """Valid neighbours of ``point`` in a 4-connected grid."""

        r, c = point
        candidates = ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))
        return (p for p in candidates if self.valid(p))

    def neighbours8(self, point: Index) -> Iterator[Index]:
        """Valid neighbours of ``point`` in an 8-connected grid."""

        r, c = point
        candidates = [(i, j) for i in range(r - 1, r + 2) for j in range(c - 1, c + 2)]
        return (p for p in candidates if p != (r, c) and self.valid(p))

    def find_index(self, predicate: Callable[[Any], bool]) -> Optional[Index]:
        """Return the first coordinate, in row-major order, whose value satisfies ``predicate``."""

        for i in range(self.rows):
            for j, value in enumerate(self._grid.row(i)):
                if predicate(value):
                    return (i, j)
        return None

    # collection protocol ----------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.rows):
            yield from self._grid.row(i)

    def __len__(self) -> int:
        return self.rows * self.columns

    def flatten(self) -> List[Any]:
        return list(self)

    def tolist(self) -> List[List[Any]]:
        return [list(self._grid.row(i)) for i in range(self.rows)]

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._grid.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dim() == other.dim() and self.tolist() == other.tolist()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"

    def __str__(self) -> str:
        from .text import format_matrix

        return format_matrix(self)

    # entrywise --------------------------------------------------------

    def map(self, func: Callable[[Any], Any]) -> "Matrix":
        rows = [[func(value) for value in self._grid.row(i)] for i in range(self.rows)]
        return Matrix._wrap(Grid(rows, self.rows, self.columns))

    def entrywise(self, func: Callable[[Any, Any], Any], other: "Matrix") -> "Matrix":
        """Combine two equally shaped matrices cell by cell with ``func``."""

        if self.dim() != other.dim():
            raise DimensionMismatchError("Matrix.entrywise", self.dim(), other.dim())
        rows = [
            [func(a, b) for a, b in zip(self._grid.row(i), other._grid.row(i))]
            for i in range(self.rows)
        ]
        return Matrix._wrap(Grid(rows, self.rows, self.columns))

    def transpose(self) -> "Matrix":
        grid = new_grid(self.columns, self.rows)
        for i in range(self.rows):
            for j, value in enumerate(self._grid.row(i)):
                grid.set(j, i, value)
        return Matrix._wrap(grid)

    # products ---------------------------------------------------------

    def multiply(self, other: "Matrix", semiring=None) -> "Matrix":
        from .products import multiply

        return multiply(self, other, semiring)

    def multiply_general(
        self,
        other: "Matrix",
        combine: Callable[[Any, Any], Any],
        reduce: Callable[[Any, Any], Any],
        identity: Any,
    ) -> "Matrix":
        from .products import multiply_general

        return multiply_general(self, other, combine, reduce, identity)

    def power(self, exponent: int, semiring=None) -> "Matrix":
        from .products import power

        return power(self, exponent, semiring)

    def __mul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    __matmul__ = __mul__

    def __pow__(self, exponent: int) -> "Matrix":
        return self.power(exponent)
