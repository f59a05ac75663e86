"""Row-major backing store owned by each :class:`~gridmatrix.matrix.Matrix`."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence

from .errors import OutOfBoundsError, RaggedRowsError

__all__ = ["Grid", "new_grid", "grid_from_rows"]


class Grid:
    """Rectangular list-of-lists storage with bounds-checked access.

    Negative indices are rejected rather than wrapped around.
    """

    __slots__ = ("_rows", "_row_count", "_col_count")

    def __init__(self, rows: List[List[Any]], row_count: int, col_count: int) -> None:
        self._rows = rows
        self._row_count = row_count
        self._col_count = col_count

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def col_count(self) -> int:
        return self._col_count

    def _check(self, r: int, c: int) -> None:
        if not (0 <= r < self._row_count and 0 <= c < self._col_count):
            raise OutOfBoundsError((r, c), (self._row_count, self._col_count))

    def get(self, r: int, c: int) -> Any:
        self._check(r, c)
        return self._rows[r][c]

    def set(self, r: int, c: int, value: Any) -> None:
        self._check(r, c)
        self._rows[r][c] = value

    def row(self, r: int) -> List[Any]:
        if not 0 <= r < self._row_count:
            raise OutOfBoundsError((r,), (self._row_count, self._col_count))
        return self._rows[r]

    def replace_row(self, r: int, values: Sequence[Any]) -> None:
        if not 0 <= r < self._row_count:
            raise OutOfBoundsError((r,), (self._row_count, self._col_count))
        self._rows[r] = list(values)

    def copy(self) -> "Grid":
        return Grid([list(row) for row in self._rows], self._row_count, self._col_count)


def new_grid(
    rows: int, cols: int, fill: Any = None, *, factory: Optional[Callable[[], Any]] = None
) -> Grid:
    """Allocate a ``rows`` x ``cols`` grid.

    When ``factory`` is given it is called once per cell, so mutable values are
    never shared between cells; otherwise every cell holds ``fill``.
    """

    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must be non-negative")
    if factory is None:
        return Grid([[fill for _ in range(cols)] for _ in range(rows)], rows, cols)
    return Grid([[factory() for _ in range(cols)] for _ in range(rows)], rows, cols)


def grid_from_rows(rows: Iterable[Iterable[Any]]) -> Grid:
    """Copy ``rows`` into a new grid, rejecting jagged input."""

    copied = [list(row) for row in rows]
    if not copied:
        return Grid([], 0, 0)
    width = len(copied[0])
    for idx, row in enumerate(copied):
        if len(row) != width:
            raise RaggedRowsError(
                f"row {idx} has {len(row)} elements, expected {width}"
            )
    return Grid(copied, len(copied), width)
