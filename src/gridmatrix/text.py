"""Plain-text rendering and parsing of matrices."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from .errors import RaggedRowsError
from .matrix import Matrix

__all__ = ["format_matrix", "parse_matrix", "parse_numeric", "NUMERIC_KINDS"]


def format_matrix(matrix: Matrix, field_size: Optional[int] = None) -> str:
    """Render ``matrix`` one row per line with cells separated by a space.

    >>> print(format_matrix(Matrix([[1, 22], [333, 4]]), field_size=3))
      1  22
    333   4
    """

    def cell(value: Any) -> str:
        text = str(value)
        return text.rjust(field_size) if field_size else text

    return "\n".join(" ".join(cell(value) for value in matrix.row(i)) for i in range(matrix.rows))


def parse_matrix(lines: Iterable[str], parse_char: Callable[[str], Any]) -> Matrix:
    """Build a matrix from a character grid, one element per character.

    Trailing newline characters are stripped and trailing blank lines are
    ignored; every remaining line must have the same length.
    """

    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1]:
        rows.pop()
    if rows:
        width = len(rows[0])
        for idx, line in enumerate(rows):
            if len(line) != width:
                raise RaggedRowsError(f"line {idx} has {len(line)} characters, expected {width}")
    return Matrix([parse_char(ch) for ch in line] for line in rows)


def _parse_bool(token: str) -> bool:
    lowered = token.lower()
    if lowered in {"1", "true", "t"}:
        return True
    if lowered in {"0", "false", "f"}:
        return False
    raise ValueError(f"Cannot interpret {token!r} as a boolean")


NUMERIC_KINDS = {
    "int": int,
    "float": float,
    "bool": _parse_bool,
}


def parse_numeric(text: str, kind: str = "int") -> Matrix:
    """Parse whitespace-separated numbers, one matrix row per non-blank line."""

    try:
        convert = NUMERIC_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown element kind {kind!r}; expected one of {sorted(NUMERIC_KINDS)}") from None
    rows = [[convert(token) for token in line.split()] for line in text.splitlines() if line.strip()]
    return Matrix(rows)
