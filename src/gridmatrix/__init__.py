"""Generic matrices with multiplication and powers over pluggable semirings."""

from importlib import metadata

from .errors import (
    DimensionMismatchError,
    InvalidExponentError,
    MatrixError,
    OutOfBoundsError,
    RaggedRowsError,
    SemiringLookupError,
)
from .matrix import Matrix
from .products import multiply, multiply_general, multiply_inner, power, power_general
from .semiring import ARITHMETIC, BOOLEAN, MAX_MIN, MAX_PLUS, MIN_PLUS, Semiring

__all__ = [
    "Matrix",
    "Semiring",
    "ARITHMETIC",
    "BOOLEAN",
    "MIN_PLUS",
    "MAX_PLUS",
    "MAX_MIN",
    "multiply",
    "multiply_general",
    "multiply_inner",
    "power",
    "power_general",
    "MatrixError",
    "DimensionMismatchError",
    "OutOfBoundsError",
    "RaggedRowsError",
    "SemiringLookupError",
    "InvalidExponentError",
    "__version__",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("gridmatrix")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
