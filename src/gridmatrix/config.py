"""Configuration defaults shared by the CLI, tests and library callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .semiring import ARITHMETIC, BOOLEAN, MAX_MIN, MAX_PLUS, MIN_PLUS, Semiring

DEFAULT_FIELD_SIZE = 0
DEFAULT_SEMIRING_NAME = "auto"
DEFAULT_ELEMENT_KIND = "int"

SEMIRING_CHOICES: Dict[str, Semiring] = {
    semiring.name: semiring for semiring in (ARITHMETIC, BOOLEAN, MIN_PLUS, MAX_PLUS, MAX_MIN)
}


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """How a matrix result is displayed.

    Parameters
    ----------
    field_size:
        Minimum width of every cell. ``0`` disables padding.
    title:
        Optional heading printed above the matrix.
    """

    field_size: int = DEFAULT_FIELD_SIZE
    title: str | None = None

    def describe(self) -> str:
        """Return a short human readable description.

        >>> RenderOptions().describe()
        'field_size=unpadded'
        >>> RenderOptions(4, "A^2").describe()
        'field_size=4 title=A^2'
        """

        size = str(self.field_size) if self.field_size > 0 else "unpadded"
        if self.title is None:
            return f"field_size={size}"
        return f"field_size={size} title={self.title}"


def semiring_by_name(name: str) -> Semiring | None:
    """Return the named semiring, or ``None`` for ``"auto"`` (registry lookup)."""

    if name == DEFAULT_SEMIRING_NAME:
        return None
    try:
        return SEMIRING_CHOICES[name]
    except KeyError:
        choices = ", ".join([DEFAULT_SEMIRING_NAME, *SEMIRING_CHOICES])
        raise ValueError(f"Unknown semiring {name!r}; expected one of: {choices}") from None
