"""Default algebraic structures used by matrix multiplication.

A :class:`Semiring` bundles the three pieces the textbook product needs:

``combine``
    Plays the role of multiplication, applied to ``(A[i][k], B[k][j])``.
``reduce``
    Plays the role of addition and folds the combined values left to right.
``identity``
    The starting accumulator; it must be an identity element of ``reduce``.

Bindings are kept in a registry keyed by element type.  Multiplication and
exponentiation consult it only when the caller does not pass an explicit
semiring, so ``a * b`` works for numbers and booleans while tropical and other
user-defined structures stay one keyword argument away.
"""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Iterable, Optional, Set

import numpy as np

from .errors import SemiringLookupError

LOGGER = logging.getLogger(__name__)

__all__ = [
    "Semiring",
    "ARITHMETIC",
    "BOOLEAN",
    "MIN_PLUS",
    "MAX_PLUS",
    "MAX_MIN",
    "register",
    "unregister",
    "lookup",
    "resolve",
    "registered_types",
]


@dataclass(frozen=True)
class Semiring:
    """A ``(combine, reduce, identity)`` triple.

    ``reduce`` must be associative with ``identity`` as its identity element.
    This cannot be checked mechanically and is left to the caller.
    """

    combine: Callable[[Any, Any], Any]
    reduce: Callable[[Any, Any], Any]
    identity: Any
    name: str = "custom"

    def fold(self, pairs: Iterable[tuple]) -> Any:
        """Left-fold ``combine(x, y)`` over ``pairs`` starting at ``identity``."""

        accum = self.identity
        for x, y in pairs:
            accum = self.reduce(accum, self.combine(x, y))
        return accum


def _logical_and(x: Any, y: Any) -> bool:
    return bool(x and y)


def _logical_or(x: Any, y: Any) -> bool:
    return bool(x or y)


ARITHMETIC = Semiring(operator.mul, operator.add, 0, name="arithmetic")
BOOLEAN = Semiring(_logical_and, _logical_or, False, name="boolean")
MIN_PLUS = Semiring(operator.add, min, math.inf, name="min-plus")
MAX_PLUS = Semiring(operator.add, max, -math.inf, name="max-plus")
MAX_MIN = Semiring(min, max, -math.inf, name="max-min")

_REGISTRY: Dict[type, Semiring] = {}


def register(element_type: type, semiring: Semiring) -> None:
    """Bind ``semiring`` as the default structure for ``element_type``.

    Re-registering a type replaces its previous binding.
    """

    if not isinstance(element_type, type):
        raise TypeError(f"element_type must be a type, got {element_type!r}")
    previous = _REGISTRY.get(element_type)
    _REGISTRY[element_type] = semiring
    if previous is not None and previous is not semiring:
        LOGGER.debug(
            "Replaced %s binding for %s with %s",
            previous.name,
            element_type.__name__,
            semiring.name,
        )


def unregister(element_type: type) -> Optional[Semiring]:
    return _REGISTRY.pop(element_type, None)


def registered_types() -> tuple:
    return tuple(_REGISTRY)


def lookup(element_type: type) -> Optional[Semiring]:
    """Return the binding for ``element_type``, walking its MRO.

    The exact type is checked first, so ``bool`` is never served the binding
    registered for its base class ``int``.
    """

    for klass in element_type.__mro__:
        found = _REGISTRY.get(klass)
        if found is not None:
            return found
    return None


def _check_decimal_mix(types: Set[type]) -> None:
    if not any(issubclass(t, Decimal) for t in types):
        return
    others = sorted(t.__name__ for t in types if not issubclass(t, (Decimal, int)))
    if others:
        raise SemiringLookupError(
            f"Decimal elements cannot be combined with {others}; convert them or pass a semiring explicitly."
        )


def resolve(*matrices: Any) -> Semiring:
    """Find the one binding shared by every element of ``matrices``.

    Mixed element types are accepted as long as all of them resolve to the
    same semiring (``int`` and ``float`` both map to :data:`ARITHMETIC`).
    :class:`~decimal.Decimal` is the exception: it only mixes with ``int``,
    because ``Decimal`` arithmetic with ``float`` or ``Fraction`` raises.
    """

    types: Set[type] = set()
    for matrix in matrices:
        types.update(type(value) for value in matrix)
    if not types:
        raise SemiringLookupError(
            "Cannot infer a semiring for matrices without elements; pass one explicitly."
        )
    bindings = {}
    for element_type in types:
        semiring = lookup(element_type)
        if semiring is None:
            raise SemiringLookupError(
                f"No semiring registered for element type {element_type.__name__!r}"
            )
        bindings[id(semiring)] = semiring
    _check_decimal_mix(types)
    if len(bindings) > 1:
        names = sorted(t.__name__ for t in types)
        raise SemiringLookupError(
            f"Element types {names} resolve to different semirings; pass one explicitly."
        )
    return next(iter(bindings.values()))


for _type in (int, float, complex, Fraction, Decimal, np.integer, np.floating, np.complexfloating):
    register(_type, ARITHMETIC)
for _type in (bool, np.bool_):
    register(_type, BOOLEAN)
del _type
