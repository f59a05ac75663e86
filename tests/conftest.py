from __future__ import annotations

from random import Random
from typing import Callable

import pytest

from gridmatrix import Matrix


@pytest.fixture()
def shear() -> Matrix:
    """Upper unitriangular matrix whose powers are ``[[1, e], [0, 1]]``."""

    return Matrix([[1, 1], [0, 1]])


@pytest.fixture()
def fibonacci() -> Matrix:
    return Matrix([[1, 1], [1, 0]])


@pytest.fixture()
def random_int_matrix() -> Callable[..., Matrix]:
    def build(rows: int, cols: int, *, seed: int, low: int = -5, high: int = 5) -> Matrix:
        rng = Random(seed)
        return Matrix([[rng.randint(low, high) for _ in range(cols)] for _ in range(rows)])

    return build
