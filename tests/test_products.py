"""Tests for generic matrix multiplication."""

from __future__ import annotations

import numpy as np
import pytest

from gridmatrix import (
    ARITHMETIC,
    BOOLEAN,
    MAX_MIN,
    MIN_PLUS,
    DimensionMismatchError,
    Matrix,
    SemiringLookupError,
    multiply,
    multiply_general,
    multiply_inner,
)


def test_one_by_one_product() -> None:
    assert (Matrix([[6]]) * Matrix([[7]])).tolist() == [[42]]


def test_product_shape_and_values() -> None:
    left = Matrix([[1, 2, 3], [4, 5, 6]])
    right = Matrix([[7, 8], [9, 10], [11, 12]])
    product = left * right
    assert product.dim() == (2, 2)
    assert product.tolist() == [[58, 64], [139, 154]]


def test_matmul_operator_matches_multiply() -> None:
    left = Matrix([[1, 2], [3, 4]])
    assert left @ left == multiply(left, left) == left.multiply(left)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_matches_numpy(random_int_matrix, seed) -> None:
    left = random_int_matrix(4, 3, seed=seed)
    right = random_int_matrix(3, 5, seed=seed + 100)
    expected = (np.array(left.tolist()) @ np.array(right.tolist())).tolist()
    assert (left * right).tolist() == expected


def test_numpy_scalars_use_arithmetic_binding() -> None:
    left = Matrix([[np.int64(2), np.int64(3)]])
    right = Matrix([[np.int64(4)], [np.int64(5)]])
    assert (left * right).tolist() == [[23]]


def test_boolean_binding() -> None:
    left = Matrix([[True, False], [False, False]])
    right = Matrix([[False, True], [True, False]])
    assert (left * right).tolist() == [[False, True], [False, False]]


def test_explicit_semiring_takes_precedence() -> None:
    left = Matrix([[True, True]])
    right = Matrix([[True], [True]])
    assert (left * right).tolist() == [[True]]
    assert multiply(left, right, ARITHMETIC).tolist() == [[2]]


def test_min_plus_relaxes_paths() -> None:
    inf = float("inf")
    weights = Matrix([[0, 4, inf], [inf, 0, 1], [2, inf, 0]])
    two_hops = multiply(weights, weights, MIN_PLUS)
    assert two_hops.tolist() == [[0, 4, 5], [3, 0, 1], [2, 6, 0]]


def test_max_min_bottleneck() -> None:
    capacity = Matrix([[0, 5], [3, 0]])
    assert multiply(capacity, capacity, MAX_MIN).tolist() == [[3, 0], [0, 3]]


def test_fold_order_for_non_commutative_operations() -> None:
    left = Matrix([["a", "b"]])
    right = Matrix([["c"], ["d"]])
    concat = multiply_general(left, right, lambda x, y: x + y, lambda acc, v: acc + v, "")
    assert concat.tolist() == [["acbd"]]
    traced = multiply_general(left, right, lambda x, y: (x, y), lambda acc, v: acc + (v,), ())
    assert traced[0, 0] == (("a", "c"), ("b", "d"))


def test_identity_seeds_every_cell() -> None:
    left = Matrix([[], []])
    right = Matrix.filled(0, 3, 0)
    product = multiply(left, right, ARITHMETIC)
    assert product.tolist() == [[0, 0, 0], [0, 0, 0]]


def test_empty_operands_need_explicit_semiring() -> None:
    with pytest.raises(SemiringLookupError):
        Matrix([[], []]) * Matrix.filled(0, 3, 0)


def test_dimension_mismatch_leaves_inputs_unchanged() -> None:
    left = Matrix([[1, 2, 3], [4, 5, 6]])
    right = Matrix([[1, 2], [3, 4]])
    snapshot = (left.copy(), right.copy())
    with pytest.raises(DimensionMismatchError) as excinfo:
        left * right
    assert excinfo.value.left == (2, 3)
    assert excinfo.value.right == (2, 2)
    assert isinstance(excinfo.value, ValueError)
    assert (left, right) == snapshot


def test_dimension_check_precedes_semiring_lookup() -> None:
    with pytest.raises(DimensionMismatchError):
        Matrix([["a", "b"]]) * Matrix([["c"]])


def test_result_does_not_alias_operands() -> None:
    left = Matrix([[1, 0], [0, 1]])
    right = Matrix([[5, 6], [7, 8]])
    product = left * right
    product[0, 0] = 100
    assert right[0, 0] == 5
    assert left[0, 0] == 1


def test_associativity(random_int_matrix) -> None:
    a = random_int_matrix(3, 3, seed=10)
    b = random_int_matrix(3, 3, seed=11)
    c = random_int_matrix(3, 3, seed=12)
    assert (a * b) * c == a * (b * c)


def test_associativity_min_plus(random_int_matrix) -> None:
    a = random_int_matrix(3, 3, seed=20, low=0, high=9)
    b = random_int_matrix(3, 3, seed=21, low=0, high=9)
    c = random_int_matrix(3, 3, seed=22, low=0, high=9)
    left = multiply(multiply(a, b, MIN_PLUS), c, MIN_PLUS)
    right = multiply(a, multiply(b, c, MIN_PLUS), MIN_PLUS)
    assert left == right


def test_multiply_with_boolean_semiring_on_ints() -> None:
    adjacency = Matrix([[0, 1], [0, 0]])
    assert multiply(adjacency, adjacency, BOOLEAN).tolist() == [[False, False], [False, False]]


def test_inner_product_form(random_int_matrix) -> None:
    left = random_int_matrix(2, 4, seed=5)
    right = random_int_matrix(4, 3, seed=6)

    def dot(row, column):
        return sum(x * y for x, y in zip(row, column))

    assert multiply_inner(left, right, dot) == left * right


def test_inner_product_form_checks_dimensions() -> None:
    with pytest.raises(DimensionMismatchError):
        multiply_inner(Matrix([[1, 2]]), Matrix([[1, 2]]), lambda r, c: 0)


def test_cells_match_semiring_fold(random_int_matrix) -> None:
    left = random_int_matrix(3, 4, seed=30)
    right = random_int_matrix(4, 2, seed=31)
    for structure in (ARITHMETIC, MIN_PLUS, MAX_MIN):
        product = multiply(left, right, structure)
        for i, j in product.all_indices():
            assert product[i, j] == structure.fold(zip(left.row(i), right.column(j)))
