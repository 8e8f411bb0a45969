import random

import pytest

from algokit.matrix import MAX_MATRIX_NUMBER, Matrix, chain_multiply, greedy_chain_multiply


def test_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_rejects_empty():
    with pytest.raises(ValueError):
        Matrix([])


def test_random_shape_and_range():
    m = Matrix.random(3, 4, random.Random(1))
    assert m.shape == (3, 4)
    assert all(0 <= v < MAX_MATRIX_NUMBER for row in m.rows for v in row)


def test_random_rejects_bad_shape():
    with pytest.raises(ValueError):
        Matrix.random(0, 2)


def test_add_then_subtract_round_trip():
    rng = random.Random(5)
    a = Matrix.random(3, 3, rng)
    b = Matrix.random(3, 3, rng)
    assert (a + b) - b == a


def test_subtract_self_is_zero():
    a = Matrix([[1, 2], [3, 4]])
    assert a - a == Matrix([[0, 0], [0, 0]])


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) + Matrix([[1], [2]])


def test_scalar_multiplication_matches_addition():
    a = Matrix([[1, 2], [3, 4]])
    assert a * 2 == a + a
    assert 3 * a == a + a + a


def test_identity_product():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    identity = Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert a * identity == a


def test_product_shape():
    p = Matrix.random(2, 2, random.Random(2))
    q = Matrix.random(2, 1, random.Random(3))
    assert (p * q).shape == (2, 1)


def test_product_dimension_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) * Matrix([[1, 2]])


def test_product_is_associative():
    rng = random.Random(9)
    a, b, c = Matrix.random(2, 3, rng), Matrix.random(3, 4, rng), Matrix.random(4, 2, rng)
    assert (a * b) * c == a * (b * c)


def test_str_format():
    assert str(Matrix([[1, 0]])) == "[   1 0  ]"


def test_str_has_one_line_per_row():
    assert len(str(Matrix.random(4, 2, random.Random(0))).splitlines()) == 4


def test_greedy_equals_left_to_right():
    rng = random.Random(4)
    chain = [
        Matrix.random(10, 100, rng),
        Matrix.random(100, 20, rng),
        Matrix.random(20, 50, rng),
        Matrix.random(50, 20, rng),
    ]
    assert greedy_chain_multiply(chain) == chain_multiply(chain)
    assert chain_multiply(chain).shape == (10, 20)


def test_single_matrix_chain():
    a = Matrix([[7]])
    assert chain_multiply([a]) == a
    assert greedy_chain_multiply([a]) == a


def test_incompatible_chain_raises():
    with pytest.raises(ValueError):
        greedy_chain_multiply([Matrix([[1, 2]]), Matrix([[1, 2]])])
    with pytest.raises(ValueError):
        chain_multiply([])