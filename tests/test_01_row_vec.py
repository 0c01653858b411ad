"""Row vector tests: arithmetic, leaders, normalization and rendering."""
import pytest
from fractions import Fraction
from exactmatrix import Matrix, RowVec, AdditionDimensionError, DimensionMismatchError

# =============================================================================
# Addition
# =============================================================================


def test_add_assign_good():
    rv1 = RowVec.from_ints([1, 2, 3])
    rv2 = RowVec.from_ints([4, 7, 9])
    rv1.add_assign(rv2)
    assert rv1 == RowVec.from_ints([5, 9, 12])


def test_add_assign_bad():
    """A length mismatch raises and leaves the row unchanged."""
    rv1 = RowVec.from_ints([1, 2, 3])
    rv2 = RowVec.from_ints([4, 7, 9, 10])
    with pytest.raises(AdditionDimensionError, match="different sizes: 3 vs 4"):
        rv1.add_assign(rv2)
    assert rv1 == RowVec.from_ints([1, 2, 3])


def test_add_assign_empty():
    rv1 = RowVec.empty()
    rv1.add_assign(RowVec.empty())
    assert rv1 == RowVec.empty()


def test_add_good():
    rv1 = RowVec.from_ints([1, 2, 3])
    rv2 = RowVec.from_ints([4, 7, 9])
    assert rv1.add(rv2) == RowVec.from_ints([5, 9, 12])
    assert rv1 == RowVec.from_ints([1, 2, 3])


def test_add_bad():
    rv1 = RowVec.from_ints([1, 2, 3])
    rv2 = RowVec.from_ints([4, 7, 9, 10])
    with pytest.raises(DimensionMismatchError):
        rv1.add(rv2)


def test_add_error_is_value_error():
    with pytest.raises(ValueError):
        RowVec.from_ints([1]).add(RowVec.empty())


def test_add_empty():
    assert RowVec.empty().add(RowVec.empty()) == RowVec([])


def test_add_operators():
    rv = RowVec.from_ints([1, 2])
    total = rv + RowVec.from_ints([3, 4])
    assert total == RowVec.from_ints([4, 6])
    rv += RowVec([Fraction(1, 2), Fraction(1, 2)])
    assert rv == RowVec([Fraction(3, 2), Fraction(5, 2)])


# =============================================================================
# Scalar multiplication
# =============================================================================


def test_scalar_multiply_assign_good():
    rv = RowVec.from_ints([1, 2, 3])
    rv.scalar_multiply_assign(5)
    assert rv == RowVec.from_ints([5, 10, 15])


def test_scalar_multiply_assign_empty():
    rv = RowVec.empty()
    rv.scalar_multiply_assign(5)
    assert rv == RowVec.empty()


def test_scalar_multiply_good():
    rv = RowVec.from_ints([1, 2, 3])
    assert rv.scalar_multiply(Fraction(1, 3)) == RowVec([Fraction(1, 3), Fraction(2, 3), 1])
    assert rv == RowVec.from_ints([1, 2, 3])


def test_scalar_multiply_empty():
    assert RowVec.empty().scalar_multiply(5) == RowVec.empty()


def test_scalar_multiply_operators():
    rv = RowVec.from_ints([1, -2])
    assert rv * 3 == RowVec.from_ints([3, -6])
    assert 3 * rv == RowVec.from_ints([3, -6])
    rv *= "1/2"
    assert rv == RowVec([Fraction(1, 2), -1])


def test_multiply_by_non_scalar_defers():
    rv = RowVec.from_ints([1, 2])
    m = Matrix.from_ints([[1, 2]])
    assert rv.__mul__(m) is NotImplemented
    assert rv.__mul__(rv) is NotImplemented
    with pytest.raises(TypeError, match="unsupported operand"):
        rv * m
    with pytest.raises(TypeError, match="unsupported operand"):
        rv *= rv
    assert rv == RowVec.from_ints([1, 2])


# =============================================================================
# Normalization
# =============================================================================


def test_normalize_good():
    rv = RowVec.from_ints([7, 5, 9])
    rv.normalize()
    assert rv == RowVec([1, Fraction(5, 7), Fraction(9, 7)])


def test_normalize_leading_zeros():
    rv = RowVec.from_ints([0, 0, 7, 5, 9])
    rv.normalize()
    assert rv == RowVec([0, 0, 1, Fraction(5, 7), Fraction(9, 7)])


def test_normalize_negative_leader():
    rv = RowVec.from_ints([0, -2, 4])
    rv.normalize()
    assert rv == RowVec.from_ints([0, 1, -2])


def test_normalize_leader_is_one():
    rv = RowVec.from_ints([1, 2, 3])
    rv.normalize()
    assert rv == RowVec.from_ints([1, 2, 3])


def test_normalize_all_zeros():
    rv = RowVec.from_ints([0, 0, 0])
    rv.normalize()
    assert rv == RowVec.from_ints([0, 0, 0])


def test_normalize_empty():
    rv = RowVec.empty()
    rv.normalize()
    assert rv == RowVec.empty()


# =============================================================================
# Inspection
# =============================================================================


def test_is_zeros_false():
    assert not RowVec.from_ints([0, 0, 1]).is_zeros()


def test_is_zeros_true():
    assert RowVec.zeros(4).is_zeros()


def test_is_zeros_empty():
    assert RowVec.empty().is_zeros()


@pytest.mark.parametrize("values, expected", [
    ([0, 0, 3, 0], 2),
    ([4, 0, 0], 0),
    ([0, 0, 0, 4], 3),
    ([0, 0, 0], None),
    ([], None),
])
def test_leader_col(values, expected):
    assert RowVec.from_ints(values).leader_col() == expected


# =============================================================================
# Construction and access
# =============================================================================


def test_zeros():
    rv = RowVec.zeros(3)
    assert len(rv) == 3
    assert list(rv) == [Fraction(0)] * 3


def test_zeros_negative_length():
    with pytest.raises(ValueError):
        RowVec.zeros(-1)


def test_from_ints_entries_are_fractions():
    rv = RowVec.from_ints([1, -2])
    assert all(isinstance(v, Fraction) and v.denominator == 1 for v in rv)


def test_from_ints_rejects_non_integers():
    with pytest.raises(TypeError):
        RowVec.from_ints([1, 2.5])


def test_constructor_converts_values():
    rv = RowVec(["3/4", 2, Fraction(-1, 3)])
    assert rv.to_list() == [Fraction(3, 4), Fraction(2), Fraction(-1, 3)]


def test_setitem_converts_value():
    rv = RowVec.zeros(2)
    rv[1] = "-5/10"
    assert rv[1] == Fraction(-1, 2)
    assert isinstance(rv[1], Fraction)


def test_clone_is_independent():
    rv = RowVec.from_ints([1, 2])
    copy = rv.clone()
    copy[0] = 7
    assert rv == RowVec.from_ints([1, 2])


def test_not_equal_to_list():
    assert RowVec.from_ints([1]) != [Fraction(1)]


def test_str():
    rv = RowVec.from_ints([7, 5, 9])
    rv.normalize()
    assert str(rv) == "[ 1 5/7 9/7 ]"
    assert str(RowVec.empty()) == "[ ]"


def test_repr_round_trips():
    rv = RowVec([Fraction(5, 7), -1])
    assert eval(repr(rv), {"RowVec": RowVec}) == rv
