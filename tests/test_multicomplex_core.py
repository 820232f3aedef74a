"""Tests for the MultiComplex value type."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from mcxkit.multicomplex import MultiComplex, ZeroDivisorError


def test_construction_requires_power_of_two():
    """Tests that a non power-of-two coefficient count is rejected."""
    with pytest.raises(ValueError):
        MultiComplex([1.0, 2.0, 3.0])


def test_values_are_immutable():
    """Tests that the coefficient array cannot be modified in place."""
    z = MultiComplex([1.0, 2.0])
    with pytest.raises(ValueError):
        z.coef[0] = 5.0


def test_constructor_copies_input():
    """Tests that later changes to the source array do not leak in."""
    src = np.array([1.0, 2.0])
    z = MultiComplex(src)
    src[0] = 9.0
    assert z.real == 1.0


def test_order_and_real():
    """Tests the basic accessors."""
    z = MultiComplex([3.0, 0.0, 1.0, 0.0])
    assert z.order == 2
    assert z.real == 3.0
    assert MultiComplex([4.0]).order == 0


def test_addition_promotes_to_larger_order():
    """Tests that mixed-order addition zero-pads the smaller operand."""
    z = MultiComplex([1.0, 2.0]) + MultiComplex([1.0, 1.0, 1.0, 1.0])
    assert_allclose(z.coef, [2.0, 3.0, 1.0, 1.0])
    assert (1.0 - MultiComplex([1.0, 2.0])).coef.tolist() == [0.0, -2.0]
    assert (MultiComplex([1.0, 2.0]) - 1).coef.tolist() == [0.0, 2.0]


def test_multiplication_combines_units():
    """Tests that (1 + 2 i1) * i2 = i2 + 2 i1 i2 and i2 * i2 = -1."""
    z = MultiComplex([1.0, 2.0])
    i2 = MultiComplex.unit(1)
    assert (z * i2).coef.tolist() == [0.0, 0.0, 1.0, 2.0]
    assert (i2 * i2) == -1.0


def test_order_one_matches_complex_arithmetic():
    """Tests that order-1 values behave like Python complex numbers."""
    a, b = complex(1.5, -0.5), complex(-0.25, 2.0)
    za, zb = MultiComplex.from_complex(a), MultiComplex.from_complex(b)
    assert complex(za * zb) == pytest.approx(a * b)
    assert complex(za / zb) == pytest.approx(a / b)
    assert complex(za + b) == pytest.approx(a + b)
    assert (za * 1j).to_complex() == pytest.approx(a * 1j)


def test_scalar_and_numpy_operands():
    """Tests that floats and numpy scalars combine on either side."""
    z = MultiComplex([1.0, 2.0])
    assert (2 * z).coef.tolist() == [2.0, 4.0]
    assert (np.float64(2.0) * z).coef.tolist() == [2.0, 4.0]
    assert (z / 2).coef.tolist() == [0.5, 1.0]
    assert (z * np.float64(0.5)).coef.tolist() == [0.5, 1.0]


def test_reciprocal_and_division():
    """Tests that z * (1 / z) == 1 for an invertible value."""
    z = MultiComplex([2.0, 0.5, -0.25, 0.125])
    assert (z * (1.0 / z)).isclose(1.0, atol=1e-15)
    assert (z / z).isclose(1.0, atol=1e-15)


def test_zero_divisor_division_raises():
    """Tests that dividing by the zero divisor 1 + i1 i2 raises."""
    zd = MultiComplex([1.0, 0.0, 0.0, 1.0])
    assert (zd * MultiComplex([1.0, 0.0, 0.0, -1.0])) == 0.0
    with pytest.raises(ZeroDivisorError):
        MultiComplex([1.0, 1.0]) / zd
    with pytest.raises(ZeroDivisionError):
        MultiComplex([1.0, 1.0]) / 0.0


def test_integer_powers():
    """Tests positive, zero and negative integer powers."""
    z = MultiComplex([1.5, 0.5])
    w = complex(1.5, 0.5)
    assert complex(z**5) == pytest.approx(w**5)
    assert complex(z**0) == 1.0
    assert complex(z**-2) == pytest.approx(w**-2)
    assert complex(z**2.0) == pytest.approx(w**2)


def test_real_power_and_rpow():
    """Tests non-integer exponents via exp(w log z)."""
    z = MultiComplex([4.0, 0.0])
    assert complex(z**0.5) == pytest.approx(2.0)
    assert complex(2.0 ** MultiComplex([3.0])) == pytest.approx(8.0)


def test_equality_and_hash_agree_across_orders():
    """Tests that a real embedded at a higher order equals the plain real."""
    z = MultiComplex([2.5, 0.0, 0.0, 0.0])
    assert z == 2.5
    assert z == MultiComplex([2.5])
    assert hash(z) == hash(2.5) == hash(MultiComplex([2.5]))
    assert len({z, MultiComplex([2.5, 0.0]), 2.5}) == 1
    assert MultiComplex([1.0, 1e-20]) != 1.0


def test_equality_and_hash_agree_with_complex():
    """Tests that an order-1 value hashes like the equal Python complex."""
    z = MultiComplex([1.0, 2.0])
    assert z == 1 + 2j
    assert hash(z) == hash(1 + 2j)
    assert hash(MultiComplex([1.0, 2.0, 0.0, 0.0])) == hash(1 + 2j)
    assert len({z, 1 + 2j, MultiComplex.from_complex(1 + 2j).embed(3)}) == 1
    lookup = {1 + 2j: "found"}
    assert lookup[z] == "found"


def test_isclose_tolerances():
    """Tests approximate equality."""
    z = MultiComplex([1.0, 2.0])
    assert z.isclose(MultiComplex([1.0 + 1e-14, 2.0]))
    assert not z.isclose(MultiComplex([1.1, 2.0]))
    with pytest.raises(TypeError):
        z.isclose("1")


def test_unsupported_operand_types():
    """Tests that non-numeric operands give TypeError."""
    z = MultiComplex([1.0, 2.0])
    with pytest.raises(TypeError):
        z + "a"
    with pytest.raises(TypeError):
        MultiComplex.coerce(object())
    assert (z == "a") is False


def test_embed_and_to_complex():
    """Tests embedding into a larger algebra and conversion to complex."""
    z = MultiComplex([1.0, 2.0]).embed(2)
    assert z.coef.tolist() == [1.0, 2.0, 0.0, 0.0]
    assert z.to_complex() == complex(1.0, 2.0)
    with pytest.raises(ValueError):
        z.embed(0)
    with pytest.raises(ValueError):
        MultiComplex([1.0, 0.0, 1.0, 0.0]).to_complex()


def test_unit_constructor():
    """Tests MultiComplex.unit."""
    assert MultiComplex.unit(2).coef.tolist() == [0, 0, 0, 0, 1, 0, 0, 0]
    assert MultiComplex.unit(0, order=2).coef.tolist() == [0, 1, 0, 0]
    with pytest.raises(ValueError):
        MultiComplex.unit(2, order=2)


def test_repr_round_trips():
    """Tests that repr shows the coefficients."""
    assert repr(MultiComplex([1.0, -2.0])) == "MultiComplex([1.0, -2.0])"
