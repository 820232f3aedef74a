"""Tests for the MulticomplexDerivative engine."""

import math

import numpy as np
import pytest

from mcxkit.config import MulticomplexConfig
from mcxkit.multicomplex import exp, sin
from mcxkit.multicomplex_derivative import MulticomplexDerivative


def test_returns_highest_order_by_default():
    """Tests that differentiate() returns only the requested order."""
    d = MulticomplexDerivative(lambda z: z**3, 2.0)
    assert d.differentiate() == pytest.approx(12.0, rel=1e-15)
    assert d.differentiate(order=2) == pytest.approx(12.0, rel=1e-15)
    assert d.differentiate(order=3) == pytest.approx(6.0, rel=1e-15)
    assert isinstance(d.differentiate(order=3), float)


def test_return_all_gives_every_order():
    """Tests return_all=True."""
    x0 = 0.7
    d = MulticomplexDerivative(sin, x0)
    out = d.differentiate(order=4, return_all=True)
    np.testing.assert_allclose(
        out, [math.cos(x0), -math.sin(x0), -math.cos(x0), math.sin(x0)], rtol=1e-14
    )


def test_vector_valued_last_order():
    """Tests that vector outputs return one value per component."""
    d = MulticomplexDerivative(lambda z: [exp(z), z * z], 0.0)
    out = d.differentiate(order=2)
    np.testing.assert_allclose(out, [1.0, 2.0], rtol=1e-14)


def test_forwards_stepsize_and_config():
    """Tests that stepsize and config reach the driver."""
    d = MulticomplexDerivative(exp, 1.0)
    cfg = MulticomplexConfig(exponent_budget=100)
    a = d.differentiate(order=3, config=cfg)
    b = d.differentiate(order=3, stepsize=1e-10)
    assert a == pytest.approx(math.e, rel=1e-14)
    assert b == pytest.approx(math.e, rel=1e-14)


def test_invalid_order_raises():
    """Tests that order 0 is rejected."""
    with pytest.raises(ValueError):
        MulticomplexDerivative(sin, 0.0).differentiate(order=0)
