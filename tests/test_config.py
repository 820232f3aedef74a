"""Tests for MulticomplexConfig."""

import pytest

from mcxkit.config import DEFAULT_CONFIG, MulticomplexConfig


def test_defaults():
    """Tests the default values."""
    cfg = MulticomplexConfig()
    assert cfg.exponent_budget == 900
    assert cfg.max_step_exponent == 512
    assert cfg.max_units_warning == 16
    assert "exponent_budget=900" in repr(cfg)


@pytest.mark.parametrize(
    "units, expected",
    [(0, 1.0), (1, 2.0**-512), (2, 2.0**-450), (10, 2.0**-90), (7, 2.0**-128)],
)
def test_default_stepsize_is_power_of_two(units, expected):
    """Tests the step-size rule h = 2**-min(512, 900 // units)."""
    assert DEFAULT_CONFIG.default_stepsize(units) == expected


def test_step_power_stays_normal():
    """Tests that h**units stays above the smallest normal double."""
    for units in range(1, 40):
        h = DEFAULT_CONFIG.default_stepsize(units)
        assert h**units >= 2.0**-1022


def test_step_exponent_never_below_one():
    """Tests that very many units still give h <= 1/2."""
    assert MulticomplexConfig(exponent_budget=10).default_stepsize(50) == 0.5


@pytest.mark.parametrize("kwargs", [{"exponent_budget": 0}, {"exponent_budget": 1022},
                                    {"max_step_exponent": 0}])
def test_invalid_values_raise(kwargs):
    """Tests that out-of-range settings are rejected."""
    with pytest.raises(ValueError):
        MulticomplexConfig(**kwargs)
