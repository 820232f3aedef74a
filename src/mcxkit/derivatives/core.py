"""Helpers shared by the univariate and multivariate drivers."""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mcxkit.config import MulticomplexConfig
from mcxkit.logger import mcxkit_logger
from mcxkit.multicomplex import algebra
from mcxkit.multicomplex.core import MultiComplex
from mcxkit.utils.indexing import exp2i
from mcxkit.utils.numerics import all_finite

__all__ = [
    "seed_argument",
    "output_coefficients",
    "check_unit_budget",
    "warn_if_nonfinite",
]


def seed_argument(x: float, units: range, stepsize: float, total_units: int) -> MultiComplex:
    """Builds ``x + stepsize * sum(i_{j+1} for j in units)``.

    Args:
        x: Real part.
        units: Zero-based positions of the units that carry the step.
        stepsize: Coefficient placed on every unit in ``units``.
        total_units: Order of the returned value.

    Returns:
        The seeded multicomplex argument.
    """
    arr = np.zeros(exp2i(total_units), dtype=np.float64)
    arr[0] = float(x)
    for j in units:
        arr[1 << j] = stepsize
    return MultiComplex._wrap(arr)


def output_coefficients(result: Any, size: int) -> NDArray[np.float64]:
    """Returns the coefficients of a function output in the seeded algebra.

    Scalar outputs give an array of shape ``(size,)``; sequence outputs give
    ``(m, size)``. Real numbers are accepted and embedded as constants.

    Raises:
        TypeError: If an output element is not a number.
        ValueError: If an output uses more units than the seeded argument.
    """
    if isinstance(result, (MultiComplex, numbers.Number)):
        return _embed(MultiComplex.coerce(result), size)
    items = np.asarray(result, dtype=object).ravel()
    if items.size == 0:
        raise ValueError("function returned an empty sequence.")
    return np.stack([_embed(MultiComplex.coerce(item), size) for item in items])


def _embed(value: MultiComplex, size: int) -> NDArray[np.float64]:
    if value.coef.size > size:
        raise ValueError(
            f"function returned an order-{value.order} value, more units than "
            f"the {size.bit_length() - 1} seeded."
        )
    return algebra.pad(value.coef, size)


def check_unit_budget(total_units: int, config: MulticomplexConfig) -> None:
    """Logs a warning when the coefficient arrays get very large."""
    if total_units > config.max_units_warning:
        mcxkit_logger.warning(
            "Requested %d imaginary units; every value holds 2**%d coefficients "
            "and products cost O(4**%d).",
            total_units,
            total_units,
            total_units,
        )


def warn_if_nonfinite(values: NDArray, where: str) -> None:
    """Logs a warning if any extracted derivative is not finite."""
    if not all_finite(values):
        mcxkit_logger.warning("%s: non-finite values in the derivative result.", where)
