"""Validation utilities for mcxkit."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mcxkit.utils.indexing import log2i

__all__ = [
    "as_parameter_vector",
    "check_scalar_result",
    "validate_coefficients",
    "validate_derivative_order",
    "validate_points_and_orders",
    "validate_stepsize",
]


def validate_coefficients(coef: ArrayLike) -> NDArray[np.float64]:
    """Validates and converts a multicomplex coefficient sequence.

    Requirements:
      - the input is one-dimensional,
      - its length is an exact power of two.

    Args:
        coef: Ordered real coefficients, indexed by basis bitmask.

    Returns:
        A new, read-only, 1D ``float64`` array holding the coefficients.

    Raises:
        ValueError: If the input is not 1D or its length is not a power of two.
    """
    arr = np.array(coef, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"coefficients must be 1D; got shape {arr.shape}.")
    try:
        log2i(arr.size)
    except ValueError as exc:
        raise ValueError(
            f"number of coefficients must be a power of two; got {arr.size}."
        ) from exc
    arr.flags.writeable = False
    return arr


def validate_derivative_order(order: int, *, minimum: int = 1) -> int:
    """Checks that ``order`` is an integer no smaller than ``minimum``.

    Args:
        order: Requested derivative order.
        minimum: Smallest accepted value.

    Returns:
        The order as a plain ``int``.

    Raises:
        ValueError: If ``order`` is not an integer or is below ``minimum``.
    """
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise ValueError(f"derivative order must be an integer; got {order!r}.")
    if order < minimum:
        raise ValueError(f"derivative order must be >= {minimum}; got {order}.")
    return int(order)


def validate_points_and_orders(
    points: Sequence[float] | ArrayLike,
    orders: Sequence[int] | ArrayLike,
) -> tuple[NDArray[np.float64], list[int]]:
    """Validates a multivariate derivative request.

    Args:
        points: Evaluation point, one real value per variable.
        orders: Derivative order with respect to each variable.

    Returns:
        Tuple of (points as a 1D float array, orders as a list of ints).

    Raises:
        ValueError: If the two sequences differ in length, if ``points`` is not
            1D and non-empty, or if any order is negative or non-integral.
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 1 or pts.size == 0:
        raise ValueError(f"points must be a non-empty 1D sequence; got shape {pts.shape}.")
    orders = list(orders)
    if len(orders) != pts.size:
        raise ValueError(
            f"points and orders must have the same length; "
            f"got {pts.size} points and {len(orders)} orders."
        )
    return pts, [validate_derivative_order(n, minimum=0) for n in orders]


def validate_stepsize(stepsize: float) -> float:
    """Checks that a multicomplex step is a finite positive number."""
    h = float(stepsize)
    if not np.isfinite(h) or h <= 0.0:
        raise ValueError(f"stepsize must be finite and positive; got {stepsize!r}.")
    return h


def as_parameter_vector(theta0: ArrayLike) -> NDArray[np.float64]:
    """Converts a parameter point into a non-empty 1D float array.

    Raises:
        ValueError: If the flattened input is empty.
    """
    theta0 = np.asarray(theta0, dtype=float).reshape(-1)
    if theta0.size == 0:
        raise ValueError("theta0 must be a non-empty 1D array.")
    return theta0


def check_scalar_result(value: float | NDArray, where: str) -> float:
    """Returns ``value`` as a float, rejecting vector-valued results.

    Raises:
        TypeError: If ``value`` has more than one element.
    """
    if np.ndim(value) != 0:
        raise TypeError(
            f"{where}() expects a scalar-valued function; "
            f"got shape {np.shape(value)}."
        )
    return float(value)
