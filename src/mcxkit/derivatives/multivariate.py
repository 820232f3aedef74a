r"""One mixed partial derivative of a multi-variable function.

For orders :math:`(n_1, \dots, n_m)` the driver allocates
:math:`\sum_k n_k` units, split into contiguous groups of :math:`n_k` units.
Argument ``k`` is seeded as its real point plus :math:`h_k` times the sum of
the units in its own group, and ``f`` is evaluated once. The coefficient at the
union of all groups equals
:math:`\prod_k h_k^{n_k}\,\partial^{\sum n_k} f / \prod_k \partial x_k^{n_k}`
up to terms of relative size :math:`h^2`.

A variable with order zero gets no units; its argument is its real point.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from mcxkit.config import DEFAULT_CONFIG, MulticomplexConfig
from mcxkit.derivatives.core import (
    check_unit_budget,
    output_coefficients,
    seed_argument,
    warn_if_nonfinite,
)
from mcxkit.logger import mcxkit_logger
from mcxkit.multicomplex.core import MultiComplex
from mcxkit.utils.indexing import exp2i, strided_range, unit_mask
from mcxkit.utils.types import ArrayLike1D, FloatArray, OrderLike
from mcxkit.utils.validate import validate_points_and_orders, validate_stepsize

__all__ = [
    "diff_mcxN",
]


def diff_mcxN(
    function: Callable[[list[MultiComplex]], Any],
    points: ArrayLike1D,
    orders: OrderLike,
    *,
    stepsizes: float | Sequence[float] | None = None,
    config: MulticomplexConfig | None = None,
) -> float | FloatArray:
    """Returns the mixed partial derivative of ``function`` at ``points``.

    Args:
        function: Callable taking a list of ``m`` ``MultiComplex`` arguments
            and returning a ``MultiComplex`` or a sequence of them.
        points: Real evaluation point, one value per variable.
        orders: Non-negative derivative order for each variable.
        stepsizes: One imaginary step per variable, or a single step used for
            all of them. Defaults to the power of two chosen by ``config``.
        config: Step-size policy and limits. Defaults to
            :data:`~mcxkit.config.DEFAULT_CONFIG`.

    Returns:
        The derivative as a float for scalar functions, or a 1D array for
        vector-valued functions.

    Raises:
        ValueError: If ``points`` and ``orders`` differ in length, an order is
            negative, or the step sizes are invalid. Raised before
            ``function`` is evaluated.
    """
    pts, orders = validate_points_and_orders(points, orders)
    cfg = config or DEFAULT_CONFIG
    total = sum(orders)
    hs = _resolve_stepsizes(stepsizes, len(orders), cfg.default_stepsize(total))
    check_unit_budget(total, cfg)
    mcxkit_logger.debug("diff_mcxN: orders=%s, %d units, steps=%s", orders, total, hs)

    args = []
    mask = 0
    offset = 0
    for x, n, h in zip(pts, orders, hs):
        units = strided_range(offset, offset + n, 1)
        args.append(seed_argument(x, units, h, total))
        mask |= unit_mask(units)
        offset += n

    coef = output_coefficients(function(args), exp2i(total))
    scale = float(np.prod([h**n for h, n in zip(hs, orders)]))
    value = coef[..., mask] / scale
    warn_if_nonfinite(value, "diff_mcxN")
    if np.ndim(value) == 0:
        return float(value)
    return value


def _resolve_stepsizes(
    stepsizes: float | Sequence[float] | None,
    m: int,
    default: float,
) -> list[float]:
    """Returns one validated step per variable."""
    if stepsizes is None:
        return [default] * m
    if np.ndim(stepsizes) == 0:
        return [validate_stepsize(stepsizes)] * m
    hs = [validate_stepsize(h) for h in stepsizes]
    if len(hs) != m:
        raise ValueError(f"expected {m} step sizes; got {len(hs)}.")
    return hs
