r"""All derivatives of a one-variable function from a single evaluation.

The argument is seeded as

.. math::

    z = x + h\,(i_1 + i_2 + \dots + i_N),

and ``f`` is evaluated once at ``z``. Expanding :math:`f(z)` in a Taylor
series, the coefficient of any product of ``d`` distinct units equals
:math:`h^d f^{(d)}(x)` up to terms of relative size :math:`h^2`: the ``d!``
orderings of the units cancel the ``1/d!`` of the Taylor term. Since the step
is the same on every unit, all masks of popcount ``d`` carry the same value, and
the driver reads the mask ``(1 << d) - 1`` (the first ``d`` units).

No differences of nearby function values are taken, so the step can be made
small enough for the truncation terms to vanish below machine precision.
"""

from __future__ import annotations

from collections.abc import Callable
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
from mcxkit.utils.indexing import exp2i, strided_range
from mcxkit.utils.types import FloatArray
from mcxkit.utils.validate import validate_derivative_order, validate_stepsize

__all__ = [
    "diff_mcx1",
]


def diff_mcx1(
    function: Callable[[MultiComplex], Any],
    x: float,
    numderiv: int,
    *,
    stepsize: float | None = None,
    and_value: bool = False,
    config: MulticomplexConfig | None = None,
) -> FloatArray:
    """Returns the derivatives ``f'(x), ..., f^(numderiv)(x)``.

    Args:
        function: Callable taking one ``MultiComplex`` and returning a
            ``MultiComplex`` (scalar-valued) or a sequence of them
            (vector-valued). It must be written with mcxkit arithmetic and
            elementary functions.
        x: Real evaluation point.
        numderiv: Highest derivative order (``>= 1``); also the number of
            imaginary units allocated.
        stepsize: Imaginary step ``h``. Defaults to the power of two chosen by
            ``config``.
        and_value: If True, prepend ``f(x)`` to the result.
        config: Step-size policy and limits. Defaults to
            :data:`~mcxkit.config.DEFAULT_CONFIG`.

    Returns:
        Array of shape ``(numderiv,)`` for scalar functions or
        ``(numderiv, m)`` for functions returning ``m`` values; with
        ``and_value=True`` the leading dimension is ``numderiv + 1``.

    Raises:
        ValueError: If ``numderiv`` is not a positive integer or ``stepsize``
            is not a finite positive number.
    """
    numderiv = validate_derivative_order(numderiv)
    cfg = config or DEFAULT_CONFIG
    h = cfg.default_stepsize(numderiv) if stepsize is None else validate_stepsize(stepsize)
    check_unit_budget(numderiv, cfg)
    mcxkit_logger.debug("diff_mcx1: x=%r, %d units, h=%r", x, numderiv, h)

    size = exp2i(numderiv)
    z = seed_argument(x, strided_range(0, numderiv, 1), h, numderiv)
    coef = output_coefficients(function(z), size)

    masks = [exp2i(d) - 1 for d in range(1, numderiv + 1)]
    scale = np.array([h**d for d in range(1, numderiv + 1)])
    derivs = coef[..., masks] / scale
    if and_value:
        derivs = np.concatenate((coef[..., :1], derivs), axis=-1)

    # (m, numderiv) -> (numderiv, m) so row d holds the d-th derivative
    out = np.ascontiguousarray(derivs.T) if derivs.ndim == 2 else derivs
    warn_if_nonfinite(out, "diff_mcx1")
    return out
