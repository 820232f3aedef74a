"""Contains functions used to construct the Hessian of scalar-valued functions."""

from collections.abc import Callable

import numpy as np

from mcxkit.config import MulticomplexConfig
from mcxkit.derivatives.multivariate import diff_mcxN
from mcxkit.utils.validate import as_parameter_vector, check_scalar_result


def build_hessian(function: Callable,
                  theta0: np.ndarray,
                  config: MulticomplexConfig | None = None,
                  ) -> np.ndarray:
    """Returns the Hessian of a scalar-valued function.

    Diagonal entries use two units on the same parameter; off-diagonal
    entries use one unit on each of the two parameters. Only the upper
    triangle is evaluated and mirrored, since mixed partials commute.

    Args:
        function: The function to be differentiated. Receives a list of
            ``MultiComplex`` arguments, one per parameter.
        theta0: The parameter vector at which the Hessian is evaluated.
        config: Step-size policy passed to ``diff_mcxN``.

    Returns:
        A symmetric 2D array of shape ``(p, p)``.

    Raises:
        TypeError: If ``function`` does not return a scalar value.
        FloatingPointError: If any entry is not finite.
    """
    theta0 = as_parameter_vector(theta0)
    p = theta0.size
    hess = np.empty((p, p), dtype=float)
    for i in range(p):
        for j in range(i, p):
            orders = np.zeros(p, dtype=int)
            orders[i] += 1
            orders[j] += 1
            value = diff_mcxN(function, theta0, orders, config=config)
            hess[i, j] = hess[j, i] = check_scalar_result(value, "build_hessian")
    if not np.isfinite(hess).all():
        raise FloatingPointError("Non-finite values encountered in build_hessian.")
    return hess
