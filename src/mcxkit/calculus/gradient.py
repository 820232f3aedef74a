"""Contains functions used to construct the gradient of scalar-valued functions."""

from collections.abc import Callable

import numpy as np

from mcxkit.config import MulticomplexConfig
from mcxkit.derivatives.multivariate import diff_mcxN
from mcxkit.utils.validate import as_parameter_vector, check_scalar_result


def build_gradient(function: Callable,
                   theta0: np.ndarray,
                   config: MulticomplexConfig | None = None,
                   ) -> np.ndarray:
    """Returns the gradient of a scalar-valued function.

    Each component is a first-order mixed partial with a single imaginary
    unit, so every evaluation works on order-1 (ordinary complex) values.

    Args:
        function (Callable): The function to be differentiated. Receives a
            list of ``MultiComplex`` arguments, one per parameter.
        theta0  (array-like): The parameter vector at which the gradient is evaluated.
        config: Step-size policy passed to ``diff_mcxN``.

    Returns:
        A 1D array representing the gradient.

    Raises:
        TypeError: If ``function`` does not return a scalar value.
        FloatingPointError: If any component is not finite.
    """
    theta0 = as_parameter_vector(theta0)
    grad = np.empty(theta0.size, dtype=float)
    for i in range(theta0.size):
        orders = np.zeros(theta0.size, dtype=int)
        orders[i] = 1
        value = diff_mcxN(function, theta0, orders, config=config)
        grad[i] = check_scalar_result(value, "build_gradient")
    if not np.isfinite(grad).all():
        raise FloatingPointError("Non-finite values encountered in build_gradient.")
    return grad
