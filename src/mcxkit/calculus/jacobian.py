"""Contains functions used to construct the Jacobian of vector-valued functions."""

from collections.abc import Callable

import numpy as np

from mcxkit.config import MulticomplexConfig
from mcxkit.derivatives.multivariate import diff_mcxN
from mcxkit.utils.validate import as_parameter_vector


def build_jacobian(function: Callable,
                   theta0: np.ndarray,
                   config: MulticomplexConfig | None = None,
                   ) -> np.ndarray:
    """Returns the Jacobian of a vector-valued function.

    Column ``j`` is the first derivative of every output component with
    respect to parameter ``j``, obtained from one evaluation.

    Args:
        function: The function to be differentiated. Receives a list of
            ``MultiComplex`` arguments and returns a sequence of
            ``MultiComplex`` values of length ``m``.
        theta0: The parameter vector at which the Jacobian is evaluated.
        config: Step-size policy passed to ``diff_mcxN``.

    Returns:
        A 2D array of shape ``(m, p)``.

    Raises:
        FloatingPointError: If any entry is not finite.
    """
    theta0 = as_parameter_vector(theta0)
    columns = []
    for j in range(theta0.size):
        orders = np.zeros(theta0.size, dtype=int)
        orders[j] = 1
        columns.append(np.atleast_1d(diff_mcxN(function, theta0, orders, config=config)))
    jac = np.stack(columns, axis=-1)
    if not np.isfinite(jac).all():
        raise FloatingPointError("Non-finite values encountered in build_jacobian.")
    return jac
