"""Provides the CalculusKit class.

A light wrapper around the calculus helpers that exposes a simple API
for gradient, Jacobian, Hessian and arbitrary mixed partial derivatives.

Typical usage examples:

>>> from mcxkit.calculus_kit import CalculusKit
>>> from mcxkit.multicomplex import exp, sin
>>>
>>> def scalar_function(x):
...     # scalar-valued function: f(θ) = sin(θ0) * exp(θ1)
...     return sin(x[0]) * exp(x[1])
>>>
>>> calc = CalculusKit(scalar_function, x0=[0.5, 0.1])
>>> grad = calc.gradient()
>>> hess = calc.hessian()
>>> d3 = calc.mixed_partial([2, 1])
"""

from collections.abc import Callable
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .calculus import build_gradient, build_hessian, build_jacobian
from .config import MulticomplexConfig
from .derivatives.multivariate import diff_mcxN


class CalculusKit:
    """Provides access to gradient, Jacobian, Hessian and mixed partials."""

    def __init__(
        self,
        function: Callable,
        x0: Sequence[float] | np.ndarray,
        config: MulticomplexConfig | None = None,
    ):
        """Initialise with function and expansion point.

        Args:
            function: Maps a list of P ``MultiComplex`` parameters to a
                ``MultiComplex`` (for gradient/Hessian of scalar f) or a
                sequence of them (for Jacobian).
            x0: Point at which to evaluate derivatives (shape (P,)).
            config: Step-size policy used by every derivative.
        """
        self.function = function
        self.x0 = np.asarray(x0, dtype=float)
        self.config = config

    def gradient(self) -> NDArray[np.floating]:
        """Returns the gradient of a scalar-valued function."""
        return build_gradient(self.function, self.x0, config=self.config)

    def jacobian(self) -> NDArray[np.floating]:
        """Returns the Jacobian of a vector-valued function."""
        return build_jacobian(self.function, self.x0, config=self.config)

    def hessian(self) -> NDArray[np.floating]:
        """Returns the Hessian of a scalar-valued function."""
        return build_hessian(self.function, self.x0, config=self.config)

    def mixed_partial(self, orders: Sequence[int]) -> float | NDArray[np.floating]:
        """Returns the mixed partial derivative with the given per-parameter orders."""
        return diff_mcxN(self.function, self.x0, orders, config=self.config)
