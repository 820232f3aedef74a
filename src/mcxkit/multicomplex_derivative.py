"""Provides the MulticomplexDerivative class.

The user must specify the function to differentiate and the central value
at which the derivative should be evaluated. The function receives a
:class:`~mcxkit.multicomplex.core.MultiComplex` and must be written with
mcxkit arithmetic and elementary functions.

Examples:
--------
Second derivative of a cubic:

>>> from mcxkit.multicomplex_derivative import MulticomplexDerivative
>>> f = lambda z: z**3
>>> d = MulticomplexDerivative(function=f, x0=2.0)
>>> d.differentiate(order=2)
12.0

All derivatives up to a given order at once:

>>> import numpy as np
>>> from mcxkit.multicomplex import sin
>>> d = MulticomplexDerivative(function=sin, x0=0.0)
>>> np.allclose(d.differentiate(order=4, return_all=True), [1.0, 0.0, -1.0, 0.0])
True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

from mcxkit.config import MulticomplexConfig
from mcxkit.derivatives.univariate import diff_mcx1
from mcxkit.multicomplex.core import MultiComplex


class MulticomplexDerivative:
    """Computes derivatives with the multicomplex-step method.

    A single evaluation of ``function`` at a multicomplex argument yields
    every derivative up to the requested order, without subtractive
    cancellation. For vector-valued functions the derivative is returned as a
    NumPy array with one entry per output component.

    Attributes:
        function: The function to differentiate.
        x0: The point at which the derivative is evaluated.
    """

    def __init__(
        self,
        function: Callable[[MultiComplex], Any],
        x0: float,
    ) -> None:
        """Initialises the class based on function and central value.

        Arguments:
            function: The function to differentiate. Must accept a single
                ``MultiComplex`` and return a ``MultiComplex`` or a sequence
                of them.
            x0: The point at which the derivative is evaluated.
        """
        self.function = function
        self.x0 = float(x0)

    def differentiate(
        self,
        order: int = 1,
        stepsize: float | None = None,
        return_all: bool = False,
        config: MulticomplexConfig | None = None,
    ) -> np.ndarray | float:
        """Computes the derivative of the given order.

        Args:
            order: The order of the derivative to compute. Default is 1.
            stepsize: Imaginary step. If None, a power of two is chosen from
                the number of units (see :class:`~mcxkit.config.MulticomplexConfig`).
            return_all: If True, return every derivative from 1 to ``order``.
            config: Step-size policy and limits.

        Returns:
            The derivative as a float for scalar-valued functions or a 1D
            array for vector-valued ones. With ``return_all=True`` an array
            whose first axis runs over the orders ``1..order``.

        Raises:
            ValueError: If ``order`` is not a positive integer or
                ``stepsize`` is invalid.
        """
        derivs = diff_mcx1(
            self.function,
            self.x0,
            order,
            stepsize=stepsize,
            config=config,
        )
        if return_all:
            return derivs
        last = derivs[-1]
        if np.ndim(last) == 0:
            return float(last)
        return last
