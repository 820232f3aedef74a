"""Multicomplex-step differentiation drivers.

``diff_mcx1`` returns every derivative up to a given order of a one-variable
function; ``diff_mcxN`` returns a single mixed partial derivative of a
multi-variable function. Both evaluate the function exactly once.
"""

from .multivariate import diff_mcxN
from .univariate import diff_mcx1

__all__ = ["diff_mcx1", "diff_mcxN"]
