"""Calculus utilities.

Provides constructors for gradient, Jacobian, and Hessian computations built
on the multivariate multicomplex-step driver.
"""

from .gradient import build_gradient
from .hessian import build_hessian
from .jacobian import build_jacobian

__all__ = ["build_gradient", "build_jacobian", "build_hessian"]
