"""Elementary functions of a multicomplex argument.

Each function accepts a :class:`~mcxkit.multicomplex.core.MultiComplex`, a real
or a complex number and returns a ``MultiComplex`` of the same order as its
(coerced) argument. These are the building blocks for user functions passed to
the differentiation drivers, e.g.::

    >>> from mcxkit.multicomplex import MultiComplex, exp, sin
    >>> z = MultiComplex([0.5, 1e-20])
    >>> w = z * sin(z) + exp(-z)
"""

from __future__ import annotations

from typing import Any

from mcxkit.multicomplex import algebra
from mcxkit.multicomplex.core import MultiComplex

__all__ = [
    "exp",
    "log",
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    "sqrt",
    "power",
]


def exp(z: Any) -> MultiComplex:
    """Exponential."""
    return MultiComplex._wrap(algebra.exp(MultiComplex.coerce(z).coef))


def log(z: Any) -> MultiComplex:
    """Principal natural logarithm.

    Defined near the real axis: every norm computed along the recursion must
    have a positive real part.

    Raises:
        ValueError: If the argument is a zero divisor or lies off the
            principal domain.
    """
    return MultiComplex._wrap(algebra.log(MultiComplex.coerce(z).coef))


def sin(z: Any) -> MultiComplex:
    """Sine."""
    return MultiComplex._wrap(algebra.cos_sin(MultiComplex.coerce(z).coef)[1])


def cos(z: Any) -> MultiComplex:
    """Cosine."""
    return MultiComplex._wrap(algebra.cos_sin(MultiComplex.coerce(z).coef)[0])


def tan(z: Any) -> MultiComplex:
    """Tangent."""
    c, s = algebra.cos_sin(MultiComplex.coerce(z).coef)
    return MultiComplex._wrap(algebra.div(s, c))


def sinh(z: Any) -> MultiComplex:
    """Hyperbolic sine."""
    return MultiComplex._wrap(algebra.cosh_sinh(MultiComplex.coerce(z).coef)[1])


def cosh(z: Any) -> MultiComplex:
    """Hyperbolic cosine."""
    return MultiComplex._wrap(algebra.cosh_sinh(MultiComplex.coerce(z).coef)[0])


def tanh(z: Any) -> MultiComplex:
    """Hyperbolic tangent."""
    c, s = algebra.cosh_sinh(MultiComplex.coerce(z).coef)
    return MultiComplex._wrap(algebra.div(s, c))


def sqrt(z: Any) -> MultiComplex:
    """Principal square root.

    Raises:
        ValueError: If a real part met along the recursion is negative.
        ZeroDivisorError: At the branch point (zero real and unit parts).
    """
    return MultiComplex._wrap(algebra.sqrt(MultiComplex.coerce(z).coef))


def power(z: Any, exponent: Any) -> MultiComplex:
    """Returns ``z ** exponent``.

    Integer exponents use binary exponentiation; any other exponent is
    evaluated as ``exp(exponent * log(z))``.
    """
    return MultiComplex.coerce(z) ** exponent
