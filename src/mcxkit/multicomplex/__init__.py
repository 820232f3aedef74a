"""Multicomplex number type and its elementary functions."""

from .core import MultiComplex, ZeroDivisorError
from .functions import cos, cosh, exp, log, power, sin, sinh, sqrt, tan, tanh

__all__ = [
    "MultiComplex",
    "ZeroDivisorError",
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
