"""Provides all mcxkit methods."""

from importlib.metadata import PackageNotFoundError, version

from mcxkit.calculus_kit import CalculusKit
from mcxkit.config import MulticomplexConfig
from mcxkit.derivative_kit import DerivativeKit, register_method
from mcxkit.derivatives import diff_mcx1, diff_mcxN
from mcxkit.multicomplex import (
    MultiComplex,
    ZeroDivisorError,
    cos,
    cosh,
    exp,
    log,
    power,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)
from mcxkit.multicomplex_derivative import MulticomplexDerivative
from mcxkit.utils.indexing import log2i, strided_range

try:
    __version__ = version("mcxkit")
except PackageNotFoundError:
    pass

__all__ = [
    "CalculusKit",
    "DerivativeKit",
    "MultiComplex",
    "MulticomplexConfig",
    "MulticomplexDerivative",
    "ZeroDivisorError",
    "cos",
    "cosh",
    "diff_mcx1",
    "diff_mcxN",
    "exp",
    "log",
    "log2i",
    "power",
    "register_method",
    "sin",
    "sinh",
    "sqrt",
    "strided_range",
    "tan",
    "tanh",
]
