"""Provides the MultiComplex value type.

A multicomplex number of order ``n`` is an element of the commutative
``2**n``-dimensional real algebra generated by ``n`` units
``i_1, ..., i_n`` with ``i_k**2 == -1``. Its coefficients are stored in a flat
array indexed by basis bitmask: bit ``j`` of index ``k`` is set when unit
``i_{j+1}`` takes part in that basis term, so ``coef[0]`` is the real part and
``coef[1 << j]`` is the coefficient of ``i_{j+1}`` alone.

Examples:
    >>> from mcxkit.multicomplex.core import MultiComplex
    >>> z = MultiComplex([1.0, 2.0])      # 1 + 2 i_1
    >>> w = MultiComplex([0.0, 0.0, 1.0, 0.0])  # i_2
    >>> (z * w).coef.tolist()
    [0.0, 0.0, 1.0, 2.0]
    >>> (w * w).real
    -1.0
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mcxkit.multicomplex import algebra
from mcxkit.multicomplex.algebra import ZeroDivisorError
from mcxkit.utils.indexing import exp2i, log2i
from mcxkit.utils.validate import validate_coefficients

__all__ = [
    "MultiComplex",
    "ZeroDivisorError",
]


class MultiComplex:
    """Immutable multicomplex number.

    Attributes:
        coef: Read-only ``float64`` array of ``2**order`` coefficients.
        order: Number of imaginary units.
    """

    __slots__ = ("_coef",)

    # Keeps numpy scalars from broadcasting over a MultiComplex operand; they
    # defer to the reflected operators below instead.
    __array_ufunc__ = None

    def __init__(self, coef: ArrayLike):
        """Initialises the value from its coefficients.

        Args:
            coef: Ordered real coefficients indexed by basis bitmask. The
                length must be a power of two.

        Raises:
            ValueError: If the length of ``coef`` is not a power of two.
        """
        self._coef = validate_coefficients(coef)

    @classmethod
    def _wrap(cls, arr: NDArray) -> MultiComplex:
        """Wraps a kernel result without re-validating it."""
        obj = cls.__new__(cls)
        arr = np.asarray(arr, dtype=np.float64)
        arr.flags.writeable = False
        obj._coef = arr
        return obj

    @classmethod
    def coerce(cls, value: Any) -> MultiComplex:
        """Lifts a real, complex or multicomplex value into the algebra.

        Args:
            value: A ``MultiComplex``, a real number or a complex number.

        Returns:
            ``value`` itself if it is already multicomplex, otherwise the
            equivalent order-0 (real) or order-1 (complex) value.

        Raises:
            TypeError: If ``value`` is not a number.
        """
        if isinstance(value, MultiComplex):
            return value
        if isinstance(value, numbers.Real):
            return cls._wrap(np.array([float(value)]))
        if isinstance(value, numbers.Complex):
            return cls.from_complex(value)
        raise TypeError(f"cannot interpret {type(value).__name__} as a multicomplex number.")

    @classmethod
    def from_complex(cls, value: complex) -> MultiComplex:
        """Returns the order-1 value ``value.real + value.imag * i_1``."""
        value = complex(value)
        return cls._wrap(np.array([value.real, value.imag]))

    @classmethod
    def unit(cls, position: int, order: int | None = None) -> MultiComplex:
        """Returns the imaginary unit ``i_{position + 1}``.

        Args:
            position: Zero-based unit position.
            order: Order of the returned value; defaults to ``position + 1``.
        """
        order = position + 1 if order is None else order
        if not 0 <= position < order:
            raise ValueError(f"unit position {position} is outside an order-{order} algebra.")
        arr = np.zeros(exp2i(order))
        arr[1 << position] = 1.0
        return cls._wrap(arr)

    @property
    def coef(self) -> NDArray[np.float64]:
        """Read-only coefficient array."""
        return self._coef

    @property
    def order(self) -> int:
        """Number of imaginary units."""
        return log2i(self._coef.size)

    @property
    def real(self) -> float:
        """The real (bitmask 0) coefficient."""
        return float(self._coef[0])

    def to_complex(self) -> complex:
        """Returns the value as a Python ``complex``.

        Raises:
            ValueError: If any coefficient outside ``{1, i_1}`` is non-zero.
        """
        if self._coef.size > 2 and np.any(self._coef[2:]):
            raise ValueError("only values of the form a + b*i_1 convert to complex.")
        im = float(self._coef[1]) if self._coef.size > 1 else 0.0
        return complex(float(self._coef[0]), im)

    def __complex__(self) -> complex:
        return self.to_complex()

    def embed(self, order: int) -> MultiComplex:
        """Returns this value embedded in the order-``order`` algebra."""
        size = exp2i(order)
        if size < self._coef.size:
            raise ValueError(f"cannot embed an order-{self.order} value into order {order}.")
        return MultiComplex._wrap(algebra.pad(self._coef, size))

    def _operands(self, other: Any) -> tuple[NDArray, NDArray] | None:
        try:
            other = MultiComplex.coerce(other)
        except TypeError:
            return None
        return algebra.promote(self._coef, other._coef)

    def __add__(self, other: Any) -> MultiComplex:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return MultiComplex._wrap(ops[0] + ops[1])

    def __radd__(self, other: Any) -> MultiComplex:
        return self.__add__(other)

    def __sub__(self, other: Any) -> MultiComplex:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return MultiComplex._wrap(ops[0] - ops[1])

    def __rsub__(self, other: Any) -> MultiComplex:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return MultiComplex._wrap(ops[1] - ops[0])

    def __mul__(self, other: Any) -> MultiComplex:
        if isinstance(other, numbers.Real):
            return MultiComplex._wrap(self._coef * float(other))
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return MultiComplex._wrap(algebra.mul(*ops))

    def __rmul__(self, other: Any) -> MultiComplex:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> MultiComplex:
        if isinstance(other, numbers.Real):
            if other == 0:
                raise ZeroDivisorError("multicomplex division by zero")
            return MultiComplex._wrap(self._coef / float(other))
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return MultiComplex._wrap(algebra.div(*ops))

    def __rtruediv__(self, other: Any) -> MultiComplex:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return MultiComplex._wrap(algebra.div(ops[1], ops[0]))

    def __neg__(self) -> MultiComplex:
        return MultiComplex._wrap(-self._coef)

    def __pos__(self) -> MultiComplex:
        return self

    def __pow__(self, exponent: Any) -> MultiComplex:
        if isinstance(exponent, numbers.Integral):
            return self.pow(int(exponent))
        try:
            exponent = MultiComplex.coerce(exponent)
        except TypeError:
            return NotImplemented
        if exponent.order == 0 and float(exponent.real).is_integer():
            return self.pow(int(exponent.real))
        w, z = algebra.promote(exponent._coef, self._coef)
        return MultiComplex._wrap(algebra.exp(algebra.mul(w, algebra.log(z))))

    def __rpow__(self, base: Any) -> MultiComplex:
        try:
            base = MultiComplex.coerce(base)
        except TypeError:
            return NotImplemented
        return base.__pow__(self)

    def pow(self, k: int) -> MultiComplex:
        """Raises the value to an integer power by repeated squaring.

        Negative exponents invert the value first, so they raise
        :class:`ZeroDivisorError` for zero divisors.
        """
        if k < 0:
            return MultiComplex._wrap(algebra.ipow(algebra.inv(self._coef), -k))
        return MultiComplex._wrap(algebra.ipow(self._coef, k))

    def __eq__(self, other: Any) -> bool:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return bool(np.array_equal(ops[0], ops[1]))

    def __hash__(self) -> int:
        arr = self._coef
        while arr.size > 1 and not np.any(arr[arr.size // 2:]):
            arr = arr[: arr.size // 2]
        # orders 0 and 1 compare equal to float and complex, so hash like them
        if arr.size == 1:
            return hash(float(arr[0]))
        if arr.size == 2:
            return hash(complex(arr[0], arr[1]))
        return hash(tuple(arr.tolist()))

    def isclose(self, other: Any, rtol: float = 1e-12, atol: float = 0.0) -> bool:
        """Returns True if all promoted coefficients agree within tolerance."""
        ops = self._operands(other)
        if ops is None:
            raise TypeError(f"cannot compare MultiComplex with {type(other).__name__}.")
        return bool(np.allclose(ops[0], ops[1], rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        return f"MultiComplex({self._coef.tolist()!r})"
