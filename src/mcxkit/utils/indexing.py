"""Bitmask and power-of-two index helpers.

A multicomplex value of order ``n`` stores ``2**n`` coefficients. Coefficient
``k`` belongs to the basis term made of the imaginary units whose bit is set in
``k``, so most navigation over coefficient arrays reduces to integer log-base-2
checks and bit manipulation.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

__all__ = [
    "log2i",
    "exp2i",
    "strided_range",
    "unit_mask",
]


def log2i(n: int) -> int:
    """Returns the integer ``k`` such that ``2**k == n``.

    Args:
        n: A positive integer that must be an exact power of two.

    Returns:
        The base-2 logarithm of ``n``.

    Raises:
        ValueError: If ``n`` is not an exact power of two (this includes
            ``n <= 0`` and non-integral values).
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"log2i expects an integer; got {n!r}.")
    n = int(n)
    if n <= 0 or n & (n - 1):
        raise ValueError(f"{n} is not an exact power of two.")
    return n.bit_length() - 1


def exp2i(k: int) -> int:
    """Returns ``2**k`` for a non-negative integer ``k``."""
    if k < 0:
        raise ValueError(f"exp2i expects a non-negative exponent; got {k}.")
    return 1 << int(k)


def strided_range(start: int, stop: int, step: int) -> range:
    """Returns the indices ``start, start + step, ...`` of the strides inside ``[start, stop)``.

    The returned object is lazy, finite and can be iterated any number of
    times. It holds ``(stop - start) // step`` indices (zero if ``stop`` does
    not exceed ``start``): only whole strides that fit between ``start`` and
    ``stop`` are counted, so ``strided_range(0, 10, 3)`` is ``0, 3, 6``.

    Args:
        start: First index.
        stop: Exclusive upper bound.
        step: Positive stride.

    Returns:
        A ``range`` over the strided indices.

    Raises:
        ValueError: If ``step`` is not positive.
    """
    if step <= 0:
        raise ValueError(f"step must be positive; got {step}.")
    start, stop, step = int(start), int(stop), int(step)
    count = max(0, (stop - start) // step)
    return range(start, start + count * step, step)


def unit_mask(units: Iterable[int]) -> int:
    """Returns the basis bitmask made of the given zero-based unit positions.

    Args:
        units: Positions of the imaginary units (``0`` stands for ``i_1``).

    Returns:
        Integer with bit ``j`` set for every ``j`` in ``units``.
    """
    mask = 0
    for j in units:
        if j < 0:
            raise ValueError(f"unit positions must be non-negative; got {j}.")
        mask |= 1 << int(j)
    return mask
