r"""Array kernels for multicomplex arithmetic.

Every kernel works on plain ``float64`` coefficient arrays whose last axis has
a power-of-two length. An order-``n`` array ``a`` is read as the pair

.. math::

    a = p + i_n q,

where ``p = a[..., :half]`` and ``q = a[..., half:]`` are order ``n - 1``
arrays and :math:`i_n` is the most significant unit. All operations recurse on
this pair form and bottom out at ordinary real arithmetic. The kernels assume
equal-length operands; :func:`promote` pads mismatched ones.

Multiplication follows the complex rule
:math:`(p + iq)(r + is) = (pr - qs) + i(ps + qr)` and division goes through
the inverse :math:`(p + iq)^{-1} = (p - iq) / (p^2 + q^2)`. Elementary
functions mirror their complex identities at each level:

- :math:`\exp(p + iq) = \exp(p)\,(\cos q + i \sin q)`
- :math:`\cos(p + iq) = \cos p \cosh q - i \sin p \sinh q`
- :math:`\sin(p + iq) = \sin p \cosh q + i \cos p \sinh q`
- :math:`\cosh(p + iq) = \cosh p \cos q + i \sinh p \sin q`
- :math:`\sinh(p + iq) = \sinh p \cos q + i \cosh p \sin q`
- :math:`\log(p + iq) = \tfrac12 \log(p^2 + q^2) + i\,\mathrm{atan2}(q, p)`

The trigonometric and hyperbolic pairs are computed together, so each level
costs two recursive calls instead of four.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "ZeroDivisorError",
    "promote",
    "split",
    "join",
    "identity",
    "mul",
    "inv",
    "div",
    "ipow",
    "exp",
    "cos_sin",
    "cosh_sinh",
    "log",
    "log1p",
    "atan",
    "atan2",
    "sqrt",
]

# Largest number of scalar products evaluated in one stacked numpy call.
_BATCH_LIMIT = 1 << 16


class ZeroDivisorError(ZeroDivisionError):
    """Raised when dividing by a multicomplex zero divisor."""


def promote(a: NDArray, b: NDArray) -> tuple[NDArray, NDArray]:
    """Zero-pads the shorter operand so both arrays have the same order."""
    na, nb = a.shape[-1], b.shape[-1]
    if na == nb:
        return a, b
    if na < nb:
        return pad(a, nb), b
    return a, pad(b, na)


def pad(a: NDArray, size: int) -> NDArray:
    """Embeds ``a`` into the algebra with ``size`` coefficients."""
    if a.shape[-1] == size:
        return a
    out = np.zeros(a.shape[:-1] + (size,), dtype=np.float64)
    out[..., : a.shape[-1]] = a
    return out


def split(a: NDArray) -> tuple[NDArray, NDArray]:
    """Splits ``a`` into the pair ``(p, q)`` with ``a = p + i_n q``."""
    half = a.shape[-1] // 2
    return a[..., :half], a[..., half:]


def join(re: NDArray, im: NDArray) -> NDArray:
    """Inverse of :func:`split`."""
    return np.concatenate((re, im), axis=-1)


def identity(size: int) -> NDArray:
    """Returns the multiplicative identity with ``size`` coefficients."""
    out = np.zeros(size, dtype=np.float64)
    out[0] = 1.0
    return out


def mul(a: NDArray, b: NDArray) -> NDArray:
    """Multiplies two multicomplex arrays of equal length.

    Leading axes are treated as a batch. The four half-size products of each
    level are stacked into one batched call while the batch stays below
    ``_BATCH_LIMIT`` elements, which keeps the Python-level recursion shallow
    for the orders used in practice.

    Args:
        a: Left operand, shape ``(..., 2**n)``.
        b: Right operand, same shape as ``a``.

    Returns:
        The product, same shape as the operands.
    """
    n = a.shape[-1]
    if n == 1:
        return a * b
    p, q = split(a)
    r, s = split(b)
    if 2 * a.size <= _BATCH_LIMIT:
        pr, qs, ps, qr = mul(np.stack((p, q, p, q)), np.stack((r, s, s, r)))
    else:
        pr, qs, ps, qr = mul(p, r), mul(q, s), mul(p, s), mul(q, r)
    return join(pr - qs, ps + qr)


def inv(a: NDArray) -> NDArray:
    """Returns the multiplicative inverse of ``a``.

    Raises:
        ZeroDivisorError: If a recursively computed norm is exactly zero,
            i.e. ``a`` is zero or a zero divisor.
    """
    if a.size == 1:
        if a[0] == 0.0:
            raise ZeroDivisorError("multicomplex division by a zero divisor")
        return 1.0 / a
    p, q = split(a)
    norm_inv = inv(mul(p, p) + mul(q, q))
    return join(mul(p, norm_inv), -mul(q, norm_inv))


def div(a: NDArray, b: NDArray) -> NDArray:
    """Returns ``a / b``."""
    return mul(a, inv(b))


def ipow(a: NDArray, k: int) -> NDArray:
    """Raises ``a`` to a non-negative integer power by binary exponentiation."""
    if k < 0:
        raise ValueError(f"ipow expects a non-negative exponent; got {k}.")
    result = identity(a.size)
    base = a
    while k:
        if k & 1:
            result = mul(result, base)
        k >>= 1
        if k:
            base = mul(base, base)
    return result


def exp(a: NDArray) -> NDArray:
    """Multicomplex exponential.

    The real exponential is only ever taken of the real coefficient at the
    bottom of the recursion and then scaled, so a very negative real part
    underflows to zero coefficients instead of producing ``inf * 0``.
    """
    if a.size == 1:
        return np.array([math.exp(a[0])])
    p, q = split(a)
    cos_q, sin_q = cos_sin(q)
    exp_p = exp(p)
    return join(mul(exp_p, cos_q), mul(exp_p, sin_q))


def cos_sin(a: NDArray) -> tuple[NDArray, NDArray]:
    """Returns ``(cos(a), sin(a))``."""
    if a.size == 1:
        x = a[0]
        return np.array([math.cos(x)]), np.array([math.sin(x)])
    p, q = split(a)
    cos_p, sin_p = cos_sin(p)
    cosh_q, sinh_q = cosh_sinh(q)
    cos_a = join(mul(cos_p, cosh_q), -mul(sin_p, sinh_q))
    sin_a = join(mul(sin_p, cosh_q), mul(cos_p, sinh_q))
    return cos_a, sin_a


def cosh_sinh(a: NDArray) -> tuple[NDArray, NDArray]:
    """Returns ``(cosh(a), sinh(a))``."""
    if a.size == 1:
        x = a[0]
        return np.array([math.cosh(x)]), np.array([math.sinh(x)])
    p, q = split(a)
    cosh_p, sinh_p = cosh_sinh(p)
    cos_q, sin_q = cos_sin(q)
    cosh_a = join(mul(cosh_p, cos_q), mul(sinh_p, sin_q))
    sinh_a = join(mul(sinh_p, cos_q), mul(cosh_p, sin_q))
    return cosh_a, sinh_a


def log(a: NDArray) -> NDArray:
    """Principal multicomplex logarithm.

    Raises:
        ValueError: If a recursively computed norm has a non-positive real
            part (the argument is a zero divisor or lies off the principal
            domain).
    """
    if a.size == 1:
        if a[0] <= 0.0:
            raise ValueError(f"log of a non-positive real part ({a[0]!r}).")
        return np.array([math.log(a[0])])
    p, q = split(a)
    return join(0.5 * log(mul(p, p) + mul(q, q)), atan2(q, p))


def log1p(a: NDArray) -> NDArray:
    """Returns ``log(1 + a)`` without losing small coefficients of ``a``."""
    if a.size == 1:
        if a[0] <= -1.0:
            raise ValueError(f"log1p of a real part <= -1 ({a[0]!r}).")
        return np.array([math.log1p(a[0])])
    p, q = split(a)
    norm_m1 = 2.0 * p + mul(p, p) + mul(q, q)
    return join(0.5 * log1p(norm_m1), atan2(q, identity(p.size) + p))


def atan(a: NDArray) -> NDArray:
    r"""Multicomplex arctangent.

    Uses
    :math:`\arctan(p + iq) = \tfrac12\,\mathrm{atan2}(2p, 1 - p^2 - q^2)
    + \tfrac{i}{4}\left[\log(1 + u_+) - \log(1 + u_-)\right]` with
    :math:`u_\pm = \pm 2q + p^2 + q^2`.
    """
    if a.size == 1:
        return np.array([math.atan(a[0])])
    p, q = split(a)
    sq = mul(p, p) + mul(q, q)
    re = 0.5 * atan2(2.0 * p, identity(p.size) - sq)
    im = 0.25 * (log1p(2.0 * q + sq) - log1p(sq - 2.0 * q))
    return join(re, im)


def atan2(y: NDArray, x: NDArray) -> NDArray:
    """Two-argument arctangent of commuting multicomplex arguments.

    The angle of the real parts is taken exactly and the remainder is the
    arctangent of the rotated ratio, whose real part vanishes.

    Raises:
        ValueError: If both real parts are zero.
    """
    yr, xr = y[0], x[0]
    if y.size == 1:
        return np.array([math.atan2(yr, xr)])
    if yr == 0.0 and xr == 0.0:
        raise ValueError("atan2 is undefined when both real parts are zero.")
    t = div(y * xr - x * yr, x * xr + y * yr)
    out = atan(t)
    out[0] += math.atan2(yr, xr)
    return out


def sqrt(a: NDArray) -> NDArray:
    """Principal multicomplex square root.

    For ``a = p + iq`` the root ``u + iv`` satisfies ``u = sqrt((m + p) / 2)``
    and ``v = q / (2u)`` with ``m = sqrt(p^2 + q^2)``; the roles of ``u`` and
    ``v`` swap when the real part of ``p`` is negative.
    """
    if a.size == 1:
        if a[0] < 0.0:
            raise ValueError(f"sqrt of a negative real part ({a[0]!r}).")
        return np.array([math.sqrt(a[0])])
    p, q = split(a)
    m = sqrt(mul(p, p) + mul(q, q))
    if p[0] >= 0.0:
        u = sqrt(0.5 * (m + p))
        v = div(q, 2.0 * u)
    else:
        v = sqrt(0.5 * (m - p))
        if q[0] < 0.0:
            v = -v
        u = div(q, 2.0 * v)
    return join(u, v)
