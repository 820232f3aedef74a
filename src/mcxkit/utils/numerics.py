"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "all_finite",
]


def all_finite(values: ArrayLike) -> bool:
    """Returns True if every element of ``values`` is finite."""
    return bool(np.isfinite(np.asarray(values, dtype=float)).all())
