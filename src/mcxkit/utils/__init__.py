"""Utility functions for the mcxkit package."""

from .indexing import (
    exp2i,
    log2i,
    strided_range,
    unit_mask,
)

__all__ = [
    "exp2i",
    "log2i",
    "strided_range",
    "unit_mask",
]
