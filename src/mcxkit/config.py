"""Configuration for the multicomplex-step differentiation drivers.

This config controls how :func:`~mcxkit.derivatives.univariate.diff_mcx1` and
:func:`~mcxkit.derivatives.multivariate.diff_mcxN` choose the imaginary step
when the caller does not pass one, and when they warn about the size of the
coefficient arrays.
"""

from __future__ import annotations

__all__ = [
    "MulticomplexConfig",
    "DEFAULT_CONFIG",
]


class MulticomplexConfig:
    """Configuration for the multicomplex-step differentiation drivers.

    The default step is the power of two ``h = 2**-e`` with
    ``e = min(max_step_exponent, exponent_budget // total_units)``. A power of
    two makes the final division by ``h**d`` exact, and the exponent budget
    keeps ``h**total_units`` a normal double so the highest coefficient does
    not lose precision to underflow.
    """

    def __init__(
        self,
        exponent_budget: int = 900,
        max_step_exponent: int = 512,
        max_units_warning: int = 16,
    ):
        """Initialize configuration.

        Args:
            exponent_budget:
                Total binary exponent available to ``h**total_units``. Must
                stay below 1022 (the smallest normal double is ``2**-1022``);
                the margin leaves room for the derivative values themselves.

            max_step_exponent:
                Upper bound on ``e``, i.e. the smallest default step is
                ``2**-max_step_exponent``. Only reached for one or two units.

            max_units_warning:
                Number of imaginary units above which the drivers log a
                warning. Memory and time double with every unit.
        """
        if not 0 < exponent_budget < 1022:
            raise ValueError(f"exponent_budget must be in (0, 1022); got {exponent_budget}.")
        if max_step_exponent < 1:
            raise ValueError(f"max_step_exponent must be positive; got {max_step_exponent}.")
        self.exponent_budget = int(exponent_budget)
        self.max_step_exponent = int(max_step_exponent)
        self.max_units_warning = int(max_units_warning)

    def default_stepsize(self, total_units: int) -> float:
        """Returns the default imaginary step for ``total_units`` units."""
        if total_units < 1:
            return 1.0
        e = min(self.max_step_exponent, self.exponent_budget // total_units)
        return 2.0 ** -max(e, 1)

    def __repr__(self) -> str:
        return (
            f"MulticomplexConfig(exponent_budget={self.exponent_budget}, "
            f"max_step_exponent={self.max_step_exponent}, "
            f"max_units_warning={self.max_units_warning})"
        )


DEFAULT_CONFIG = MulticomplexConfig()
