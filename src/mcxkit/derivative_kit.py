"""Provides the DerivativeKit front end.

``DerivativeKit`` pairs a function with an expansion point ``x0`` and hands
both to a derivative engine picked by name. mcxkit ships one engine,
``"multicomplex"``; further engines can be plugged in with
:func:`register_method` and are then selectable like the built-in one.

Examples:
    >>> from mcxkit.derivative_kit import DerivativeKit
    >>> from mcxkit.multicomplex import cos
    >>> DerivativeKit(function=cos, x0=0.0).differentiate(order=2)
    -1.0

    Plugging in another engine:

    >>> from mcxkit.derivative_kit import register_method
    >>> register_method("my-engine", MyEngine, aliases=("mine",))  # doctest: +SKIP

Method names are matched after lower-casing and dropping every character
that is not a letter or digit, so ``"Multicomplex-Step"`` and
``"multicomplex_step"`` select the same engine.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Callable, Iterable, Protocol

from mcxkit.multicomplex_derivative import MulticomplexDerivative


class DerivativeEngine(Protocol):
    """Structural type of a derivative engine.

    An engine is built from ``(function, x0)`` and computes through
    ``differentiate(**kwargs)``.
    """

    def __init__(self, function: Callable[[Any], Any], x0: float): ...

    def differentiate(self, *args: Any, **kwargs: Any) -> Any: ...


# canonical name -> engine class
_ENGINES: dict[str, type[DerivativeEngine]] = {
    "multicomplex": MulticomplexDerivative,
}

# extra spelling -> canonical name
_ALIASES: dict[str, str] = {
    "multicomplex-step": "multicomplex",
    "mcx": "multicomplex",
}


def _norm(name: str) -> str:
    """Lower-cases ``name`` and strips everything but letters and digits."""
    return re.sub(r"[^a-z0-9]+", "", name.lower())


@lru_cache(maxsize=1)
def _lookup() -> dict[str, str]:
    """Returns the normalized-name to canonical-name table."""
    table = {_norm(name): name for name in _ENGINES}
    for alias, name in _ALIASES.items():
        table.setdefault(_norm(alias), name)
    return table


def register_method(
    name: str,
    cls: type[DerivativeEngine],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Makes ``cls`` selectable in :class:`DerivativeKit` as ``name``.

    Args:
        name: Canonical method name.
        cls: Engine class following :class:`DerivativeEngine`.
        aliases: Other accepted spellings of ``name``.

    Raises:
        ValueError: If ``name`` normalizes to an empty string.
    """
    if not _norm(name):
        raise ValueError(f"method name {name!r} has no letters or digits.")
    _ENGINES[name] = cls
    for alias in aliases:
        _ALIASES[alias] = name
    _lookup.cache_clear()


def _resolve(method: str) -> type[DerivativeEngine]:
    """Returns the engine class registered under ``method`` or an alias of it.

    Raises:
        ValueError: If no engine matches ``method``.
    """
    name = _lookup().get(_norm(method))
    if name is None:
        raise ValueError(
            f"Unknown derivative method '{method}'. "
            f"Choose one of {{{', '.join(available_methods())}}}."
        )
    return _ENGINES[name]


def available_methods() -> list[str]:
    """Returns the sorted canonical method names."""
    return sorted(_ENGINES)


class DerivativeKit:
    """Derivatives of a one-variable function through a named engine.

    Attributes:
        function: The callable to differentiate.
        x0: The point at which the derivative is evaluated.
        default_method: Engine used when ``differentiate`` gets no ``method``.
    """

    def __init__(self, function: Callable[[Any], Any], x0: float):
        """Stores the function and the expansion point.

        Args:
            function: The function to differentiate. The multicomplex engine
                calls it with a single ``MultiComplex`` argument.
            x0: Point at which derivatives are evaluated.
        """
        self.function = function
        self.x0 = x0
        self.default_method = "multicomplex"

    def differentiate(self, *, method: str | None = None, **kwargs: Any) -> Any:
        """Builds the selected engine and returns its ``differentiate(**kwargs)``.

        Args:
            method: Engine name or alias; ``default_method`` when omitted.
            **kwargs: Forwarded unchanged, e.g. ``order`` or ``stepsize``.

        Raises:
            ValueError: If ``method`` names no registered engine.
        """
        engine_cls = _resolve(method or self.default_method)
        return engine_cls(self.function, self.x0).differentiate(**kwargs)
