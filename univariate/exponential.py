"""Exponential functions k * b^(c*x)."""

from __future__ import annotations

import math
import warnings

from univariate.base import Function


class Exponential(Function):
    """The function k * base ** (c * x) with a strictly positive base."""

    def __init__(self, base: float = 1.0, k: float = 1.0, c: float = 1.0) -> None:
        self._base = 1.0
        self.base = base
        self.k = float(k)
        self.c = float(c)

    @property
    def base(self) -> float:
        """The base; assigning a value <= 0 warns and leaves it unchanged."""
        return self._base

    @base.setter
    def base(self, b: float) -> None:
        if b <= 0.0:
            warnings.warn(
                "base should not be <= 0; value not changed",
                UserWarning,
                stacklevel=2,
            )
            return
        self._base = float(b)

    def reset(self) -> None:
        """Restore the defaults: base, k and c all 1."""
        self._base = 1.0
        self.k = 1.0
        self.c = 1.0

    def value(self, x: float) -> float:
        try:
            growth = math.pow(self._base, self.c * x)
        except OverflowError:
            growth = math.inf
        return self.k * growth

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Exponential):
            return NotImplemented
        return (self._base, self.k, self.c) == (other._base, other.k, other.c)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Exponential(base={self._base!r}, k={self.k!r}, c={self.c!r})"

    def dump(self) -> str:
        return "\n".join(
            (
                f"Base: {self._base:g}",
                f"Coefficient: {self.k:g}",
                f"Exponent: {self.c:g}",
            )
        )