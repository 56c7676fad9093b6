"""Power functions k * x^e."""

from __future__ import annotations

import math

from univariate.base import Function


def _pow(x: float, e: float) -> float:
    """x ** e with IEEE results where the math module would raise."""
    try:
        return math.pow(x, e)
    except OverflowError:
        if x < 0 and e.is_integer() and int(e) % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0.0 and e < 0:
            if e.is_integer() and int(e) % 2 == 1:
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan


class Power(Function):
    """The function k * x ** e."""

    def __init__(self, k: float = 1.0, e: float = 1.0) -> None:
        self.k = float(k)
        self.e = float(e)

    def reset(self) -> None:
        """Restore the defaults: k and e both 1."""
        self.k = 1.0
        self.e = 1.0

    def value(self, x: float) -> float:
        return self.k * _pow(float(x), self.e)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Power):
            return NotImplemented
        return (self.k, self.e) == (other.k, other.e)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Power(k={self.k!r}, e={self.e!r})"

    def dump(self) -> str:
        return f"Coefficient: {self.k:g}\nExponent: {self.e:g}"