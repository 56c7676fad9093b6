"""Polynomials given by their coefficients in increasing order of power."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest

from univariate.base import Function, FunctionError


class Polynomial(Function):
    """The polynomial c0 + c1*x + c2*x^2 + ...

    A polynomial built without coefficients is uninitialized: its degree
    is -1 and it cannot be evaluated.
    """

    def __init__(self, coefficients: Iterable[float] | None = None) -> None:
        self._coefficients: tuple[float, ...] = ()
        if coefficients is not None:
            self.assign(coefficients)

    @property
    def degree(self) -> int:
        """Degree of the polynomial, -1 when uninitialized."""
        return len(self._coefficients) - 1

    @property
    def coefficients(self) -> tuple[float, ...]:
        """Coefficients, lowest power first."""
        return self._coefficients

    def assign(self, coefficients: Iterable[float]) -> None:
        """Replace the coefficients; at least one is required."""
        values = tuple(float(c) for c in coefficients)
        if not values:
            raise FunctionError("the degree of the Polynomial cannot be negative")
        self._coefficients = values

    def reset(self) -> None:
        """Return to the uninitialized state."""
        self._coefficients = ()

    def value(self, x: float) -> float:
        if not self._coefficients:
            raise FunctionError("cannot evaluate an uninitialized Polynomial")
        first, *rest = self._coefficients
        result = first
        power = x
        for c in rest:
            result += c * power
            power *= x
        return result

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        summed = [
            a + b
            for a, b in zip_longest(
                self._coefficients, other._coefficients, fillvalue=0.0
            )
        ]
        return Polynomial(summed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"

    def dump(self) -> str:
        if not self._coefficients:
            return "Uninitialized polynomial"
        terms = []
        for power, c in enumerate(self._coefficients):
            if c == 0.0:
                continue
            prefix = " + " if c > 0 and power > 0 else " "
            term = f"{prefix}{c:g}"
            if power > 0:
                term += "x"
                if power > 1:
                    term += f"^{power}"
            terms.append(term)
        return f"Degree: {self.degree}\n{''.join(terms)}"