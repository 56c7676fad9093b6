"""Common interface for real functions of a single variable."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FunctionError(ValueError):
    """Raised when a function is in a state that cannot be evaluated or combined."""


class Function(ABC):
    """A real-valued function of one real variable."""

    @abstractmethod
    def value(self, x: float) -> float:
        """Return the value of the function at ``x``."""

    def __call__(self, x: float) -> float:
        return self.value(x)

    @abstractmethod
    def dump(self) -> str:
        """Return a human-readable description of the function's state."""