"""Polynomial, power and exponential functions of a single real variable, with an interactive command."""

__version__ = "0.1.0"
__all__ = ["base", "polynomial", "exponential", "power", "cli"]