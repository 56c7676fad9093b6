"""Interactive command that builds and compares polynomial, exponential and power functions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from univariate.base import FunctionError
from univariate.exponential import Exponential
from univariate.polynomial import Polynomial
from univariate.power import Power

MAX_SIZE = 10

Prompt = Callable[[str], str]


def _read_int(prompt_input: Prompt, prompt: str) -> int:
    text = prompt_input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"not an integer: {text!r}") from None


def _read_float(prompt_input: Prompt, prompt: str) -> float:
    text = prompt_input(prompt).strip()
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None


def read_polynomial(prompt_input: Prompt, max_size: int) -> Polynomial:
    """Ask for a size (re-asking while it exceeds ``max_size``) and the coefficients."""
    size = _read_int(prompt_input, "Type the dimension of the polynomial: ")
    while size > max_size:
        print("The dimension of the Polynomial is greater than the array's")
        size = _read_int(prompt_input, "Type again the dimension of the Polynomial: ")
    print("Type the value of the coefficients:")
    coefficients = [
        _read_float(prompt_input, f"Type the coefficient {i}: ") for i in range(size)
    ]
    return Polynomial(coefficients)


def _report_equal(left: str, right: str, equal: bool) -> None:
    if equal:
        print(f"{left} is equal to {right}")
    else:
        print(f"{left} and {right} are different")


def _dump(title: str, text: str) -> None:
    print(f"---Dump {title}---")
    print(text)
    print()


def _run(prompt_input: Prompt) -> None:
    e2 = Exponential()
    pw2 = Power()

    print(
        "Two objects for class Power (PW and PW2) and Exponential (E and E2) "
        "and one for Polynomial (PL) (later)"
    )
    pl = read_polynomial(prompt_input, MAX_SIZE)
    print()

    print("INSTANTIATE A NEW OBJECT OF CLASS POLYNOMIAL PL1 = TO PL")
    pl1 = Polynomial(pl.coefficients)
    print("Check that the copy has been successful: PL1 == PL")
    _report_equal("PL1", "PL", pl1 == pl)
    print()
    _dump("Polynomial", pl.dump())
    _dump("Polynomial", pl1.dump())
    print(f"The value of PL1 calculated for x=2 is: {pl1.value(2.0):g}")
    print()

    print("--- CHANGE THE VALUES OF E ---")
    e = Exponential()
    e.base = _read_float(prompt_input, "Type the base: ")
    e.k = _read_float(prompt_input, "Type the coefficient: ")
    e.c = _read_float(prompt_input, "Type the exponent: ")
    print()
    _dump("Exponential", e.dump())
    print(f"The value of E calculated for x=2 is: {e.value(2.0):g}")
    print()
    print("Check that E and E2 are different")
    _report_equal("E2", "E", e == e2)
    print()

    print("INSTANTIATE A NEW OBJECT OF CLASS EXPONENTIAL E1 = TO E")
    e1 = Exponential(e.base, e.k, e.c)
    print("Check that the copy has been successful: E1 == E")
    _report_equal("E1", "E", e1 == e)
    print()
    _dump("Exponential", e.dump())
    _dump("Exponential", e1.dump())
    print(f"The value of E1 for x=2 is: {e1.value(2.0):g}")
    print(f"The value of E for x=2 is: {e.value(2.0):g}")
    print()

    print("--- CHANGE THE VALUE OF PW ---")
    pw = Power()
    pw.k = _read_float(prompt_input, "Type the coefficient: ")
    pw.e = _read_float(prompt_input, "Type the exponent: ")
    print()
    _dump("Power", pw.dump())
    print(f"The value of PW for x=2 is: {pw.value(2.0):g}")
    print()
    print("Check that PW and PW2 are different")
    _report_equal("PW2", "PW", pw == pw2)
    print()

    print("INSTANTIATE A NEW OBJECT OF CLASS POWER PW1 = TO PW")
    pw1 = Power(pw.k, pw.e)
    print("Check that the copy has been successful: PW1 == PW")
    _report_equal("PW1", "PW", pw1 == pw)
    print()
    _dump("Power", pw.dump())
    _dump("Power", pw1.dump())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive session on standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="univariate",
        description="Build a polynomial, an exponential and a power function "
        "from typed values, then evaluate and compare them.",
    )
    parser.parse_args(argv)
    try:
        _run(input)
    except (FunctionError, ValueError, EOFError) as exc:
        message = str(exc) or "unexpected end of input"
        print(f"error: {message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())