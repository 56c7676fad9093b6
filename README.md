# univariate

Small objects for real functions of one variable. Each is a
`univariate.base.Function`: evaluate it with `value(x)` or by calling it, and
get a readable description of its state as a string from `dump()`.

- `univariate.polynomial.Polynomial` — `c0 + c1*x + c2*x^2 + ...`, built from
  its coefficients in ascending order of power. `Polynomial()` with no
  coefficients is uninitialized: its `degree` is `-1` and evaluating it raises
  `FunctionError`. `assign(coefficients)` replaces the coefficients (an empty
  sequence raises `FunctionError`) and `reset()` makes it uninitialized again.
  Polynomials can be added with `+`, which returns a new polynomial, and
  compared with `==`, which compares the coefficient tuples.
- `univariate.power.Power` — `k * x**e`, with attributes `k` and `e`
  (both `1.0` by default). Where the result is not finite, such as zero to a
  negative power or a negative number to a fractional power, `value` returns
  an infinity or NaN instead of raising.
- `univariate.exponential.Exponential` — `k * base**(c*x)`, with attributes
  `base`, `k` and `c` (all `1.0` by default). The base must be positive:
  assigning a value `<= 0` issues a `UserWarning` and leaves the base
  unchanged.

`reset()` on `Power` and `Exponential` restores the defaults.
`univariate.base.FunctionError` is a subclass of `ValueError`.

## Example

```python
from univariate.polynomial import Polynomial
from univariate.power import Power
from univariate.exponential import Exponential

p = Polynomial([1.0, 0.0, 3.0])   # 1 + 3x^2
print(p(2.0))                     # 13.0
print(p.degree)                   # 2
print((p + Polynomial([0.0, 1.0])).coefficients)   # (1.0, 1.0, 3.0)
print(p.dump())
# Degree: 2
#  1 + 3x^2

w = Power(k=2.0, e=3.0)
print(w(2.0))                     # 16.0

e = Exponential(base=2.0, k=1.0, c=1.0)
print(e.value(3.0))               # 8.0
```

## Command line

```
univariate
```

This runs an interactive session on standard input. It asks for the size of
a polynomial (asking again while it is larger than ten) and its
coefficients, then for the base, coefficient and exponent of an exponential,
and the coefficient and exponent of a power function. It prints each
function, evaluates each one at `x = 2`, and checks copies and default
instances for equality. Input that is not a number, an empty polynomial, or
the end of input stops the session with an error message and exit status 1.

The same prompting is available to code through
`univariate.cli.read_polynomial(prompt_input, max_size)`, which takes any
function that maps a prompt string to a line of input.

## Tests

```
pip install .[test]
pytest
```