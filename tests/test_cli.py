import io
import sys

import pytest

from univariate.base import FunctionError
from univariate.cli import MAX_SIZE, main, read_polynomial
from univariate.exponential import Exponential
from univariate.polynomial import Polynomial
from univariate.power import Power


def _answers(*values):
    prompts = []
    queue = list(values)

    def prompt_input(prompt):
        prompts.append(prompt)
        if not queue:
            raise EOFError
        return queue.pop(0)

    return prompt_input, prompts


def _feed(monkeypatch, lines):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n".join(lines) + "\n"))


def test_read_polynomial_builds_from_answers():
    prompt_input, prompts = _answers("3", "1", "2.5", "-4")
    poly = read_polynomial(prompt_input, 10)
    assert poly == Polynomial([1.0, 2.5, -4.0])
    assert len(prompts) == 4
    assert "coefficient 2" in prompts[-1]


def test_read_polynomial_reasks_when_too_large(capsys):
    prompt_input, prompts = _answers("12", "11", "2", "5", "6")
    poly = read_polynomial(prompt_input, 10)
    assert poly.coefficients == (5.0, 6.0)
    assert len(prompts) == 5
    out = capsys.readouterr().out
    assert out.count("greater than the array's") == 2


def test_read_polynomial_accepts_max_size():
    values = [str(i) for i in range(MAX_SIZE)]
    prompt_input, _ = _answers(str(MAX_SIZE), *values)
    poly = read_polynomial(prompt_input, MAX_SIZE)
    assert poly.degree == MAX_SIZE - 1


@pytest.mark.parametrize("size", ["0", "-3"])
def test_read_polynomial_rejects_non_positive_size(size):
    prompt_input, _ = _answers(size)
    with pytest.raises(FunctionError):
        read_polynomial(prompt_input, 10)


def test_read_polynomial_rejects_bad_number():
    prompt_input, _ = _answers("2", "1", "abc")
    with pytest.raises(ValueError):
        read_polynomial(prompt_input, 10)


def test_read_polynomial_rejects_bad_size():
    prompt_input, _ = _answers("two")
    with pytest.raises(ValueError):
        read_polynomial(prompt_input, 10)


def test_main_full_session(monkeypatch, capsys):
    _feed(monkeypatch, ["3", "1", "2", "3", "2", "3", "1", "4", "2"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "PL1 is equal to PL" in out
    poly_value = Polynomial([1, 2, 3]).value(2.0)
    assert f"The value of PL1 calculated for x=2 is: {poly_value:g}" in out
    exp_value = Exponential(2, 3, 1).value(2.0)
    assert f"The value of E calculated for x=2 is: {exp_value:g}" in out
    assert f"The value of E1 for x=2 is: {exp_value:g}" in out
    assert "E2 and E are different" in out
    assert "E1 is equal to E" in out
    pow_value = Power(4, 2).value(2.0)
    assert f"The value of PW for x=2 is: {pow_value:g}" in out
    assert "PW2 and PW are different" in out
    assert "PW1 is equal to PW" in out


def test_main_defaults_compare_equal(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "7", "1", "1", "1", "1", "1"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "E2 is equal to E" in out
    assert "PW2 is equal to PW" in out


def test_main_invalid_base_keeps_default(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "7", "-1", "1", "1", "1", "1"])
    with pytest.warns(UserWarning):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "E2 is equal to E" in out


def test_main_reports_error_for_empty_polynomial(monkeypatch, capsys):
    _feed(monkeypatch, ["0"])
    assert main([]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error:")
    assert "negative" in err