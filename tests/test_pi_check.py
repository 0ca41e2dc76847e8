# tests/test_pi_check.py
from __future__ import annotations

import pytest

import pi_check
from pi_spigot import PrecisionWarning

PI_50 = "31415926535897932384626433832795028841971693993751"


def test_reference_digits_prefix():
    assert pi_check.reference_digits(50) == PI_50
    assert pi_check.reference_digits(1) == "3"


def test_reference_digits_rejects_non_positive():
    with pytest.raises(ValueError):
        pi_check.reference_digits(0)


def test_spigot_matches_reference_with_headroom():
    assert pi_check.check_spigot(1000, capacity=1020) is None


def test_undersized_spigot_is_detected():
    with pytest.warns(PrecisionWarning):
        pos = pi_check.check_spigot(300, capacity=10)
    assert pos is not None


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("314", "314", None),
        ("314", "315", 2),
        ("314", "31", 2),
        ("", "", None),
    ],
)
def test_first_mismatch(a, b, expected):
    assert pi_check.first_mismatch(a, b) == expected


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("123", 123),
        ("1K", 1_000),
        ("10m", 10_000_000),
        ("2G", 2_000_000_000),
        ("1e6", 1_000_000),
        ("3E2", 300),
        (" 7 ", 7),
    ],
)
def test_parse_digit_spec(spec, expected):
    assert pi_check.parse_digit_spec(spec) == expected


@pytest.mark.parametrize("spec", ["", "K", "0", "-5", "1e-3", "e5", "abc"])
def test_parse_digit_spec_invalid(spec):
    with pytest.raises(ValueError):
        pi_check.parse_digit_spec(spec)


def test_parse_args_forms():
    assert pi_check.parse_args(["pi_check.py"]) == (1000, None)
    assert pi_check.parse_args(["pi_check.py", "2K"]) == (2000, None)
    assert pi_check.parse_args(["pi_check.py", "-d", "500", "--capacity", "600"]) == (500, 600)


def test_parse_args_missing_value():
    with pytest.raises(ValueError):
        pi_check.parse_args(["pi_check.py", "--digits"])


def test_main_ok(capsys):
    assert pi_check.main(["pi_check.py", "200", "-c", "220"]) == 0
    assert capsys.readouterr().out.rstrip().endswith("OK")


def test_main_bad_args(capsys):
    assert pi_check.main(["pi_check.py", "--bogus"]) == 1
    assert "Error:" in capsys.readouterr().err
