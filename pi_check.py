#!/usr/bin/env python3
"""
Cross-check the π spigot against an independent reference.

The reference digits come from Chudnovsky + binary splitting on gmpy2
(GMP/MPFR), which shares nothing with the spigot recurrence, so agreement
over N digits is a meaningful test of the spigot and of its capacity sizing.
"""

from __future__ import annotations

import sys
import time
from typing import List, Optional, Tuple

from gmpy2 import digits as mpz_digits
from gmpy2 import floor, get_context, mpfr, mpz, sqrt

from pi_spigot import PiSpigot

# C^3 / 24 for C = 640320
C3_OVER_24 = mpz("10939058860032000")
BITS_PER_DIGIT = 3.321928094887362  # log2(10)
GUARD_BITS = 256

SUFFIXES = {
    "k": 1_000,
    "m": 1_000_000,
    "g": 1_000_000_000,
    "t": 1_000_000_000_000,
}


# =========================
# Argument parsing
# =========================


def parse_digit_spec(spec: str) -> int:
    """
    Parse a digit count like "123", "1K", "10M", "2g" or "1e6".

    Suffixes are case-insensitive powers of 1000 (K, M, G, T).
    Raises ValueError on invalid input.
    """
    s = spec.strip()
    if not s:
        raise ValueError("Empty digits specification")

    if "e" in s.lower():
        mantissa_str, _, exp_str = s.lower().partition("e")
        if not mantissa_str or not exp_str:
            raise ValueError(f"Invalid scientific notation: {spec!r}")
        exp = int(exp_str)
        if exp < 0:
            raise ValueError(f"Negative exponent not supported in {spec!r}")
        value = int(mantissa_str) * 10 ** exp
    else:
        multiplier = SUFFIXES.get(s[-1].lower(), 1)
        if multiplier != 1:
            s = s[:-1].strip()
            if not s:
                raise ValueError(f"Missing number before suffix in {spec!r}")
        value = int(s) * multiplier

    if value <= 0:
        raise ValueError(f"Digits must be positive: {spec!r}")
    return value


def parse_args(argv: List[str]) -> Tuple[int, Optional[int]]:
    """
    Read (digits, capacity) from CLI arguments.

    Supported forms:
      pi_check.py               -> 1000 digits, capacity = digits
      pi_check.py 5K
      pi_check.py --digits 5K --capacity 6K
      pi_check.py -d 500 -c 400
    """
    digits: Optional[int] = None
    capacity: Optional[int] = None
    args = argv[1:]

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--digits", "-d", "--capacity", "-c"):
            if i + 1 >= len(args):
                raise ValueError(f"Flag {arg!r} requires a value")
            value = parse_digit_spec(args[i + 1])
            if arg in ("--digits", "-d"):
                digits = value
            else:
                capacity = value
            i += 2
        elif not arg.startswith("-") and digits is None:
            digits = parse_digit_spec(arg)
            i += 1
        else:
            raise ValueError(f"Unknown argument {arg!r}")

    return (1000 if digits is None else digits), capacity


# =========================
# Reference digits (Chudnovsky)
# =========================


def binary_split(a: int, b: int) -> Tuple[mpz, mpz, mpz]:
    """
    P(a, b), Q(a, b), T(a, b) of the Chudnovsky series, such that
      π = Q(0, N) * 426880 * sqrt(10005) / T(0, N)
    """
    if b - a == 1:
        if a == 0:
            return mpz(1), mpz(1), mpz(13591409)
        k = mpz(a)
        P = (6 * k - 5) * (2 * k - 1) * (6 * k - 1)
        Q = k * k * k * C3_OVER_24
        T = P * (545140134 * k + 13591409)
        if a % 2 == 1:
            T = -T
        return P, Q, T

    m = (a + b) // 2
    P1, Q1, T1 = binary_split(a, m)
    P2, Q2, T2 = binary_split(m, b)
    return P1 * P2, Q1 * Q2, Q2 * T1 + P1 * T2


def reference_digits(count: int) -> str:
    """
    Return the first `count` digits of π with no decimal point ("31415...").

    The last digit is floor-truncated, not rounded.
    """
    if count <= 0:
        raise ValueError("count must be positive")

    decimals = count - 1
    # ~14 digits per Chudnovsky term
    _P, Q, T = binary_split(0, decimals // 14 + 1)

    ctx = get_context()
    ctx.precision = int(count * BITS_PER_DIGIT) + GUARD_BITS

    pi = mpfr(Q) * 426880 * sqrt(mpfr(10005)) / mpfr(T)
    scaled = mpz(floor(pi * mpfr(10) ** decimals))
    return mpz_digits(scaled, 10)[:count]


# =========================
# Comparison
# =========================


def first_mismatch(expected: str, actual: str) -> Optional[int]:
    """Index of the first differing position, or None if they agree."""
    for i, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            return i
    if len(expected) != len(actual):
        return min(len(expected), len(actual))
    return None


def spigot_digits(count: int, capacity: Optional[int] = None) -> str:
    spigot = PiSpigot(count if capacity is None else capacity)
    return "".join(str(d) for d in spigot.take(count))


def check_spigot(count: int, capacity: Optional[int] = None) -> Optional[int]:
    """Compare `count` spigot digits with the reference; return the first mismatch."""
    return first_mismatch(reference_digits(count), spigot_digits(count, capacity))


def main(argv: List[str]) -> int:
    try:
        digits, capacity = parse_args(argv)
    except ValueError as e:
        prog = argv[0] if argv else "pi_check.py"
        sys.stderr.write(f"Error: {e}\n")
        sys.stderr.write("Usage examples:\n")
        sys.stderr.write(f"  {prog}\n")
        sys.stderr.write(f"  {prog} 5K\n")
        sys.stderr.write(f"  {prog} --digits 5K --capacity 6K\n")
        return 1

    cap = digits if capacity is None else capacity
    print(f"Checking {digits} spigot digits (capacity {cap}) against Chudnovsky + gmpy2...")

    start = time.perf_counter()
    expected = reference_digits(digits)
    ref_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    actual = spigot_digits(digits, capacity)
    spigot_elapsed = time.perf_counter() - start

    print(f"Reference: {ref_elapsed:.6f} s")
    print(f"Spigot:    {spigot_elapsed:.6f} s")

    pos = first_mismatch(expected, actual)
    if pos is not None:
        print(f"MISMATCH at digit {pos + 1}: expected {expected[pos]}, got {actual[pos]}")
        return 1

    print("OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
