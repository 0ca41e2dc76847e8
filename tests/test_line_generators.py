# tests/test_line_generators.py
from __future__ import annotations

import pytest

from line_generators import (
    CycleGenerator,
    PiGenerator,
    build_ascii_sequence,
    new_generator,
    normalize_mode,
)
from pi_spigot import PiSpigot


class FixedDigits:
    """Digit source that replays a fixed sequence."""

    def __init__(self, digits):
        self.digits = list(digits)

    def next_digit(self) -> int:
        return self.digits.pop(0)


def test_ascii_sequence_is_printable_range():
    s = build_ascii_sequence()
    assert len(s) == 95
    assert s[0] == " "
    assert s[-1] == "~"


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        new_generator("bananas", "", 100)


def test_char_mode_requires_arg():
    with pytest.raises(ValueError):
        new_generator("char", "   ", 100)


def test_ascii_cycles_across_lines():
    g = new_generator("ascii", "", 1000)
    palette = build_ascii_sequence()
    width = 80

    line1 = g.next_line(width)
    assert len(line1) == width
    assert all(32 <= ord(ch) <= 126 for ch in line1)
    assert line1[0] == palette[0]
    assert line1[10] == palette[10]

    line2 = g.next_line(width)
    assert len(line2) == width
    assert line2[0] == palette[width % len(palette)]


def test_digits_mode():
    line = new_generator("digits", "", 1000).next_line(50)
    assert len(line) == 50
    assert line.startswith("0123456789")
    assert set(line) <= set("0123456789")


def test_upper_mode():
    line = new_generator("upper", "", 1000).next_line(52)
    assert line == "ABCDEFGHIJKLMNOPQRSTUVWXYZ" * 2


def test_char_mode_uses_first_character():
    g = new_generator("char", " #$ ", 1000)
    assert g.next_line(33) == "#" * 33


def test_pi_mode_maps_digits_onto_ascii_palette():
    g = new_generator("pi", "", 80)
    palette = build_ascii_sequence()
    want = "".join(palette[d] for d in [3, 1, 4, 1, 5, 9, 2, 6, 5, 3])
    assert g.next_line(10) == want
    assert want == '#!$!%)"&%#'


def test_adapter_output_depends_only_on_digits_and_palette():
    palette = build_ascii_sequence()
    g = PiGenerator(palette, FixedDigits([3, 1, 4, 1, 5, 9, 2, 6, 5, 3]))
    assert g.next_line(4) + g.next_line(6) == '#!$!%)"&%#'


def test_adapter_wraps_digits_modulo_palette_length():
    g = PiGenerator("ab", FixedDigits([0, 1, 2, 3, 9]))
    assert g.next_line(5) == "ababb"


def test_successive_lines_equal_one_long_pull():
    palette = build_ascii_sequence()
    g = PiGenerator(palette, PiSpigot(60))
    lines = "".join(g.next_line(7) for _ in range(5))

    spigot = PiSpigot(60)
    assert lines == "".join(palette[d] for d in spigot.take(35))


def test_cycle_generator_rejects_empty_palette():
    with pytest.raises(ValueError):
        CycleGenerator("")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", "ascii"),
        ("ASCII", "ascii"),
        ("digit", "digits"),
        ("Uppercase", "upper"),
        ("character", "char"),
        (" pi ", "pi"),
    ],
)
def test_normalize_mode_aliases(name, expected):
    assert normalize_mode(name) == expected


def test_normalize_mode_unknown():
    with pytest.raises(ValueError, match="unknown mode: bananas"):
        normalize_mode("Bananas")
