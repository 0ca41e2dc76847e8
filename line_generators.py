"""
Line generators: produce fixed-width lines of printable characters.

Modes:
  ascii   cycle through printable ASCII (32..126)
  digits  cycle through 0..9
  upper   cycle through A..Z
  char    repeat one character
  pi      digits of π mapped onto the printable ASCII palette
"""

from __future__ import annotations

from typing import Protocol

from pi_spigot import PiSpigot

DIGITS = "0123456789"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MODE_ALIASES = {
    "": "ascii",
    "ascii": "ascii",
    "digit": "digits",
    "digits": "digits",
    "upper": "upper",
    "uppercase": "upper",
    "char": "char",
    "character": "char",
    "pi": "pi",
}


def build_ascii_sequence() -> str:
    """Return the printable ASCII characters 32..126 (95 of them)."""
    return "".join(chr(i) for i in range(32, 127))


def normalize_mode(name: str) -> str:
    """Map a user-supplied mode name (or alias) onto its canonical name."""
    key = name.strip().lower()
    if key not in MODE_ALIASES:
        raise ValueError(f"unknown mode: {key}")
    return MODE_ALIASES[key]


class Generator(Protocol):
    def next_line(self, width: int) -> str: ...


class CycleGenerator:
    """Cycle through a fixed palette; the position carries over between lines."""

    def __init__(self, palette: str) -> None:
        if not palette:
            raise ValueError("palette cannot be empty")
        self.palette = palette
        self.pos = 0

    def next_line(self, width: int) -> str:
        n = len(self.palette)
        out = [self.palette[(self.pos + i) % n] for i in range(width)]
        self.pos += width
        return "".join(out)


class SingleCharGenerator:
    def __init__(self, ch: str) -> None:
        self.ch = ch

    def next_line(self, width: int) -> str:
        return self.ch * width


class PiGenerator:
    """Map each digit pulled from a PiSpigot onto `palette` by index."""

    def __init__(self, palette: str, spigot: PiSpigot) -> None:
        if not palette:
            raise ValueError("palette cannot be empty")
        self.palette = palette
        self.spigot = spigot

    def next_line(self, width: int) -> str:
        n = len(self.palette)
        return "".join(self.palette[self.spigot.next_digit() % n] for _ in range(width))


def new_generator(mode: str, mode_arg: str = "", total_chars: int = 0) -> Generator:
    """
    Construct a Generator for `mode`.

    `total_chars` is only used to size the spigot in pi mode; it should be
    the total number of characters the caller will pull (lines * width).
    """
    if mode == "ascii":
        return CycleGenerator(build_ascii_sequence())
    if mode == "digits":
        return CycleGenerator(DIGITS)
    if mode == "upper":
        return CycleGenerator(UPPERCASE)
    if mode == "char":
        mode_arg = mode_arg.strip()
        if not mode_arg:
            raise ValueError("mode=char requires modeArg")
        return SingleCharGenerator(mode_arg[0])
    if mode == "pi":
        return PiGenerator(build_ascii_sequence(), PiSpigot(max(total_chars, 1)))
    raise ValueError(f"unknown mode: {mode}")
