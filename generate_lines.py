#!/usr/bin/env python3
"""
GenerateLines: write a text file with N lines of repeatable content.

- Positional arguments, with interactive prompts for anything missing.
- Content modes: ascii, digits, upper, char, pi (see line_generators).
- Pi mode streams digits from a spigot, so memory stays bounded by the
  requested size rather than the whole expansion.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from line_generators import new_generator, normalize_mode

DEFAULT_WIDTH = 80
DEFAULT_MODE = "ascii"
AUTHOR_NAME = "Christian K. Bjørnsrud"
REPO_URL = "https://github.com/CKB78/GenerateLines"
VERSION = "1.0.0"

WRITE_BUFFER_SIZE = 64 * 1024

VERSION_ARGS = ("version", "-v", "--version", "/v")
HELP_ARGS = ("/?", "help", "-h", "--help")
YES = ("y", "yes")
NO = ("n", "no")


# =========================
# Help text
# =========================


def help_hint() -> str:
    """Return the preferred help command hint for the current OS."""
    if os.name == "nt":
        return 'Tip: run "generatelines /?" for parameters and modes.'
    return 'Tip: run "generatelines -h" for parameters and modes.'


def help_text() -> str:
    return f"""GenerateLines v{VERSION}
Author: {AUTHOR_NAME}
Repository: {REPO_URL}

Generate a text file with N lines of repeatable content.

Usage:
  generatelines <lines> <filename> [y|n] [width] [mode] [modeArg]
  generatelines /?
  generatelines help
  generatelines -h
  generatelines --help
  generatelines version
  generatelines --version

Parameters (positional):
  lines        Number of lines to generate (required unless prompted)
  filename     Output file name (required unless prompted)

Optional parameters:
  y | n        Auto-answer overwrite prompt if file already exists
  width        Line width (columns). Default: {DEFAULT_WIDTH}
  mode         Content generation mode. Default: {DEFAULT_MODE}
  modeArg      Additional argument for selected mode

Modes:
  ascii        Printable ASCII characters (32–126)
  digits       Digits 0–9
  upper        Uppercase letters A–Z
  char         Repeat a single character (requires modeArg)
               Example: generatelines 100 out.txt y 80 char #
  pi           Digits of pi mapped to printable ASCII characters
               Total digits generated = lines × width

Notes:
  - If parameters are omitted, the program will prompt interactively.
  - Defaults are width={DEFAULT_WIDTH} and mode={DEFAULT_MODE}.

Examples:
  generatelines 1000 lines.txt
  generatelines 1000 lines.txt y
  generatelines 1000 uppercase.txt y 120 upper
  generatelines 1000 characters.txt y 80 char #
  generatelines 1000 pi.txt n 80 pi
"""


# =========================
# Argument parsing
# =========================


@dataclass
class LineArgs:
    lines: int
    filename: str
    overwrite_flag: str = ""
    width: int = DEFAULT_WIDTH
    mode: str = DEFAULT_MODE
    mode_arg: str = ""
    used_default_width: bool = True
    used_default_mode: bool = True


def parse_positive_int(s: str) -> int:
    """Parse `s` as an integer > 0. Raises ValueError otherwise."""
    n = int(s.strip())
    if n <= 0:
        raise ValueError("must be > 0")
    return n


def looks_like_yes_no(s: str) -> bool:
    return s.strip().lower() in YES + NO


def parse_yes_no(s: str) -> bool:
    """True for y/yes (any case), False for everything else."""
    return s.strip().lower() in YES


def prompt_line(stdin: TextIO, prompt: str) -> str:
    """
    Print `prompt` and read one line from `stdin`.

    A final line without a trailing newline is accepted; EOF with nothing
    read raises EOFError.
    """
    print(prompt, end="", flush=True)
    text = stdin.readline()
    if not text:
        raise EOFError("unexpected end of input")
    return text.strip()


def prompt_yes_no(stdin: TextIO, prompt: str) -> bool:
    """Ask until a y/yes/n/no answer is given."""
    while True:
        s = prompt_line(stdin, prompt).lower()
        if s in YES:
            return True
        if s in NO:
            return False
        print("Please answer y or n.")


def get_args_or_prompt(args: List[str], stdin: Optional[TextIO] = None) -> LineArgs:
    """
    Parse positional arguments, prompting on `stdin` for lines and filename
    when they are missing.

    Raises ValueError on invalid input, EOFError if a prompt hits end of input.
    """
    if stdin is None:
        stdin = sys.stdin

    if len(args) == 0:
        lines_str = prompt_line(stdin, "Enter number of lines: ")
        file_str = prompt_line(stdin, "Enter filename: ")
    elif len(args) == 1:
        lines_str = args[0]
        file_str = prompt_line(stdin, "Enter filename: ")
    else:
        lines_str, file_str = args[0], args[1]

    try:
        lines = parse_positive_int(lines_str)
    except ValueError:
        raise ValueError(
            f'invalid number of lines: "{lines_str.strip()}" (expected a positive integer)'
        ) from None

    filename = file_str.strip()
    if not filename:
        raise ValueError("filename cannot be empty")

    parsed = LineArgs(lines=lines, filename=filename)
    rest = list(args[2:])

    if rest and looks_like_yes_no(rest[0]):
        parsed.overwrite_flag = rest.pop(0)

    if rest:
        try:
            parsed.width = parse_positive_int(rest[0])
        except ValueError:
            pass
        else:
            parsed.used_default_width = False
            rest.pop(0)

    if rest:
        parsed.mode = rest.pop(0).strip().lower()
        parsed.used_default_mode = False

    if rest:
        parsed.mode_arg = rest[0]

    parsed.mode = normalize_mode(parsed.mode)

    if parsed.mode == "char":
        parsed.mode_arg = parsed.mode_arg.strip()
        if not parsed.mode_arg:
            raise ValueError("mode=char requires modeArg")

    return parsed


def default_note(parsed: LineArgs) -> str:
    if parsed.used_default_width and parsed.used_default_mode:
        return " [using default width and mode]"
    if parsed.used_default_width:
        return " [using default width]"
    if parsed.used_default_mode:
        return " [using default mode]"
    return ""


# =========================
# Output
# =========================


def write_lines(path: str, parsed: LineArgs, overwrite: bool) -> None:
    """Generate `parsed.lines` lines and write them to `path`."""
    gen = new_generator(parsed.mode, parsed.mode_arg, parsed.lines * parsed.width)

    # "x" refuses to clobber a file that appeared after the existence check.
    mode = "w" if overwrite else "x"
    with open(path, mode, encoding="utf-8", newline="\n", buffering=WRITE_BUFFER_SIZE) as out:
        for _ in range(parsed.lines):
            out.write(gen.next_line(parsed.width))
            out.write("\n")


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    if argv is None:
        argv = sys.argv
    if stdin is None:
        stdin = sys.stdin
    args = argv[1:]  # skip program name

    if args:
        first = args[0].strip().lower()
        if first in VERSION_ARGS:
            print(f"GenerateLines {VERSION}")
            return 0
        if first in HELP_ARGS:
            print(help_text(), end="")
            return 0
    else:
        print(help_hint())
        print()

    try:
        parsed = get_args_or_prompt(args, stdin)
    except (ValueError, EOFError) as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.stderr.write(f"{help_hint()}\n")
        return 1

    filename = parsed.filename
    overwrite = False

    if os.path.exists(filename):
        if parsed.overwrite_flag:
            overwrite = parse_yes_no(parsed.overwrite_flag)
            if not overwrite:
                print(f"{filename} already exists. Not overwriting. Exiting.")
                return 0
            print(f"{filename} already exists. Overwriting...")
        else:
            try:
                overwrite = prompt_yes_no(stdin, f"{filename} already exists. Overwrite? [y/n]: ")
            except EOFError as e:
                sys.stderr.write(f"Error: {e}\n")
                return 1
            if not overwrite:
                print("Not overwriting. Exiting.")
                return 0

    total_chars = parsed.lines * parsed.width
    if parsed.mode == "pi":
        print(
            f"Mode=pi will generate {total_chars} digits "
            f"({parsed.lines} lines × {parsed.width} cols)"
        )

    print(
        f"Generating {parsed.lines} lines (width={parsed.width}, mode={parsed.mode})"
        f"{default_note(parsed)} -> {filename}"
    )

    try:
        write_lines(filename, parsed, overwrite)
    except (OSError, ValueError) as e:
        sys.stderr.write(f"Error writing {filename}: {e}\n")
        return 1

    print("Done!")
    return 0


def run() -> None:
    raise SystemExit(main(sys.argv))


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
