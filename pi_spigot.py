#!/usr/bin/env python3
"""
Streaming decimal digits of π using the Rabinowitz-Wagon spigot.

- Pure Python 3, integer-only arithmetic.
- Working memory is fixed at construction (~capacity * 10/3 small ints),
  independent of how many digits have already been produced.
- Runs of 9 are held back until a later round decides whether a carry
  rolls them over to 0.
"""

from __future__ import annotations

import warnings
from collections import deque
from typing import Deque, Iterator, List


class PrecisionWarning(UserWarning):
    """More digits were requested than the spigot was sized for."""


# =========================
# Spigot
# =========================


class PiSpigot:
    """
    Produce the digits of π (3, 1, 4, 1, 5, ...) one at a time.

    `capacity` is the number of digits the caller intends to pull. It fixes
    the size of the remainder table and therefore the precision; digits past
    `capacity` are still produced, but may be wrong near the tail.
    """

    def __init__(self, capacity: int) -> None:
        capacity = int(capacity)
        if capacity < 1:
            capacity = 1

        self._capacity = capacity
        self._state: List[int] = [2] * (capacity * 10 // 3 + 1)
        self._pending: Deque[int] = deque()
        self._nines = 0
        self._latched = 0
        self._emitted = False
        self._released = 0
        self._warned = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def released(self) -> int:
        """Number of digits handed out so far."""
        return self._released

    def next_digit(self) -> int:
        """Return the next digit of π (0..9)."""
        while not self._pending:
            self._advance()

        self._released += 1
        if self._released > self._capacity and not self._warned:
            self._warned = True
            warnings.warn(
                f"digit {self._released} requested from a spigot sized for "
                f"{self._capacity}; remaining digits may be inaccurate",
                PrecisionWarning,
                stacklevel=2,
            )
        return self._pending.popleft()

    def take(self, count: int) -> List[int]:
        """Return the next `count` digits as a list."""
        return [self.next_digit() for _ in range(count)]

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next_digit()

    # -------------------------
    # Internals
    # -------------------------

    def _advance(self) -> int:
        """
        Run one round of the recurrence and queue whatever it settles.

        Returns the number of digits appended to the pending queue.
        """
        a = self._state
        q = 0
        for i in range(len(a) - 1, -1, -1):
            x = 10 * a[i] + q * (i + 1)
            den = 2 * i + 1
            a[i] = x % den
            q = x // den
        a[0] = q % 10
        q //= 10

        before = len(self._pending)
        if q == 9:
            # Undecided until a later round says carry or no carry.
            self._nines += 1
        elif q == 10:
            self._settle(self._latched + 1, 0)
            self._latched = 0
        else:
            self._settle(self._latched, 9)
            self._latched = q
        return len(self._pending) - before

    def _settle(self, digit: int, fill: int) -> None:
        self._queue(digit)
        for _ in range(self._nines):
            self._queue(fill)
        self._nines = 0

    def _queue(self, digit: int) -> None:
        # The first round settles the initial latched 0 before the 3 is known.
        if not self._emitted:
            if digit == 0:
                return
            self._emitted = True
        self._pending.append(digit)
