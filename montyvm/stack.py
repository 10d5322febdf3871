"""The Monty data structure: a stack that can also behave as a queue."""

import sys
from collections import deque
from enum import IntEnum

from .errors import (
    DivisionByZeroError,
    EmptyStackError,
    PcharError,
    ShortStackError,
)


class Mode(IntEnum):
    """Where ``push`` inserts new values."""

    STACK = 0
    QUEUE = 1


def _trunc_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a, b):
    return a - b * _trunc_div(a, b)


class MontyStack:
    """Integer stack with the Monty opcodes as methods.

    Iteration goes from the top element to the bottom one. Output from the
    printing opcodes goes to ``out`` (standard output when ``None``).
    """

    def __init__(self, out=None):
        self._items = deque()
        self._out = out
        self.mode = Mode.STACK

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def _write(self, text):
        (self._out if self._out is not None else sys.stdout).write(text)

    def _require_two(self, op):
        if len(self._items) < 2:
            raise ShortStackError(op)

    def _combine(self, op, func, check_zero=False):
        self._require_two(op)
        top = self._items[0]
        if check_zero and top == 0:
            raise DivisionByZeroError()
        self._items.popleft()
        self._items[0] = func(self._items[0], top)

    def push(self, value):
        """Add a value at the top (stack mode) or the bottom (queue mode)."""
        if self.mode is Mode.STACK:
            self._items.appendleft(value)
        else:
            self._items.append(value)

    def pall(self):
        """Print every value, top first, one per line."""
        for value in self._items:
            self._write(f"{value}\n")

    def pint(self):
        """Print the top value."""
        if not self._items:
            raise EmptyStackError("pint")
        self._write(f"{self._items[0]}\n")

    def pop(self):
        """Remove the top value and return it."""
        if not self._items:
            raise EmptyStackError("pop")
        return self._items.popleft()

    def swap(self):
        """Exchange the top two values."""
        self._require_two("swap")
        self._items[0], self._items[1] = self._items[1], self._items[0]

    def add(self):
        """Replace the top two values with their sum."""
        self._combine("add", lambda second, top: second + top)

    def sub(self):
        """Replace the top two values with the second minus the top."""
        self._combine("sub", lambda second, top: second - top)

    def div(self):
        """Replace the top two values with the second divided by the top.

        The quotient is truncated toward zero.
        """
        self._combine("div", _trunc_div, check_zero=True)

    def mul(self):
        """Replace the top two values with their product."""
        self._combine("mul", lambda second, top: second * top)

    def mod(self):
        """Replace the top two values with the remainder of second / top.

        The remainder takes the sign of the second value.
        """
        self._combine("mod", _trunc_mod, check_zero=True)

    def nop(self):
        """Do nothing."""

    def pchar(self):
        """Print the top value as an ASCII character."""
        if not self._items:
            raise PcharError("stack empty")
        value = self._items[0]
        if not 0 <= value <= 127:
            raise PcharError("value out of range")
        self._write(f"{chr(value)}\n")

    def pstr(self):
        """Print values from the top as characters until a 0 or non-ASCII one."""
        chars = []
        for value in self._items:
            if not 0 < value <= 127:
                break
            chars.append(chr(value))
        self._write("".join(chars) + "\n")

    def rotl(self):
        """Move the top value to the bottom."""
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def rotr(self):
        """Move the bottom value to the top."""
        if len(self._items) >= 2:
            self._items.rotate(1)

    def set_mode(self, mode):
        """Switch between stack (LIFO) and queue (FIFO) insertion."""
        self.mode = Mode(mode)