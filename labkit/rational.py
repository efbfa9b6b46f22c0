"""Rational numbers kept in lowest terms with a positive denominator."""

from __future__ import annotations

import functools
import math
import operator
import re
from typing import Callable

_PATTERN = re.compile(r"\s*([+-]?\d+)/(\d+)")


def _as_rational(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    return None


def _rational_operand(method: Callable) -> Callable:
    """Turn an int operand into a Rational; defer to Python for anything else."""

    @functools.wraps(method)
    def wrapper(self: Rational, other: object):
        operand = _as_rational(other)
        if operand is None:
            return NotImplemented
        return method(self, operand)

    return wrapper


class Rational:
    """An exact fraction ``num/den``."""

    __slots__ = ("_num", "_den")

    SEPARATOR = "/"

    def __init__(self, num: int = 0, den: int = 1) -> None:
        num = operator.index(num)
        den = operator.index(den)
        if den == 0:
            raise ValueError("Zero denominator in Rational")
        if den < 0:
            num, den = -num, -den
        divisor = math.gcd(num, den)
        self._num = num // divisor
        self._den = den // divisor

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"

    def __str__(self) -> str:
        return f"{self._num}{self.SEPARATOR}{self._den}"

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def _cross(self, other: Rational) -> tuple[int, int]:
        return self._num * other._den, other._num * self._den

    @_rational_operand
    def __eq__(self, other):
        return operator.eq(*self._cross(other))

    @_rational_operand
    def __gt__(self, other):
        return operator.gt(*self._cross(other))

    @_rational_operand
    def __ge__(self, other):
        return operator.ge(*self._cross(other))

    @_rational_operand
    def __le__(self, other):
        return operator.le(*self._cross(other))

    @_rational_operand
    def __lt__(self, other):
        # Defined as the negation of ">", so equal values also compare as less.
        return not self > other

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __abs__(self) -> Rational:
        return Rational(abs(self._num), self._den)

    @_rational_operand
    def __add__(self, other):
        return Rational(self._num * other._den + self._den * other._num, self._den * other._den)

    @_rational_operand
    def __radd__(self, other):
        return other + self

    @_rational_operand
    def __sub__(self, other):
        return Rational(self._num * other._den - self._den * other._num, self._den * other._den)

    @_rational_operand
    def __rsub__(self, other):
        return other - self

    @_rational_operand
    def __mul__(self, other):
        return Rational(self._num * other._num, self._den * other._den)

    @_rational_operand
    def __rmul__(self, other):
        return other * self

    @_rational_operand
    def __truediv__(self, other):
        if other._num == 0:
            raise ZeroDivisionError("Division by zero")
        return Rational(self._num * other._den, self._den * other._num)

    @_rational_operand
    def __rtruediv__(self, other):
        return other / self

    def pow(self, n: int) -> Rational:
        """Raise to an integer power; zero to the zero power is an error."""
        n = operator.index(n)
        if self._num == 0 and n == 0:
            raise ValueError("Zero to the zero degree")
        if n < 0:
            if self._num == 0:
                raise ZeroDivisionError("Division by zero")
            return Rational(self._den**-n, self._num**-n)
        return Rational(self._num**n, self._den**n)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read ``num/den`` with a positive denominator directly after the slash."""
        match = _PATTERN.match(text)
        if match is None or int(match.group(2)) <= 0:
            raise ValueError(f"cannot parse rational number from {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))