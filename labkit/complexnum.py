"""Complex numbers with tolerant equality and a brace-delimited text form."""

from __future__ import annotations

import re
import sys

_EPS = 2 * sys.float_info.epsilon

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_PATTERN = re.compile(rf"\s*\{{\s*({_NUMBER})\s*,\s*({_NUMBER})\s*\}}")


class Complex:
    """A complex number ``re + im*i`` stored as two floats."""

    __slots__ = ("re", "im")

    LEFT_BRACE = "{"
    SEPARATOR = ","
    RIGHT_BRACE = "}"

    def __init__(self, re: float = 0.0, im: float = 0.0) -> None:
        self.re = float(re)
        self.im = float(im)

    @staticmethod
    def _coerce(value: object) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, (int, float)):
            return Complex(value)
        return None

    def __repr__(self) -> str:
        return f"Complex({self.re!r}, {self.im!r})"

    def __str__(self) -> str:
        return f"{self.LEFT_BRACE}{self.re:g}{self.SEPARATOR}{self.im:g}{self.RIGHT_BRACE}"

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return abs(self.im - rhs.im) <= _EPS and abs(self.re - rhs.re) <= _EPS

    __hash__ = None  # equality is tolerance-based

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __add__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.re + rhs.re, self.im + rhs.im)

    def __radd__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.re - rhs.re, self.im - rhs.im)

    def __rsub__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self.re * rhs.re - self.im * rhs.im,
            self.re * rhs.im + self.im * rhs.re,
        )

    def __rmul__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs == Complex(0.0, 0.0):
            raise ZeroDivisionError("Division by zero")
        norm = rhs.re**2 + rhs.im**2
        return Complex(
            (self.re * rhs.re + self.im * rhs.im) / norm,
            (self.im * rhs.re - self.re * rhs.im) / norm,
        )

    def __rtruediv__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __pow__(self, n: int) -> Complex:
        """Raise to an integer power; zero to the zero power is an error."""
        if not isinstance(n, int):
            return NotImplemented
        is_zero = self == Complex(0.0, 0.0)
        if is_zero and n != 0:
            return Complex(0.0, 0.0)
        if is_zero:
            raise ValueError("Zero to the zero degree")
        factor = self if n > 0 else 1.0 / self
        result = Complex(1.0)
        for _ in range(abs(n)):
            result = factor * result
        return result

    def __abs__(self) -> float:
        return (self.re**2 + self.im**2) ** 0.5

    def conjugate(self) -> Complex:
        """Return the complex conjugate."""
        return Complex(self.re, -self.im)

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Read a number written as ``{re,im}``; whitespace around parts is allowed."""
        match = _PATTERN.match(text)
        if match is None:
            raise ValueError(f"cannot parse complex number from {text!r}")
        return cls(float(match.group(1)), float(match.group(2)))