"""A resizable set of bits with right-aligned bitwise operations."""

from __future__ import annotations

import operator
from typing import Callable, Iterator

_LINE_WIDTH = 20


class BitSet:
    """A fixed-length sequence of bits that can be resized.

    Bitwise operations between sets of different lengths align them on the
    right: the shorter operand is padded with zeros at the front, and the
    result has the length of the longer operand.
    """

    __slots__ = ("_bits",)

    def __init__(self, size: int = 0) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("The size must not be negative")
        self._bits = [False] * size

    @property
    def size(self) -> int:
        return len(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __repr__(self) -> str:
        return f"BitSet({''.join('1' if bit else '0' for bit in self._bits)!r})"

    def resize(self, size: int) -> None:
        """Change the length, keeping existing bits and adding zeros at the end."""
        size = operator.index(size)
        if size <= 0:
            raise ValueError("The size must be greater than zero")
        current = len(self._bits)
        if size < current:
            del self._bits[size:]
        else:
            self._bits.extend([False] * (size - current))

    def _check_index(self, idx: int) -> int:
        idx = operator.index(idx)
        if not 0 <= idx < len(self._bits):
            raise IndexError("Not correct index")
        return idx

    def get(self, idx: int) -> bool:
        return self._bits[self._check_index(idx)]

    def set(self, idx: int, val: object) -> None:
        self._bits[self._check_index(idx)] = bool(val)

    def fill(self, val: object) -> None:
        """Set every bit to ``val``."""
        self._bits = [bool(val)] * len(self._bits)

    def __getitem__(self, idx: int) -> bool:
        return self.get(idx)

    def __setitem__(self, idx: int, val: object) -> None:
        self.set(idx, val)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # mutable

    def __invert__(self) -> BitSet:
        result = BitSet(len(self._bits))
        result._bits = [not bit for bit in self._bits]
        return result

    def __copy__(self) -> BitSet:
        result = BitSet()
        result._bits = list(self._bits)
        return result

    def _combine(self, other: BitSet, op: Callable[[bool, bool], object]) -> BitSet:
        width = max(len(self._bits), len(other._bits))
        left = [False] * (width - len(self._bits)) + self._bits
        right = [False] * (width - len(other._bits)) + other._bits
        self.resize(width)
        self._bits = [bool(op(a, b)) for a, b in zip(left, right)]
        return self

    def __ior__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._combine(other, operator.or_)

    def __iand__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._combine(other, operator.and_)

    def __ixor__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._combine(other, operator.xor)

    def __or__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.__copy__()._combine(other, operator.or_)

    def __and__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.__copy__()._combine(other, operator.and_)

    def __xor__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.__copy__()._combine(other, operator.xor)

    def write_txt(self) -> str:
        """Render the size, then the bits in numbered lines of twenty."""
        parts = [f"{len(self._bits)}\n"]
        for line_no, start in enumerate(range(0, len(self._bits), _LINE_WIDTH)):
            chunk = "".join("1" if bit else "0" for bit in self._bits[start:start + _LINE_WIDTH])
            if len(chunk) == _LINE_WIDTH:
                parts.append(f"{chunk} {line_no}\n")
            else:
                padding = " " * (_LINE_WIDTH - len(chunk) + 1)
                parts.append(f"{chunk}{padding}{line_no}\n")
        return "".join(parts)

    @classmethod
    def read_txt(cls, text: str) -> BitSet:
        """Read a size followed by a single token of that many ``0``/``1`` characters."""
        tokens = text.split()
        if not tokens:
            raise ValueError("Missing size")
        try:
            size = int(tokens[0])
        except ValueError as exc:
            raise ValueError(f"Invalid size {tokens[0]!r}") from exc
        if size < 0:
            raise ValueError("The size must not be negative")
        bits = tokens[1] if len(tokens) > 1 else ""
        if len(bits) != size:
            raise ValueError("Incorrect number of characters")
        if any(ch not in "01" for ch in bits):
            raise ValueError(f"Invalid bit characters in {bits!r}")
        result = cls(size)
        result._bits = [ch == "1" for ch in bits]
        return result