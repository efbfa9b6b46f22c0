"""A small command-file calculator with deferred operations.

Each input line holds a command and a number. ``ADD``, ``SUB``, ``MUL`` and
``DIV`` are queued instead of applied. ``REV n`` drops the last ``n`` queued
operations. ``OUT n`` sets the value to ``n``, applies every queued operation
in order and emits the result. Queued operations stay queued after ``OUT``.
"""

from __future__ import annotations

import math
import os
import re
import sys
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class RoboCalcError(Exception):
    """Raised for a malformed command, a bad argument or a failed operation."""


class Operation(Enum):
    """An arithmetic operation that can be queued."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"

    def apply(self, value: int, operand: int) -> int:
        """Apply the operation to ``value``; division truncates toward zero."""
        if self is Operation.ADD:
            return value + operand
        if self is Operation.SUB:
            return value - operand
        if self is Operation.MUL:
            return value * operand
        if operand == 0:
            raise RoboCalcError("ERR: Division by zero")
        quotient = abs(value) // abs(operand)
        return quotient if (value < 0) == (operand < 0) else -quotient


def _parse_operand(token: Optional[str]) -> int:
    """Read a leading number from ``token`` and truncate it; missing means 0."""
    if token is None:
        return 0
    match = _NUMBER.match(token)
    if match is None:
        return 0
    value = float(match.group(0))
    if not math.isfinite(value):
        raise RoboCalcError("ERR: Wrong command")
    return int(value)


class RoboCalc:
    """The calculator state: the current value and the queue of operations."""

    def __init__(self) -> None:
        self.number = 0
        self._pending: List[Tuple[Operation, int]] = []

    @property
    def pending(self) -> Tuple[Tuple[Operation, int], ...]:
        """The queued operations, oldest first."""
        return tuple(self._pending)

    def _revert(self, count: int) -> None:
        if not 0 <= count <= len(self._pending):
            raise RoboCalcError("ERR: Invalid argument to REV command")
        del self._pending[len(self._pending) - count:]

    def _output(self, start: int) -> int:
        self.number = start
        for operation, operand in self._pending:
            self.number = operation.apply(self.number, operand)
        return self.number

    def process_line(self, line: str) -> Optional[int]:
        """Handle one input line; return the emitted value for ``OUT``, else None."""
        tokens = line.split()
        command = tokens[0] if tokens else ""
        operand = _parse_operand(tokens[1] if len(tokens) > 1 else None)
        if command == "OUT":
            return self._output(operand)
        if command == "REV":
            self._revert(operand)
            return None
        try:
            operation = Operation(command)
        except ValueError:
            raise RoboCalcError("ERR: Wrong command") from None
        self._pending.append((operation, operand))
        return None

    def run(self, lines: Iterable[str]) -> Iterator[int]:
        """Process lines in order, yielding each value produced by ``OUT``."""
        for line in lines:
            result = self.process_line(line)
            if result is not None:
                yield result


def run_file(input_path: str, output_path: str) -> None:
    """Run the commands in ``input_path`` and write each output value on its own line."""
    try:
        source = open(input_path, encoding="utf-8")
    except OSError:
        raise RoboCalcError("ERR: Can not open file!") from None
    with source, open(output_path or os.devnull, "w", encoding="utf-8") as target:
        for value in RoboCalc().run(line.rstrip("\n") for line in source):
            target.write(f"{value}\n")
            target.flush()


def _parse_args(argv: Sequence[str]) -> Tuple[str, str]:
    input_file = ""
    output_file = ""
    args = iter(argv)
    for arg in args:
        if arg == "-i":
            input_file = next(args, None)
            if input_file is None:
                raise RoboCalcError("ERR: The input file name for the parameter is missing -i")
        elif arg == "-o":
            output_file = next(args, None)
            if output_file is None:
                raise RoboCalcError("ERR: The output file name for the parameter is missing -o")
        else:
            raise RoboCalcError("ERR: Unknown parameter")
    return input_file, output_file


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``-i INPUT -o OUTPUT``. Returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        input_file, output_file = _parse_args(argv)
        run_file(input_file, output_file)
    except RoboCalcError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())