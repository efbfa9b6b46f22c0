# labkit

Small, dependency-free building blocks:

- `labkit.complexnum.Complex` – complex numbers with a `{re,im}` text form.
- `labkit.rational.Rational` – fractions kept in lowest terms, with a `num/den` text form.
- `labkit.bitset.BitSet` – a resizable sequence of bits with `|`, `&`, `^` and `~`.
- `labkit.stackarr.StackArr` – a list-backed LIFO stack.
- `labkit.stacklst.StackLst` – a LIFO stack on a singly linked chain of nodes.
- `labkit.queuearr.QueueArr` – a FIFO queue in a ring buffer that doubles when full.
- `labkit.queuelstpr.QueueLstPr` – a linked queue whose front is always its smallest item.
- `labkit.robocalc` – a command-file calculator, also installed as the `robocalc` command.

## Install

```
pip install .
```

## Numbers

```python
from labkit.complexnum import Complex
from labkit.rational import Rational

z = Complex(2, 3) * Complex(4, 5)
print(z)                          # {-7,22}
print(Complex.parse("{8.9,9}"))   # {8.9,9}
print(abs(Complex(3, 4)))         # 5.0
print(Complex(2, 3).conjugate())  # {2,-3}

r = Rational(4, 8) + Rational(5, 7)
print(r)                          # 17/14
print(r.num, r.den)               # 17 14
print(Rational.parse("36/48"))    # 3/4
print(Rational(1, 2).pow(3))      # 1/8
```

`Complex` accepts `int` and `float` operands on either side of `+`, `-`, `*`
and `/`. Two values compare equal when both parts differ by at most twice the
machine epsilon. `z ** n` takes an integer `n`, including negative ones.
Dividing by zero raises `ZeroDivisionError`; zero to the power zero raises
`ValueError`. `Complex.parse` reads `{re,im}`, allowing whitespace around the
parts, and raises `ValueError` otherwise.

`Rational` accepts `int` operands on either side. A zero denominator raises
`ValueError`, division by zero raises `ZeroDivisionError`, and `pow(0)` of zero
raises `ValueError`. Note that `<` is defined as "not `>`", so two equal values
also compare as less than each other. `Rational.parse` reads `num/den` with a
positive denominator directly after the slash, allowing leading whitespace.

## BitSet

```python
from labkit.bitset import BitSet

b = BitSet(4)
b[0] = 1
b.set(2, True)
print(b.get(0), b[1])      # True False
c = b | BitSet(6)          # right-aligned: result has length 6
print(len(c))              # 6
print(BitSet.read_txt("3 101") == ~BitSet.read_txt("3 010"))  # True
```

Indexes outside `0 <= i < size` raise `IndexError`; `resize` takes a positive
size and pads with zeros. Bitwise operations between sets of different
lengths pad the shorter one with zeros at the front. `write_txt()` renders the
size on one line, then the bits in numbered lines of twenty; `read_txt` reads
a size followed by one token of exactly that many `0`/`1` characters.

## Stacks and queues

All containers share the same small interface: `push(item)`, `pop()`,
`top()`, `is_empty()` and `clear()`. `pop()` on an empty container does
nothing; `top()` on an empty container raises `IndexError`. Each supports
`copy.copy`, which produces an independent container. `StackLst` and
`QueueLstPr` also have `assign(other)` to replace their contents with a copy
of another's; `QueueArr` supports `len()` and iteration from front to back.

```python
from labkit.queuelstpr import QueueLstPr

q = QueueLstPr()
for x in (3, 1, 2):
    q.push(x)
print(q.top())              # 1
```

## robocalc

`robocalc` reads a command file, one command and one number per line:

- `ADD n`, `SUB n`, `MUL n`, `DIV n` – queue an operation;
- `REV n` – drop the last `n` queued operations;
- `OUT n` – start from `n`, apply every queued operation in order and write
  the integer result as a line of the output file. Queued operations stay
  queued afterwards.

Numbers are truncated to integers and division truncates toward zero.

```
robocalc -i commands.txt -o results.txt
```

An unknown command or option, a missing file name after `-i` or `-o`, an input
file that cannot be opened, a division by zero or a bad `REV` count prints an
`ERR: ...` message and exits with status 1. Results written before the error
stay in the output file.

The same logic is available from Python through `labkit.robocalc.RoboCalc`
(`process_line`, `run`), `run_file(input_path, output_path)` and `main(argv)`;
failures raise `labkit.robocalc.RoboCalcError`.

## What is not included

There is no general resizable array type and no linked FIFO queue; use
`QueueArr` for first-in, first-out order.