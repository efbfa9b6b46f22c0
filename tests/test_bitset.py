import pytest

from labkit.bitset import BitSet


def make(bits: str) -> BitSet:
    result = BitSet(len(bits))
    for idx, ch in enumerate(bits):
        result.set(idx, ch == "1")
    return result


def as_str(b: BitSet) -> str:
    return "".join("1" if b.get(i) else "0" for i in range(b.size))


def test_construction_and_access():
    b1 = BitSet()
    assert b1.size == 0
    with pytest.raises(IndexError):
        b1.get(0)

    b1.resize(15)
    with pytest.raises(IndexError):
        b1.get(15)
    with pytest.raises(IndexError):
        b1.get(-1)
    with pytest.raises(IndexError):
        b1.set(15, 0)
    with pytest.raises(IndexError):
        b1.set(-1, 0)
    with pytest.raises(ValueError):
        b1.resize(-2)

    assert b1.get(0) == 0
    assert b1.get(1) == 0
    assert b1.get(14) == 0
    assert b1.size == 15
    for i in range(5):
        b1.set(i, 1)
        assert b1.get(i) == 1
    assert b1.get(5) == 0
    assert b1.get(14) == 0

    b2 = BitSet(10)
    assert b2.size == 10
    assert [b2.get(0), b2.get(1), b2.get(9)] == [0, 0, 0]
    b2.fill(1)
    assert b2.size == 10
    assert [b2.get(0), b2.get(1), b2.get(9)] == [1, 1, 1]
    b2.fill(0)
    assert b2.size == 10
    assert [b2.get(0), b2.get(1), b2.get(9)] == [0, 0, 0]

    assert (b1 == b2) is False
    assert (b1 != b2) is True

    b1.resize(10)
    assert b1.size == 10
    assert (b1 == b2) is False
    assert (b1 != b2) is True
    b1.fill(0)
    assert len(b1) == 10
    assert (b1 == b2) is True
    assert (b1 != b2) is False

    b1.fill(1)
    assert b1 == ~b2
    b33 = ~b2
    assert as_str(b33) == "1" * 10
    assert ~b1 == b2
    b33 = ~b1
    assert as_str(b33) == "0" * 10
    assert ~b1 != ~b2


def test_bitwise_operations_align_right():
    b3 = make("1010101010101")
    b4 = make("110010010")

    b3 |= b4
    assert as_str(b3) == "1010111010111"

    b3 &= b4
    assert as_str(b3) == "0000110010010"

    b4.set(2, 1)
    b3.set(0, 1)
    b3.set(2, 1)
    b3.set(4, 0)

    b3 ^= b4
    assert as_str(b3) == "1010101000000"

    b5 = b3 & b4
    assert as_str(b5) == "0000101000000"

    b5 = b3 | b4
    assert as_str(b5) == "1010111010010"

    b5 = b3 ^ b4
    assert as_str(b5) == "1010010010010"


def test_binary_operator_leaves_operands_unchanged():
    a = make("1100")
    b = make("10")
    result = a | b
    assert as_str(result) == "1110"
    assert as_str(a) == "1100"
    assert as_str(b) == "10"


def test_item_access():
    b3 = make("1010101010101")
    assert b3.get(0) == 1
    assert b3.get(4) == 1
    b3[0] = 0
    b3[4] = 0
    b3[11] = 1
    assert b3.get(0) == 0
    assert b3.get(4) == 0
    assert b3.get(11) == 1
    b3[11] = 0
    assert b3.get(11) == 0
    b3.fill(0)
    b4 = make("111111111")
    b3[0] = b4[0]
    b3[1] = b4[1]
    b3[8] = b4[8]
    assert [b3.get(0), b3.get(1), b3.get(8)] == [1, 1, 1]
    assert [b4.get(0), b4.get(1), b4.get(8)] == [1, 1, 1]
    assert b3.get(9) == 0
    assert (b3[0] == b3[1]) is True
    assert (b3[0] != b3[1]) is False
    assert (b3[0] == 1) is True
    assert (b3[0] == 0) is False
    assert bool(b3[0]) is True
    with pytest.raises(IndexError):
        b3[13]


def test_item_assignment_chains():
    b3 = make("1010")
    b4 = make("0101")
    assert b3[0] == 1
    assert b3[1] == 0
    assert b4[0] == 0
    assert b4[1] == 1

    b3[0] = b4[0]
    b4[1] = b3[1]
    assert b3[0] == 0
    assert b3[1] == 0
    assert b4[0] == 0
    assert b4[1] == 0

    b5 = make("1100")
    assert b5[0] == 1
    b3[0] = b4[0] = b5[0]
    assert b3[0] == 1
    assert b4[0] == 1
    assert b5[0] == 1


def test_combining_two_empty_sets_is_an_error():
    a = BitSet()
    with pytest.raises(ValueError):
        a |= BitSet()


def test_write_txt_short():
    assert make("101").write_txt() == "3\n101" + " " * 18 + "0\n"


def test_write_txt_full_line():
    assert BitSet(20).write_txt() == "20\n" + "0" * 20 + " 0\n"


def test_write_txt_two_lines():
    b = BitSet(22)
    b.fill(1)
    expected = "22\n" + "1" * 20 + " 0\n" + "11" + " " * 19 + "1\n"
    assert b.write_txt() == expected


def test_write_txt_empty():
    assert BitSet().write_txt() == "0\n"


def test_read_txt():
    b = BitSet.read_txt("5 10110")
    assert as_str(b) == "10110"


def test_read_round_trip():
    original = make("1001101")
    assert BitSet.read_txt(original.write_txt()) == original


@pytest.mark.parametrize("text", ["4 101", "2 101", "3 1a1", "x 101", ""])
def test_read_txt_rejects_bad_input(text):
    with pytest.raises(ValueError):
        BitSet.read_txt(text)