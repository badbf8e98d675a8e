import pytest

from gamma_code import (
    GammaCode,
    InvalidInputError,
    MalformedCodeError,
    decode_rising,
    decode_sequence,
    decode_value,
    encode_rising,
    encode_sequence,
    encode_value,
)


_RISING_CODE = "00000100010100011100011000001000"

#----------------- VALUE CODEC -----------------

@pytest.mark.parametrize("n, code", [
    (1, "1"),
    (2, "010"),
    (3, "011"),
    (4, "00100"),
    (5, "00101"),
    (8, "0001000"),
    (17, "000010001"),
])
def test_encode_value(n, code):
    assert encode_value(n) == code


def test_encode_value_odd_length():
    for n in [1, 7, 100, 1023, 1024, 2 ** 40 + 3]:
        assert len(encode_value(n)) == 2 * n.bit_length() - 1


def test_decode_value():
    n, trail = decode_value("00101")
    assert n == 5
    assert trail == ""


def test_decode_value_keeps_trail():
    decoded = decode_value("0010100110")
    assert decoded.n == 5
    assert decoded.trail == "00110"


def test_value_roundtrip():
    for n in list(range(1, 300)) + [2 ** 31 - 1, 2 ** 64 + 1]:
        assert decode_value(encode_value(n)) == (n, "")
        for suffix in ["1101", "0001", "0", "000"]:
            assert decode_value(encode_value(n) + suffix) == (n, suffix)


@pytest.mark.parametrize("n", [-5, 0, 3.5, "x", "Hello World!", None, True, [5]])
def test_encode_value_invalid(n):
    with pytest.raises(InvalidInputError):
        encode_value(n)


@pytest.mark.parametrize("bits", [5, None, "", "15", "Hello World!", "0010 1"])
def test_decode_value_invalid(bits):
    with pytest.raises(InvalidInputError):
        decode_value(bits)


@pytest.mark.parametrize("bits", ["00010", "0", "000", "01"])
def test_decode_value_malformed(bits):
    with pytest.raises(MalformedCodeError):
        decode_value(bits)


def test_errors_are_value_errors():
    # Callers catching ValueError keep working
    with pytest.raises(ValueError):
        encode_value(0)
    with pytest.raises(ValueError):
        decode_value("0001")

#----------------- SEQUENCE CODEC -----------------

def test_encode_sequence():
    assert encode_sequence([5, 8, 3, 1]) == "0010100010000111"
    assert encode_sequence((5, 8, 3, 1)) == "0010100010000111"
    assert encode_sequence([]) == ""


def test_decode_sequence():
    assert decode_sequence("0010100010000111") == [5, 8, 3, 1]
    assert decode_sequence("") == []


def test_decode_sequence_ignores_trailing_zeros():
    assert decode_sequence("0010100010000111000") == [5, 8, 3, 1]
    assert decode_sequence("0000000") == []


def test_decode_sequence_truncated():
    # Header of 3 zeros followed by a single value bit
    with pytest.raises(MalformedCodeError):
        decode_sequence("001010001")


def test_sequence_roundtrip():
    ns = [1, 2, 3, 1000, 1, 77, 2 ** 20, 6]
    assert decode_sequence(encode_sequence(ns)) == ns
    assert decode_sequence(encode_sequence(ns) + "0" * 13) == ns


@pytest.mark.parametrize("ns", ["5831", 5, None, {1, 2}, [1, 0], [1, -2], [1.0]])
def test_encode_sequence_invalid(ns):
    with pytest.raises(InvalidInputError):
        encode_sequence(ns)


def test_decode_sequence_invalid():
    with pytest.raises(InvalidInputError):
        decode_sequence("0010120")
    with pytest.raises(InvalidInputError):
        decode_sequence(b"00101")

#----------------- RISING CODEC -----------------

def test_encode_rising():
    assert encode_rising([-17, -15, -8, 4, 12]) == _RISING_CODE


def test_decode_rising():
    assert decode_rising(_RISING_CODE) == [-17, -15, -8, 4, 12]


def test_rising_empty():
    assert encode_rising([]) == ""
    assert decode_rising("") == []


def test_rising_single():
    assert encode_rising([5]) == "100101"
    assert encode_rising([-1]) == "01"
    assert decode_rising("100101") == [5]
    assert decode_rising("01") == [-1]


def test_decode_rising_sign_only():
    assert decode_rising("1") == []
    assert decode_rising("0000") == []


def test_rising_roundtrip():
    sequences = [
        [1, 2, 3, 4],
        [-100, -99, 0, 1, 50, 51],
        [-3],
        [7, 1000, 1000000],
        [-5, 5],
        (-2, -1, 0),
    ]
    for ns in sequences:
        assert decode_rising(encode_rising(ns)) == list(ns)
        assert decode_rising(encode_rising(ns) + "000000") == list(ns)


@pytest.mark.parametrize("ns", [
    [1, 1],
    [3, 2],
    [-1, -5, 3],
    [1, 2, 2, 5],
])
def test_encode_rising_not_rising(ns):
    with pytest.raises(InvalidInputError, match="not rising"):
        encode_rising(ns)


@pytest.mark.parametrize("ns", ["123", 12, None, [1, 2.5], [1, "2"], [0, 1]])
def test_encode_rising_invalid(ns):
    with pytest.raises(InvalidInputError):
        encode_rising(ns)


def test_decode_rising_invalid():
    with pytest.raises(InvalidInputError):
        decode_rising("1002")
    with pytest.raises(InvalidInputError):
        decode_rising(None)
    with pytest.raises(MalformedCodeError):
        decode_rising("10001")

#----------------- NAMESPACE -----------------

def test_namespace_class():
    assert GammaCode.encode_value(5) == "00101"
    assert GammaCode.decode_value("0010100110") == (5, "00110")
    assert GammaCode.encode_sequence([5, 8, 3, 1]) == "0010100010000111"
    assert GammaCode.decode_sequence("0010100010000111000") == [5, 8, 3, 1]
    assert GammaCode.encode_rising([-17, -15, -8, 4, 12]) == _RISING_CODE
    assert GammaCode.decode_rising(_RISING_CODE) == [-17, -15, -8, 4, 12]
    assert GammaCode.to_binary(_RISING_CODE) == bytes([4, 81, 198, 8])
    assert GammaCode.from_binary(bytes([4, 81, 198, 8])) == _RISING_CODE
