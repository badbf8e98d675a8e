from itertools import accumulate
from typing import Any, List, NamedTuple, Sequence, Tuple

from gamma_code.errors import InvalidInputError, MalformedCodeError


_BITS = frozenset("01")


class DecodedValue(NamedTuple):
    n: int
    trail: str


def _binary(b: int, n: int = 1) -> str:
    s = '{0:0%db}' % n
    return s.format(b)


def _is_int(x: Any) -> bool:
    # bool is a subclass of int but is not a number here
    return isinstance(x, int) and not isinstance(x, bool)


def check_bits(bits: Any, allow_empty: bool = True):
    """
    Raise InvalidInputError unless `bits` is a string
    of `0` and `1` characters

    """
    if not isinstance(bits, str):
        raise InvalidInputError(
            f"Bit string must be str, got {type(bits).__name__}")
    if not bits and not allow_empty:
        raise InvalidInputError("Bit string must not be empty")
    if not _BITS.issuperset(bits):
        raise InvalidInputError(
            f"Bit string must contain only 0 and 1, got {bits!r}")


def _check_sequence(ns: Any):
    if not isinstance(ns, (list, tuple)):
        raise InvalidInputError(
            f"Expected list or tuple of integers, got {type(ns).__name__}")


def _decode_at(bits: str, pos: int) -> Tuple[int, int]:
    """
    Decode one gamma code starting at `pos` of already
    validated `bits`

    Returns:
        Tuple[int, int]
        Decoded value and position right after its code

    """
    one = bits.find('1', pos)
    if one == -1:
        raise MalformedCodeError(
            f"Unary header of {len(bits) - pos} zeros has no value bits")
    header = one - pos
    end = one + header + 1
    if end > len(bits):
        raise MalformedCodeError(
            f"Unary header of {header} zeros needs {header + 1} value bits, "
            f"only {len(bits) - one} left")
    return int(bits[one:end], 2), end


def encode_value(n: int) -> str:
    """
    Elias gamma code of a positive integer: binary digits of `n`
    preceded by one less zeros than there are digits

    Parameters:
        n: int
            Integer to encode, must be >= 1

    Returns:
        str
        Bit string of odd length `2 * n.bit_length() - 1`

    """
    if not _is_int(n):
        raise InvalidInputError(
            f"Gamma code needs an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidInputError(f"Gamma code needs integer >= 1, got {n}")

    return _binary(n, 2 * n.bit_length() - 1)


def decode_value(bits: str) -> DecodedValue:
    """
    Decode the first gamma code of `bits`

    Parameters:
        bits: str
            Non-empty bit string starting with a gamma code

    Returns:
        DecodedValue
        Decoded integer `n` and the unconsumed `trail` of bits

    """
    check_bits(bits, allow_empty=False)
    n, end = _decode_at(bits, 0)
    return DecodedValue(n, bits[end:])


def encode_sequence(ns: Sequence[int]) -> str:
    _check_sequence(ns)
    return "".join(encode_value(n) for n in ns)


def decode_sequence(bits: str) -> List[int]:
    """
    Decode concatenated gamma codes. Decoding stops once no `1`
    bit is left, so zeros padding the end of the string are
    dropped

    """
    check_bits(bits)

    values = []
    pos = 0
    while bits.find('1', pos) != -1:
        n, pos = _decode_at(bits, pos)
        values.append(n)

    return values


def encode_rising(ns: Sequence[int]) -> str:
    """
    Encode a sequence where every element is greater than the
    previous one by at least 1

    Encoded as a sign bit of the first element (`1` for
    non-negative, `0` for negative) followed by gamma codes of
    its absolute value and of the gaps between the elements

    Parameters:
        ns: Sequence[int]
            Rising sequence, first element must be non-zero

    Returns:
        str
        Bit string, empty for an empty sequence

    """
    _check_sequence(ns)
    for x in ns:
        if not _is_int(x):
            raise InvalidInputError(
                f"Rising sequence must contain integers, got {type(x).__name__}")
    if not ns:
        return ""

    gaps = [cur - prev for prev, cur in zip(ns, ns[1:])]
    for i, gap in enumerate(gaps, start=1):
        if gap < 1:
            raise InvalidInputError(
                f"Sequence is not rising at index {i}: {ns[i - 1]} -> {ns[i]}")
    if ns[0] == 0:
        raise InvalidInputError(
            "First element of rising sequence can not be 0, "
            "gamma code has no representation for it")

    sign = '1' if ns[0] >= 0 else '0'
    return sign + encode_sequence([abs(ns[0])] + gaps)


def decode_rising(bits: str) -> List[int]:
    check_bits(bits)
    if not bits:
        return []

    values = decode_sequence(bits[1:])
    if values and bits[0] == '0':
        values[0] = -values[0]

    return list(accumulate(values))


if __name__ == "__main__":
    ns = [-17, -15, -8, 4, 12]
    print(f"Rising sequence: {ns}")
    code = encode_rising(ns)
    print(f"Gamma encoding: {code}")
    print(f"Gamma decoding: {decode_rising(code)}")
