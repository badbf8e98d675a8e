from typing import List, Sequence, Union

from gamma_code.encoders import (
    check_bits,
    decode_rising,
    decode_sequence,
    encode_rising,
    encode_sequence,
)
from gamma_code.errors import InvalidInputError


BytesLike = Union[bytes, bytearray, memoryview]


def to_binary(bits: str) -> bytes:
    """
    Pack bit string into bytes, most significant bit first.
    The last byte is padded with zeros on the right

    """
    check_bits(bits)
    padded = bits.ljust((len(bits) + 7) // 8 * 8, '0')
    return bytes(int(padded[i:i + 8], 2) for i in range(0, len(padded), 8))


def from_binary(buffer: BytesLike) -> str:
    """
    Unpack bytes into a bit string of exactly 8 bits per byte

    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise InvalidInputError(
            f"Expected bytes-like buffer, got {type(buffer).__name__}")
    return "".join(f"{byte:08b}" for byte in bytes(buffer))


def pack_sequence(ns: Sequence[int]) -> bytes:
    return to_binary(encode_sequence(ns))


def unpack_sequence(buffer: BytesLike) -> List[int]:
    return decode_sequence(from_binary(buffer))


def pack_rising(ns: Sequence[int]) -> bytes:
    return to_binary(encode_rising(ns))


def unpack_rising(buffer: BytesLike) -> List[int]:
    return decode_rising(from_binary(buffer))
