from gamma_code.batch import (
    PackConfig,
    pack_batch,
    pack_file,
    unpack_batch,
    unpack_file,
)
from gamma_code.encoders import (
    DecodedValue,
    decode_rising,
    decode_sequence,
    decode_value,
    encode_rising,
    encode_sequence,
    encode_value,
)
from gamma_code.errors import (
    GammaCodeError,
    InvalidInputError,
    MalformedCodeError,
)
from gamma_code.packing import (
    from_binary,
    pack_rising,
    pack_sequence,
    to_binary,
    unpack_rising,
    unpack_sequence,
)


class GammaCode:
    """
    Stateless namespace over the Elias gamma codec, so it can
    be used as `GammaCode.encode_value(5)`

    Layers:
        `encode_value` / `decode_value`
            Single positive integer
        `encode_sequence` / `decode_sequence`
            Concatenated gamma codes, trailing zeros are
            ignored on decoding
        `encode_rising` / `decode_rising`
            Sign bit + gamma codes of gaps of a rising sequence
        `to_binary` / `from_binary`
            Bit string <-> bytes

    """
    encode_value = staticmethod(encode_value)
    decode_value = staticmethod(decode_value)
    encode_sequence = staticmethod(encode_sequence)
    decode_sequence = staticmethod(decode_sequence)
    encode_rising = staticmethod(encode_rising)
    decode_rising = staticmethod(decode_rising)
    to_binary = staticmethod(to_binary)
    from_binary = staticmethod(from_binary)
