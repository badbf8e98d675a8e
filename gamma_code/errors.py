class GammaCodeError(ValueError):
    """
    Base class for every error raised by the gamma codec

    """


class InvalidInputError(GammaCodeError):
    """
    Argument has wrong type or shape: non-integer or non-positive
    value, non-rising sequence, string with characters other
    than `0` and `1`

    """


class MalformedCodeError(GammaCodeError):
    """
    Unary header of a gamma code claims more value bits than
    are left in the bit string

    """
