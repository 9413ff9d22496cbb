class BootstringError(ValueError):
    """Base class for every failure of the Bootstring codec"""

    def __init__(self, message, string=None):
        self.message = message
        self.string = string

        if string is not None:
            message = "Cannot transcode {0!r}: {1}".format(string, message)

        super().__init__(message)


class Overflow(BootstringError):
    """An intermediate value (delta, weight, insertion index or code point) would exceed MAX_INT"""


class BadInput(BootstringError):
    """
    The input holds something the codec cannot represent: a character that is not a base-36 digit,
    a non-basic character before the delimiter, a truncated digit group
    or a value outside of the Unicode scalar range
    """


class InvalidEncoding(BootstringError):
    """The digits are well-formed, but they are not the canonical (shortest) encoding of the decoded string"""
