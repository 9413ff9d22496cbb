"""
Bootstring encoding of Unicode strings with the Punycode parameters, see RFC 3492.

Basic code points (< 0x80) are copied to the output as is, followed by a delimiter
and a run of base-36 digits that describe where to insert each extended code point.
"""
from typing import List, Optional, Sequence, Union

from punyidna.punycode.exceptions import BadInput, InvalidEncoding, Overflow

# Punycode parameters, RFC 3492 section 5
BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80
DELIMITER = "-"

# all running values are bounded as if they were 32-bit unsigned integers (RFC 3492 section 6.4)
MAX_INT = 2**32 - 1
MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)

_DIGITS = "abcdefghijklmnopqrstuvwxyz0123456789"


def _threshold(k: int, bias: int) -> int:
    if k <= bias + TMIN:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def _adapt(delta: int, num_points: int, first_time: bool) -> int:
    """Bias adaptation function, RFC 3492 section 6.1"""
    delta = delta // DAMP if first_time else delta // 2
    delta += delta // num_points

    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE
    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)


def _digit_value(char: str) -> Optional[int]:
    code = ord(char)
    if 0x61 <= code <= 0x7A:  # a-z
        return code - 0x61
    if 0x41 <= code <= 0x5A:  # A-Z
        return code - 0x41
    if 0x30 <= code <= 0x39:  # 0-9
        return code - 0x30 + 26
    return None


def _is_scalar_value(code_point: int) -> bool:
    return 0 <= code_point <= MAX_CODE_POINT and code_point not in _SURROGATES


def _encode_integer(q: int, bias: int) -> str:
    """Represent q as a generalized variable-length integer"""
    output = []
    k = BASE
    while True:
        t = _threshold(k, bias)
        if q < t:
            break
        output.append(_DIGITS[t + (q - t) % (BASE - t)])
        q = (q - t) // (BASE - t)
        k += BASE
    output.append(_DIGITS[q])
    return "".join(output)


def encode(text: Union[str, Sequence[int]]) -> str:
    """
    Encode a sequence of code points into a Punycode string.

    The input is used as is: callers that need canonical results must NFC-normalize it beforehand,
    since composed and decomposed forms of the same text encode differently.

    :param text: a str or a sequence of integer code points
    :returns: an ASCII string; all-basic input is returned unchanged, without a trailing delimiter
    :raises BadInput: if the input holds a value that is not a Unicode scalar value
    :raises Overflow: if the distance between code points does not fit into MAX_INT
    """
    code_points = [ord(char) for char in text] if isinstance(text, str) else list(text)
    for code_point in code_points:
        if not _is_scalar_value(code_point):
            raise BadInput(f"{code_point:#x} is not a Unicode scalar value")

    output = [chr(code_point) for code_point in code_points if code_point < INITIAL_N]
    basic_count = handled_count = len(output)
    if 0 < basic_count < len(code_points):
        output.append(DELIMITER)

    n, delta, bias = INITIAL_N, 0, INITIAL_BIAS
    while handled_count < len(code_points):
        m = min(code_point for code_point in code_points if code_point >= n)
        if m - n > (MAX_INT - delta) // (handled_count + 1):
            raise Overflow(f"delta for {m:#x} exceeds {MAX_INT}")
        delta += (m - n) * (handled_count + 1)
        n = m

        for code_point in code_points:
            if code_point < n:
                delta += 1
                if delta > MAX_INT:
                    raise Overflow(f"delta for {n:#x} exceeds {MAX_INT}")
            elif code_point == n:
                output.append(_encode_integer(delta, bias))
                bias = _adapt(delta, handled_count + 1, first_time=handled_count == basic_count)
                delta = 0
                handled_count += 1

        delta += 1
        n += 1

    return "".join(output)


def decode(text: str, strict: bool = False) -> str:
    """
    Decode a Punycode string into the Unicode string it represents.

    :param text: an ASCII string; digits may be in either case
    :param strict: if True, also require the input to be the canonical encoding of its result
    :returns: the decoded string; the case of basic code points is preserved
    :raises BadInput: on non-digit characters, non-basic characters before the delimiter,
      a truncated digit group or a decoded value outside of the Unicode scalar range
    :raises Overflow: if an intermediate value does not fit into MAX_INT
    :raises InvalidEncoding: if strict and re-encoding the result does not reproduce the input
    """
    delimiter_index = text.rfind(DELIMITER)
    if delimiter_index >= 0:
        basic, digits = text[:delimiter_index], text[delimiter_index + 1 :]
    else:
        basic, digits = "", text

    output: List[str] = []
    for char in basic:
        if ord(char) >= INITIAL_N:
            raise BadInput(f"non-basic code point {char!r} before the delimiter", text)
        output.append(char)

    n, i, bias = INITIAL_N, 0, INITIAL_BIAS
    position = 0
    while position < len(digits):
        old_i, w, k = i, 1, BASE
        while True:
            if position >= len(digits):
                raise BadInput("the last variable-length integer is incomplete", text)
            digit = _digit_value(digits[position])
            if digit is None:
                raise BadInput(f"{digits[position]!r} is not a base-36 digit", text)
            position += 1

            if digit > (MAX_INT - i) // w:
                raise Overflow(f"insertion index exceeds {MAX_INT}", text)
            i += digit * w

            t = _threshold(k, bias)
            if digit < t:
                break
            if w > MAX_INT // (BASE - t):
                raise Overflow(f"digit weight exceeds {MAX_INT}", text)
            w *= BASE - t
            k += BASE

        length = len(output) + 1
        bias = _adapt(i - old_i, length, first_time=old_i == 0)
        if i // length > MAX_INT - n:
            raise Overflow(f"code point exceeds {MAX_INT}", text)
        n += i // length
        i %= length

        if not _is_scalar_value(n):
            raise BadInput(f"{n:#x} is not a Unicode scalar value", text)
        output.insert(i, chr(n))
        i += 1

    result = "".join(output)
    if strict and encode(result).lower() != text.lower():
        raise InvalidEncoding("not the canonical encoding of its result", text)
    return result
