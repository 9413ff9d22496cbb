"""
Punycode (RFC 3492): the Bootstring codec used by .idna to build A-labels; usable on its own as well
"""

from punyidna.punycode.codec import (
    BASE,
    DAMP,
    DELIMITER,
    INITIAL_BIAS,
    INITIAL_N,
    MAX_INT,
    SKEW,
    TMAX,
    TMIN,
    decode,
    encode,
)
from punyidna.punycode.exceptions import BadInput, BootstringError, InvalidEncoding, Overflow
