"""
IDNA2008 label framing (RFC 5890): converts whole domain names using .punycode for the non-ASCII labels
"""

from punyidna.idna.core import (
    CODEC_ERROR_KINDS,
    check_label,
    label_to_ascii,
    label_to_unicode,
    to_ascii,
    to_unicode,
)
from punyidna.idna.exceptions import (
    EmptyLabel,
    IDNAError,
    InvalidACEPrefix,
    InvalidLabel,
    LabelTooLong,
    PunycodeError,
)
from punyidna.idna.labels import (
    ACE_PREFIX,
    LABEL_SEPARATOR,
    MAX_LABEL_LENGTH,
    MAX_U_LABEL_LENGTH,
    is_a_label,
    is_nr_ldh_label,
    is_u_label,
)
