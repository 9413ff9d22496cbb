"""
Conversion of domain names between the Unicode and the ASCII-compatible forms (IDNA2008, RFC 5890-5891).

Labels are converted independently; the first label that fails aborts the whole conversion.
Labels are expected to be NFC-normalized by the caller.
"""
from typing import Dict, Type

import idna as idna2008

from punyidna import punycode
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
    LDH_CHARACTERS,
    MAX_LABEL_LENGTH,
    MAX_U_LABEL_LENGTH,
    has_edge_hyphen,
    has_reserved_hyphens,
    is_a_label,
    is_u_label,
    octet_length,
)
from punyidna.utils.logging import get_logger

logger = get_logger(__name__)

# Codec failures never leave this module as is: each kind is reported as the framer error below
CODEC_ERROR_KINDS: Dict[Type[punycode.BootstringError], Type[IDNAError]] = {
    punycode.Overflow: PunycodeError,
    punycode.BadInput: PunycodeError,
    punycode.InvalidEncoding: PunycodeError,
    punycode.BootstringError: PunycodeError,
}


def _translate_codec_error(error: punycode.BootstringError, label: str) -> IDNAError:
    # the closest registered ancestor wins, so subclasses of the codec errors are mapped too
    error_type = next(cls for cls in type(error).__mro__ if cls in CODEC_ERROR_KINDS)
    return CODEC_ERROR_KINDS[error_type](error.message, label)


def _encode_payload(label: str) -> str:
    try:
        return punycode.encode(label)
    except punycode.BootstringError as e:
        raise _translate_codec_error(e, label) from e


def _decode_payload(label: str, strict: bool = False) -> str:
    try:
        return punycode.decode(label[len(ACE_PREFIX) :].lower(), strict=strict)
    except punycode.BootstringError as e:
        raise _translate_codec_error(e, label) from e


def _check_u_label(u_label: str, label: str) -> None:
    if len(u_label) > MAX_U_LABEL_LENGTH:
        raise LabelTooLong(f"U-label is longer than {MAX_U_LABEL_LENGTH} code points", label)
    try:
        idna2008.check_label(u_label)
    except idna2008.IDNAError as e:
        raise InvalidLabel(str(e), label) from e


def check_label(label: str) -> None:
    """
    Validate a single label against the IDNA2008 rules that go beyond the category of the label:

    - an A-label must have a non-empty payload that is the canonical Punycode of a valid U-label
      (the canonical form of a non-empty payload always holds a non-ASCII code point)
    - a U-label must pass idna.check_label: NFC, no hyphens at the edges or in the third and fourth positions,
      only PVALID or contextually allowed code points (so no upper-case letters) and the Bidi rule
    - an NR-LDH label may only contain ASCII letters, digits and hyphens, must not start or end with a hyphen,
      and must not look like an ACE prefix of another kind ("ab--")
    - encoded labels must fit into 63 octets, decoded ones into 252 code points

    :raises IDNAError: a subclass that describes the first violated rule
    """
    if not label:
        raise EmptyLabel()

    if is_a_label(label):
        if len(label) == len(ACE_PREFIX):
            raise InvalidACEPrefix("nothing follows the ACE prefix", label)
        if octet_length(label) > MAX_LABEL_LENGTH:
            raise LabelTooLong(f"A-label is longer than {MAX_LABEL_LENGTH} octets", label)
        _check_u_label(_decode_payload(label, strict=True), label)

    elif is_u_label(label):
        _check_u_label(label, label)
        if len(ACE_PREFIX) + len(_encode_payload(label)) > MAX_LABEL_LENGTH:
            raise LabelTooLong(f"A-label is longer than {MAX_LABEL_LENGTH} octets", label)

    else:
        if not LDH_CHARACTERS.issuperset(label):
            raise InvalidLabel("only ASCII letters, digits and hyphens are allowed", label)
        if has_edge_hyphen(label):
            raise InvalidLabel("label must not start or end with a hyphen", label)
        if has_reserved_hyphens(label):
            raise InvalidACEPrefix(f"hyphens in the third and fourth positions are reserved for {ACE_PREFIX}", label)
        if len(label) > MAX_LABEL_LENGTH:
            raise LabelTooLong(f"label is longer than {MAX_LABEL_LENGTH} octets", label)


def label_to_ascii(label: str, strict: bool = False) -> str:
    """
    Convert one label to its ASCII form: ASCII labels are lower-cased, others become ``xn--<punycode>``

    :param strict: if True, run check_label() first
    :raises EmptyLabel: if the label is empty
    :raises LabelTooLong: if the result is longer than 63 octets
    """
    if not label:
        raise EmptyLabel()
    if strict:
        check_label(label)

    if label.isascii():
        if octet_length(label) > MAX_LABEL_LENGTH:
            raise LabelTooLong(f"label is longer than {MAX_LABEL_LENGTH} octets", label)
        return label.lower()

    a_label = ACE_PREFIX + _encode_payload(label)
    if octet_length(a_label) > MAX_LABEL_LENGTH:
        raise LabelTooLong(f"A-label {a_label!r} is longer than {MAX_LABEL_LENGTH} octets", label)
    return a_label


def label_to_unicode(label: str, strict: bool = False) -> str:
    """
    Convert one label to its Unicode form: A-labels are decoded, other labels are only lower-cased

    :param strict: if True, run check_label() first
    :raises EmptyLabel: if the label is empty
    :raises PunycodeError: if an A-label cannot be decoded
    :raises LabelTooLong: if the decoded label is longer than 252 code points
    """
    if not label:
        raise EmptyLabel()
    if strict:
        check_label(label)

    label = label.lower()
    if not label.startswith(ACE_PREFIX):
        return label

    u_label = _decode_payload(label, strict=strict)
    if len(u_label) > MAX_U_LABEL_LENGTH:
        raise LabelTooLong(f"U-label is longer than {MAX_U_LABEL_LENGTH} code points", label)
    return u_label


def to_ascii(domain: str, strict: bool = False) -> str:
    """
    Convert a domain name to its ASCII-compatible form, e.g. ``"münchen.de"`` -> ``"xn--mnchen-3ya.de"``

    :param domain: a dot-separated domain name; empty labels (including a trailing dot) are rejected
    :param strict: if True, validate every label with check_label()
    :raises IDNAError: if any of the labels cannot be converted
    """
    try:
        return LABEL_SEPARATOR.join(label_to_ascii(label, strict) for label in domain.split(LABEL_SEPARATOR))
    except IDNAError as e:
        logger.debug(f"Cannot convert {domain!r} to ASCII: {e}")
        raise


def to_unicode(domain: str, strict: bool = False) -> str:
    """
    Convert a domain name to its Unicode form, e.g. ``"xn--mnchen-3ya.de"`` -> ``"münchen.de"``

    :param domain: a dot-separated domain name; the ACE prefix is recognized in any case
    :param strict: if True, validate every label with check_label()
    :raises IDNAError: if any of the labels cannot be converted
    """
    try:
        return LABEL_SEPARATOR.join(label_to_unicode(label, strict) for label in domain.split(LABEL_SEPARATOR))
    except IDNAError as e:
        logger.debug(f"Cannot convert {domain!r} to Unicode: {e}")
        raise
