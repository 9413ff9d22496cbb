"""
Label categories of IDNA2008 (RFC 5890 section 2.3). Every non-empty label is exactly one of:

- A-label: an ASCII label that starts with the ACE prefix ``xn--`` (in any case)
- U-label: a label with at least one non-ASCII code point
- NR-LDH label: any other ASCII label
"""
import string

ACE_PREFIX = "xn--"
LABEL_SEPARATOR = "."
MAX_LABEL_LENGTH = 63  # octets of an encoded label, RFC 1035 section 2.3.4
MAX_U_LABEL_LENGTH = 252  # code points of a decoded label

LDH_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-")


def is_a_label(label: str) -> bool:
    return label.lower().startswith(ACE_PREFIX)


def is_u_label(label: str) -> bool:
    return not label.isascii() and not is_a_label(label)


def is_nr_ldh_label(label: str) -> bool:
    return label.isascii() and not is_a_label(label)


def has_reserved_hyphens(label: str) -> bool:
    """Whether the label has hyphens in the third and fourth positions, like the ACE prefix does"""
    return label[2:4] == "--"


def has_edge_hyphen(label: str) -> bool:
    return label.startswith("-") or label.endswith("-")


def octet_length(label: str) -> int:
    return len(label.encode("utf-8"))
