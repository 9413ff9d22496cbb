class IDNAError(ValueError):
    """Base class for failures to convert a domain label; ``.label`` holds the offending label"""

    def __init__(self, message, label=None):
        self.message = message
        self.label = label

        if label is not None:
            message = "Invalid label {0!r}: {1}".format(label, message)

        super().__init__(message)


class EmptyLabel(IDNAError):
    """The domain contains an empty label, e.g. it is empty itself or has two dots in a row"""

    def __init__(self, message="label must not be empty", label=""):
        super().__init__(message, label)


class LabelTooLong(IDNAError):
    """An A-label is longer than 63 octets or a U-label is longer than 252 code points"""


class InvalidLabel(IDNAError):
    """The label breaks the character or hyphen rules checked in strict mode"""


class PunycodeError(IDNAError):
    """The part of an A-label after the ACE prefix is not valid Punycode"""


class InvalidACEPrefix(IDNAError):
    """The label carries an incomplete or malformed ACE prefix"""
