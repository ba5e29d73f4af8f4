import enum


class ConfigurationErrorKind(enum.Enum):
    SHORT_ALPHABET = 'short_alphabet'
    SPACE_IN_ALPHABET = 'space_in_alphabet'


class DecodeErrorKind(enum.Enum):
    INTERNAL_GUARD_CHARS = 'internal_guard_chars'
    NON_ALPHABET_CHARS = 'non_alphabet_chars'
    CHECKSUM_MISMATCH = 'checksum_mismatch'


class ConfigurationError(ValueError):
    """The alphabet can't be used to build a configuration.
    """
    def __init__(self, kind, message):
        super(ConfigurationError, self).__init__(message)
        self.kind = kind


class DecodeError(ValueError):
    """The string is not a valid id under this configuration.
    """
    def __init__(self, kind, message):
        super(DecodeError, self).__init__(message)
        self.kind = kind
