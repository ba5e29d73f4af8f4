from dataclasses import dataclass
import logging
import math

from .errors import ConfigurationError, ConfigurationErrorKind
from .shuffle import shuffled


__all__ = ['DEFAULT_ALPHABET', 'DEFAULT_SEPARATORS', 'Configuration', 'build']


logger = logging.getLogger(__name__)


DEFAULT_ALPHABET = ('abcdefghijklmnopqrstuvwxyz'
                    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
                    '1234567890')
DEFAULT_SEPARATORS = 'cfhistuCFHISTU'

SEPARATOR_RATIO = 3.5
GUARD_RATIO = 12
MIN_ALPHABET_LENGTH = 16


@dataclass(frozen=True)
class Configuration:
    """The character sets used to encode and decode ids.

    Built once by :func:`build`, never modified afterwards.
    """
    salt: str
    alphabet: str
    separators: str
    guards: str
    min_length: int

    def __repr__(self):
        return ("<Configuration alphabet=%r, separators=%r, guards=%r, "
                "min_length=%d>") % (
            self.alphabet, self.separators, self.guards, self.min_length)


def unique(text):
    """Remove duplicate characters, keeping the first occurrence.
    """
    seen = set()
    result = []
    for c in text:
        if c not in seen:
            seen.add(c)
            result.append(c)
    return ''.join(result)


def split_separators(alphabet):
    """Take the default separators out of the alphabet.

    Returns ``(separators, alphabet)``. Separators keep the order they have
    in `DEFAULT_SEPARATORS`.
    """
    separators = ''.join(c for c in DEFAULT_SEPARATORS if c in alphabet)
    alphabet = ''.join(c for c in alphabet if c not in DEFAULT_SEPARATORS)
    return separators, alphabet


def _balance_separators(separators, alphabet):
    if separators and len(alphabet) / len(separators) <= SEPARATOR_RATIO:
        return separators, alphabet

    target = int(math.ceil(len(alphabet) / SEPARATOR_RATIO))
    if target == 1:
        target = 2
    if target > len(separators):
        diff = target - len(separators)
        return separators + alphabet[:diff], alphabet[diff:]
    else:
        return separators[:target], alphabet


def build(alphabet=DEFAULT_ALPHABET, salt='', min_length=0):
    """Partition an alphabet into alphabet, separators and guards.

    The result only depends on `alphabet` and `salt`; decoding relies on
    getting the exact same partition back.
    """
    if isinstance(salt, bytes):
        salt = salt.decode('latin-1')
    if (not isinstance(min_length, int) or isinstance(min_length, bool) or
            min_length < 0):
        raise ValueError("min_length should be a non-negative integer, "
                         "got %r" % (min_length,))

    alphabet = unique(alphabet)
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise ConfigurationError(
            ConfigurationErrorKind.SHORT_ALPHABET,
            "Alphabet must contain at least %d unique characters, got %d" % (
                MIN_ALPHABET_LENGTH, len(alphabet)),
        )
    if ' ' in alphabet:
        raise ConfigurationError(
            ConfigurationErrorKind.SPACE_IN_ALPHABET,
            "Alphabet can't contain spaces",
        )

    separators, alphabet = split_separators(alphabet)
    separators = shuffled(separators, salt)
    separators, alphabet = _balance_separators(separators, alphabet)
    alphabet = shuffled(alphabet, salt)

    guard_count = int(math.ceil(len(alphabet) / GUARD_RATIO))
    if len(alphabet) < 3:
        guards = separators[:guard_count]
        separators = separators[guard_count:]
    else:
        guards = alphabet[:guard_count]
        alphabet = alphabet[guard_count:]

    logger.debug("Built configuration: %d alphabet characters, "
                 "%d separators, %d guards",
                 len(alphabet), len(separators), len(guards))
    return Configuration(
        salt=salt,
        alphabet=alphabet,
        separators=separators,
        guards=guards,
        min_length=min_length,
    )
