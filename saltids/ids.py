import collections.abc
import logging

from . import alphabet as _alphabet
from . import codec
from . import hexids
from .errors import DecodeError, DecodeErrorKind


__all__ = ['SaltIDs', 'MultiSaltIDs']


logger = logging.getLogger(__name__)


class SaltIDs(object):
    """Encodes sequences of numbers as short random-looking strings.

    This turns ``[683, 94108, 123, 5]`` into something like
    ``'aBMswoO2UB3Sj'``, and back. The output depends on the salt, so ids
    made with one salt won't decode with another.

    Not encryption: this only hides the numbers from casual observers.

    A `str` salt is shuffled by its Unicode code points, a `bytes` salt by
    its byte values. They only agree for ASCII salts: `'été'` and
    `'été'.encode('utf-8')` give different ids, so keep using one form.
    """
    def __init__(self, salt='', min_length=0,
                 alphabet=_alphabet.DEFAULT_ALPHABET):
        self._config = _alphabet.build(alphabet, salt, min_length)

    @classmethod
    def with_min_length(cls, salt, min_length):
        return cls(salt, min_length=min_length)

    @classmethod
    def with_alphabet(cls, salt, alphabet, min_length=0):
        return cls(salt, min_length=min_length, alphabet=alphabet)

    @property
    def config(self):
        return self._config

    @property
    def salt(self):
        return self._config.salt

    @property
    def alphabet(self):
        return self._config.alphabet

    @property
    def separators(self):
        return self._config.separators

    @property
    def guards(self):
        return self._config.guards

    @property
    def min_length(self):
        return self._config.min_length

    def encode(self, *numbers):
        """Encode one or more numbers into a random-looking id.

        Accepts either numbers as arguments or a single iterable.
        """
        if (len(numbers) == 1 and
                isinstance(numbers[0], collections.abc.Iterable) and
                not isinstance(numbers[0], (str, bytes))):
            numbers = numbers[0]
        return codec.encode(self._config, numbers)

    def decode(self, hashid):
        """Decode a random-looking id into the tuple of original numbers.

        Raises `DecodeError` if the id was not made with this salt and
        alphabet.
        """
        try:
            return codec.decode(self._config, hashid)
        except DecodeError as e:
            logger.debug("Rejected id %r: %s", hashid, e)
            raise

    def decode_one(self, hashid):
        """Decode an id that should contain exactly one number.
        """
        numbers = self.decode(hashid)
        if len(numbers) != 1:
            raise DecodeError(
                DecodeErrorKind.CHECKSUM_MISMATCH,
                "Expected a single number, id contains %d" % len(numbers),
            )
        return numbers[0]

    def encode_hex(self, hexstr):
        return hexids.encode_hex(self._config, hexstr)

    def decode_hex(self, hashid):
        return hexids.decode_hex(self._config, hashid)

    def __repr__(self):
        return "<SaltIDs alphabet=%r, min_length=%d>" % (
            self.alphabet, self.min_length)


class MultiSaltIDs(object):
    """Generates multiple sequences of ids.

    You probably don't want ids for different things to follow the same
    sequence. Use this class to use multiple sequences, without having to keep
    multiple generators around (or provide multiple salts).
    """
    def __init__(self, salt, min_length=0,
                 alphabet=_alphabet.DEFAULT_ALPHABET):
        if isinstance(salt, bytes):
            salt = salt.decode('latin-1')
        self.salt = salt
        self.min_length = min_length
        self.alphabet = alphabet
        self.saltids = {}
        # Fail early on a bad alphabet, rather than on first use
        _alphabet.build(alphabet, salt, min_length)

    def get(self, key):
        try:
            return self.saltids[key]
        except KeyError:
            logger.debug("Creating id sequence %r", key)
            s = self.saltids[key] = SaltIDs(key + self.salt,
                                            min_length=self.min_length,
                                            alphabet=self.alphabet)
            return s

    def encode(self, key, *numbers):
        return self.get(key).encode(*numbers)

    def decode(self, key, hashid):
        return self.get(key).decode(hashid)
