from .errors import DecodeError, DecodeErrorKind
from .shuffle import shuffle


__all__ = ['encode', 'decode']


def _check_numbers(numbers):
    for number in numbers:
        if (not isinstance(number, int) or isinstance(number, bool) or
                number < 0):
            raise ValueError("Can only encode non-negative integers, got %r"
                             % (number,))


def _to_digits(number, alphabet):
    nb_chars = len(alphabet)
    digits = []
    while True:
        digits.append(alphabet[number % nb_chars])
        number = number // nb_chars
        if not number:
            break
    return ''.join(reversed(digits))


def _from_digits(digits, alphabet):
    nb_chars = len(alphabet)
    cmap = dict((c, i) for i, c in enumerate(alphabet))
    number = 0
    for c in digits:
        try:
            idx = cmap[c]
        except KeyError:
            raise DecodeError(
                DecodeErrorKind.NON_ALPHABET_CHARS,
                "Id contains invalid character %r" % c,
            )
        number = number * nb_chars + idx
    return number


def _reshuffle(working, lottery, salt):
    """Shuffle the working alphabet for the next number.
    """
    buf = (lottery + salt + ''.join(working))[:len(working)]
    shuffle(working, buf)


def _pad(config, encoded, values_hash, working):
    guards = config.guards
    min_length = config.min_length

    guard_idx = (values_hash + ord(encoded[0])) % len(guards)
    encoded = guards[guard_idx] + encoded

    if len(encoded) < min_length:
        guard_idx = (values_hash + ord(encoded[2])) % len(guards)
        encoded += guards[guard_idx]

    half = len(working) // 2
    while len(encoded) < min_length:
        shuffle(working, ''.join(working))
        encoded = ''.join(working[half:]) + encoded + ''.join(working[:half])
        excess = len(encoded) - min_length
        if excess > 0:
            start = excess // 2
            encoded = encoded[start:start + min_length]

    return encoded


def _encode(config, numbers):
    alphabet = config.alphabet
    separators = config.separators

    values_hash = sum(number % (i + 100) for i, number in enumerate(numbers))
    lottery = alphabet[values_hash % len(alphabet)]

    working = list(alphabet)
    parts = [lottery]
    last = len(numbers) - 1
    for i, number in enumerate(numbers):
        _reshuffle(working, lottery, config.salt)
        digits = _to_digits(number, working)
        parts.append(digits)
        if i < last:
            sep_idx = number % (ord(digits[0]) + i) % len(separators)
            parts.append(separators[sep_idx])
    encoded = ''.join(parts)

    if len(encoded) < config.min_length:
        encoded = _pad(config, encoded, values_hash, working)
    return encoded


def encode(config, numbers):
    """Encode a sequence of non-negative integers into an id.

    An empty sequence gives an empty string.
    """
    numbers = tuple(numbers)
    if not numbers:
        return ''
    _check_numbers(numbers)
    return _encode(config, numbers)


def _strip_guards(config, hashid):
    guards = config.guards
    positions = [i for i, c in enumerate(hashid) if c in guards]
    if not positions:
        core = hashid
    elif len(positions) == 1:
        core = hashid[positions[0] + 1:]
    else:
        core = hashid[positions[0] + 1:positions[-1]]

    if any(c in guards for c in core):
        raise DecodeError(
            DecodeErrorKind.INTERNAL_GUARD_CHARS,
            "Id contains guard characters in its body",
        )
    return core


def _split_tokens(config, text):
    tokens = []
    current = []
    for c in text:
        if c in config.separators:
            tokens.append(''.join(current))
            current = []
        else:
            current.append(c)
    tokens.append(''.join(current))
    return tokens


def _decode(config, hashid):
    core = _strip_guards(config, hashid)
    if not core:
        return ()

    lottery, body = core[0], core[1:]
    if lottery not in config.alphabet:
        raise DecodeError(
            DecodeErrorKind.NON_ALPHABET_CHARS,
            "Id contains invalid character %r" % lottery,
        )

    working = list(config.alphabet)
    numbers = []
    for token in _split_tokens(config, body):
        # The encoder never writes a number with zero digits
        if not token:
            raise DecodeError(
                DecodeErrorKind.NON_ALPHABET_CHARS,
                "Id contains an empty segment",
            )
        _reshuffle(working, lottery, config.salt)
        numbers.append(_from_digits(token, working))
    return tuple(numbers)


def decode(config, hashid):
    """Decode an id back into the tuple of integers it was made from.

    Raises `DecodeError` if the id wasn't produced with this configuration.
    The empty string decodes to an empty tuple.
    """
    if not hashid:
        return ()
    numbers = _decode(config, hashid)
    if encode(config, numbers) != hashid:
        raise DecodeError(
            DecodeErrorKind.CHECKSUM_MISMATCH,
            "Id was not generated with this configuration",
        )
    return numbers
