import re

from .codec import decode, encode
from .errors import DecodeError


__all__ = ['encode_hex', 'decode_hex']


_hex_re = re.compile(r'[0-9a-fA-F]+')

CHUNK_SIZE = 12


def encode_hex(config, hexstr):
    """Encode a hexadecimal string, for example a MongoDB ObjectId.

    The string is cut into chunks of 12 digits. Each chunk gets a leading
    '1' so leading zeros survive the trip through an integer.

    Returns None if the input is not hexadecimal.
    """
    if not isinstance(hexstr, str) or not _hex_re.fullmatch(hexstr):
        return None
    numbers = [int('1' + hexstr[i:i + CHUNK_SIZE], 16)
               for i in range(0, len(hexstr), CHUNK_SIZE)]
    return encode(config, numbers)


def decode_hex(config, hashid):
    """Decode an id made by `encode_hex()`, or return None.
    """
    try:
        numbers = decode(config, hashid)
    except DecodeError:
        return None
    if not numbers:
        return None
    chunks = []
    for number in numbers:
        digits = '%x' % number
        if digits[0] != '1' or len(digits) < 2:
            return None
        chunks.append(digits[1:])
    return ''.join(chunks)
