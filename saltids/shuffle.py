__all__ = ['shuffle', 'shuffled']


def shuffle(chars, salt):
    """Permute a list of characters in place, driven by the salt.

    This is a Fisher-Yates variant where the swap target depends on the
    running sum of the salt's code points. The exact arithmetic is part of
    the output format: changing it changes every id ever issued.
    """
    salt_len = len(salt)
    if not salt_len:
        return
    v = 0
    p = 0
    for i in range(len(chars) - 1, 0, -1):
        v %= salt_len
        t = ord(salt[v])
        p += t
        j = (t + v + p) % i
        chars[i], chars[j] = chars[j], chars[i]
        v += 1


def shuffled(text, salt):
    chars = list(text)
    shuffle(chars, salt)
    return ''.join(chars)
