import unittest

from saltids.alphabet import DEFAULT_ALPHABET, DEFAULT_SEPARATORS, build, \
    split_separators, unique
from saltids.errors import ConfigurationError, ConfigurationErrorKind
from saltids.shuffle import shuffle, shuffled


class TestShuffle(unittest.TestCase):
    def test_known(self):
        self.assertEqual(shuffled('abcd', 'ab'), 'bdac')

    def test_empty_salt(self):
        self.assertEqual(shuffled(DEFAULT_ALPHABET, ''), DEFAULT_ALPHABET)

    def test_in_place(self):
        chars = list('abcd')
        self.assertIsNone(shuffle(chars, 'ab'))
        self.assertEqual(chars, ['b', 'd', 'a', 'c'])

    def test_permutation(self):
        result = shuffled(DEFAULT_ALPHABET, 'this is my salt')
        self.assertNotEqual(result, DEFAULT_ALPHABET)
        self.assertEqual(sorted(result), sorted(DEFAULT_ALPHABET))
        self.assertEqual(result,
                         shuffled(DEFAULT_ALPHABET, 'this is my salt'))
        self.assertNotEqual(result,
                            shuffled(DEFAULT_ALPHABET, 'this is my pepper'))

    def test_short(self):
        self.assertEqual(shuffled('', 'salt'), '')
        self.assertEqual(shuffled('a', 'salt'), 'a')


class TestBuild(unittest.TestCase):
    def assertPartition(self, config, alphabet):
        sets = [set(config.alphabet), set(config.separators),
                set(config.guards)]
        self.assertFalse(sets[0] & sets[1])
        self.assertFalse(sets[0] & sets[2])
        self.assertFalse(sets[1] & sets[2])
        self.assertEqual(
            sorted(config.alphabet + config.separators + config.guards),
            sorted(unique(alphabet)),
        )

    def test_unique(self):
        self.assertEqual(unique('abacbdd'), 'abcd')

    def test_split_separators(self):
        self.assertEqual(split_separators('abcdefghi'), ('cfhi', 'abdeg'))

    def test_default(self):
        config = build(DEFAULT_ALPHABET, 'this is my salt')
        self.assertPartition(config, DEFAULT_ALPHABET)
        self.assertEqual(len(config.separators), 14)
        self.assertEqual(set(config.separators), set(DEFAULT_SEPARATORS))
        self.assertEqual(len(config.guards), 4)
        self.assertEqual(len(config.alphabet), 44)
        self.assertEqual(config.salt, 'this is my salt')
        self.assertEqual(config.min_length, 0)

    def test_deterministic(self):
        self.assertEqual(build(DEFAULT_ALPHABET, 'salt', 5),
                         build(DEFAULT_ALPHABET, 'salt', 5))
        self.assertNotEqual(build(DEFAULT_ALPHABET, 'salt').alphabet,
                            build(DEFAULT_ALPHABET, 'pepper').alphabet)

    def test_hex_alphabet(self):
        config = build('0123456789abcdef', 'this is my salt')
        self.assertPartition(config, '0123456789abcdef')
        # 'c' and 'f', plus 2 moved from the alphabet to reach 14 / 3.5
        self.assertEqual(len(config.separators), 4)
        self.assertEqual(len(config.guards), 1)
        self.assertEqual(len(config.alphabet), 11)

    def test_no_default_separators(self):
        alphabet = 'abdegjklmnopqrvwxyz'
        config = build(alphabet, 'salt')
        self.assertPartition(config, alphabet)
        self.assertEqual(len(config.separators), 6)
        self.assertEqual(len(config.guards), 2)

    def test_separators_only(self):
        alphabet = DEFAULT_SEPARATORS + '01'
        config = build(alphabet, 'salt')
        self.assertPartition(config, alphabet)
        # Alphabet is too short, guards come from the separators
        self.assertEqual(sorted(config.alphabet), ['0', '1'])
        self.assertEqual(len(config.guards), 1)
        self.assertEqual(len(config.separators), 13)

    def test_duplicates(self):
        alphabet = DEFAULT_ALPHABET + DEFAULT_ALPHABET[::-1]
        self.assertEqual(build(alphabet, 'salt'),
                         build(DEFAULT_ALPHABET, 'salt'))

    def test_bytes_salt(self):
        self.assertEqual(build(DEFAULT_ALPHABET, b'this is my salt'),
                         build(DEFAULT_ALPHABET, 'this is my salt'))
        # Byte values, not decoded text
        self.assertEqual(build(DEFAULT_ALPHABET, b'caf\xe9'),
                         build(DEFAULT_ALPHABET, 'caf\xe9'))
        self.assertNotEqual(build(DEFAULT_ALPHABET, 'été'.encode('utf-8')),
                            build(DEFAULT_ALPHABET, 'été'))

    def test_short_alphabet(self):
        with self.assertRaises(ConfigurationError) as cm:
            build('abcdefghijklmno')
        self.assertEqual(cm.exception.kind,
                         ConfigurationErrorKind.SHORT_ALPHABET)
        with self.assertRaises(ConfigurationError) as cm:
            build('aabbccddeeffgghhiijjkkllmmnnoo')
        self.assertEqual(cm.exception.kind,
                         ConfigurationErrorKind.SHORT_ALPHABET)

    def test_space(self):
        with self.assertRaises(ConfigurationError) as cm:
            build(DEFAULT_ALPHABET + ' ')
        self.assertEqual(cm.exception.kind,
                         ConfigurationErrorKind.SPACE_IN_ALPHABET)
        self.assertIsInstance(cm.exception, ValueError)

    def test_min_length(self):
        self.assertEqual(build(min_length=12).min_length, 12)
        with self.assertRaises(ValueError):
            build(min_length=-1)
        with self.assertRaises(ValueError):
            build(min_length='8')
