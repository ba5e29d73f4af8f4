__version__ = '1.0.0'

from .alphabet import DEFAULT_ALPHABET, Configuration, build  # noqa: E402
from .errors import ConfigurationError, ConfigurationErrorKind, \
    DecodeError, DecodeErrorKind  # noqa: E402
from .ids import MultiSaltIDs, SaltIDs  # noqa: E402


__all__ = ['__version__', 'DEFAULT_ALPHABET', 'Configuration', 'build',
           'ConfigurationError', 'ConfigurationErrorKind',
           'DecodeError', 'DecodeErrorKind', 'MultiSaltIDs', 'SaltIDs']
