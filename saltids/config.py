from dataclasses import dataclass
import os

from .alphabet import DEFAULT_ALPHABET


@dataclass(frozen=True)
class Settings:
    salt: str
    min_length: int
    alphabet: str
    debug: bool
    port: int
    shutdown_time: int


def _env_flag(value):
    return value.lower() in ('y', 'yes', 'true', 'on', '1')


def _env_int(environ, name, default):
    value = environ.get(name, '')
    if not value:
        return default
    try:
        return int(value, 10)
    except ValueError:
        raise ValueError("%s should be an integer, got %r" % (name, value))


def from_environ(environ=None):
    """Read the settings from environment variables.
    """
    if environ is None:
        environ = os.environ
    return Settings(
        salt=environ.get('SALTIDS_SALT', ''),
        min_length=_env_int(environ, 'SALTIDS_MIN_LENGTH', 0),
        alphabet=environ.get('SALTIDS_ALPHABET') or DEFAULT_ALPHABET,
        debug=_env_flag(environ.get('SALTIDS_DEBUG', '')),
        port=_env_int(environ, 'SALTIDS_PORT', 8000),
        shutdown_time=_env_int(environ, 'TORNADO_SHUTDOWN_TIME', 30),
    )
