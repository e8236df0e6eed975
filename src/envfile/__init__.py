"""Parse ``KEY=VALUE`` env files and apply them to the environment.

Re-exports public symbols so callers can write::

    from envfile import load_file, parse_file
"""

from envfile.envs import Envs
from envfile.errors import (
    EnvFileError,
    EnvironmentApplyError,
    InvalidEncodingError,
    KeyWhitespaceError,
    MissingKeyError,
    ParseError,
)
from envfile.loader import load, load_envs, load_file
from envfile.parser import parse, parse_file

__all__ = [
    "EnvFileError",
    "EnvironmentApplyError",
    "Envs",
    "InvalidEncodingError",
    "KeyWhitespaceError",
    "MissingKeyError",
    "ParseError",
    "load",
    "load_envs",
    "load_file",
    "parse",
    "parse_file",
]
