"""Env file parser — turn ``KEY=VALUE`` lines into an ``Envs`` collection.

The file format is deliberately small::

    <line>     ::= <ws>* ( COMMENT | ASSIGNMENT | <empty> )
    COMMENT    ::= "#" <any text to end of line>
    ASSIGNMENT ::= KEY "=" VALUE
    KEY        ::= one-or-more non-whitespace characters
    VALUE      ::= any text to end of line (no escaping; may be empty)

Each line goes through the same steps:

1. Drop the line ending (``\\n``, or ``\\r\\n``).
2. Check the bytes are valid UTF-8.
3. On line 1 only, drop a UTF-8 byte-order mark.
4. Strip *leading* whitespace, so indented lines and comments still work.
5. Skip blank lines and lines starting with ``#``.
6. Validate the key (everything before the first ``=``): it must be
   non-empty and contain no whitespace.
7. Keep the line verbatim.  Values are never trimmed, and a ``#`` after
   the key is ordinary text, not a comment.

The first bad line aborts the whole parse; callers never see a partial
result.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from envfile.envs import SEPARATOR, Envs
from envfile.errors import InvalidEncodingError, KeyWhitespaceError, MissingKeyError

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"
COMMENT_PREFIX = "#"

# str.isspace() also accepts the ASCII information separators, which are
# not in the Unicode White_Space set.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_WHITESPACE


def _trim_leading_space(text: str) -> str:
    for i, ch in enumerate(text):
        if not _is_space(ch):
            return text[i:]
    return ""


def _strip_line_ending(raw: bytes) -> bytes:
    return raw.removesuffix(b"\n").removesuffix(b"\r")


def _parse_line(raw: bytes, line_no: int) -> str | None:
    """Validate one raw line and return the assignment, or None to skip it."""
    if line_no == 1:
        raw = raw.removeprefix(UTF8_BOM)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(line_no) from e

    line = _trim_leading_space(text)
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    key, _, _ = line.partition(SEPARATOR)
    if not key:
        raise MissingKeyError(line_no)
    if any(_is_space(ch) for ch in key):
        raise KeyWhitespaceError(line_no, key)
    return line


def parse(stream: Iterable[bytes]) -> Envs:
    """Parse an env file from a binary stream.

    Args:
        stream: A file opened in binary mode, or any iterable of byte
            lines such as ``io.BytesIO``.

    Returns:
        The assignment lines in file order.  An input with nothing but
        comments and blank lines gives an empty ``Envs``.

    Raises:
        InvalidEncodingError: If a line is not valid UTF-8.
        MissingKeyError: If an assignment has an empty key.
        KeyWhitespaceError: If a key contains whitespace.

    """
    lines: list[str] = []
    for line_no, raw in enumerate(stream, start=1):
        line = _parse_line(_strip_line_ending(raw), line_no)
        if line is not None:
            lines.append(line)
    logger.debug("parsed %d assignments", len(lines))
    return Envs(lines)


def parse_file(path: str | os.PathLike[str]) -> Envs:
    """Open the file at *path* and parse it.

    The file is always closed before returning, whether parsing
    succeeded or not.

    Raises:
        OSError: If the file cannot be opened or read.
        ParseError: If the content is malformed (see ``parse``).

    """
    logger.debug("parsing env file %s", path)
    with Path(path).open("rb") as f:
        return parse(f)
