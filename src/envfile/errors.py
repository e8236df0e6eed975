"""Errors raised while reading env files and applying them.

Every failure the library reports is an ``EnvFileError``, so callers can
catch one class when they don't care why a file was rejected.  Below it:

- **ParseError** — the file is malformed.  Carries the 1-based ``line``
  number, counted over every line read (comments and blanks included).
- **EnvironmentApplyError** — the target environment refused one
  assignment.  The underlying platform error is chained as ``__cause__``.

Opening or reading the file can also fail; that ``OSError`` is passed
through untouched rather than wrapped.
"""


class EnvFileError(Exception):
    """Base class for every error raised by envfile."""


class ParseError(EnvFileError):
    """Raise when a line of an env file violates the grammar."""

    def __init__(self, message: str, *, line: int) -> None:
        """Create a parse error for *line*.

        Args:
            message: Human-readable description.
            line: The 1-based number of the offending line.

        """
        super().__init__(message)
        self.line = line


class InvalidEncodingError(ParseError):
    """Raise when a line's bytes are not valid UTF-8."""

    def __init__(self, line: int) -> None:
        """Create the error for *line*."""
        super().__init__(f"invalid UTF-8 bytes at line {line}", line=line)


class MissingKeyError(ParseError):
    """Raise when an assignment line has nothing before ``=``."""

    def __init__(self, line: int) -> None:
        """Create the error for *line*."""
        super().__init__(f"no variable key on line {line}", line=line)


class KeyWhitespaceError(ParseError):
    """Raise when the key token contains a whitespace character."""

    def __init__(self, line: int, key: str) -> None:
        """Create the error for *key* found on *line*.

        Args:
            line: The 1-based number of the offending line.
            key: The rejected key text, kept for diagnostics.

        """
        super().__init__(
            f"the variable key contains whitespace: '{key}' (line {line})",
            line=line,
        )
        self.key = key


class EnvironmentApplyError(EnvFileError):
    """Raise when the environment rejects a key/value assignment."""

    def __init__(self, key: str, reason: str) -> None:
        """Create the error for the rejected *key*.

        Args:
            key: The variable the environment refused.
            reason: The platform's explanation, e.g. ``embedded null byte``.

        """
        super().__init__(f"cannot set environment variable '{key}': {reason}")
        self.key = key
        self.reason = reason
