"""Apply parsed env files to a process environment.

``load_envs`` is the only function here that writes anything.  It sets
each ``(key, value)`` pair in file order, so when a key appears twice the
later line wins.  It stops at the first assignment the environment
refuses and does **not** undo the ones already made.

By default the target is ``os.environ``, which is process-wide state:
concurrent callers must serialise their own access.  Passing a plain
dict as ``environ`` keeps the real environment untouched, which is how
the tests use it.
"""

import logging
import os
from collections.abc import Iterable, MutableMapping

from envfile.envs import Envs
from envfile.errors import EnvironmentApplyError
from envfile.parser import parse, parse_file

logger = logging.getLogger(__name__)


def load_envs(envs: Envs, environ: MutableMapping[str, str] | None = None) -> None:
    """Set every pair of *envs* in *environ* (``os.environ`` by default).

    Raises:
        EnvironmentApplyError: If the environment rejects an assignment,
            e.g. a key or value holding a NUL character.  The original
            error is available as ``__cause__``.

    """
    target = os.environ if environ is None else environ
    count = 0
    for key, value in envs.pairs():
        try:
            target[key] = value
        except (ValueError, OSError) as e:
            raise EnvironmentApplyError(key, str(e)) from e
        count += 1
    logger.debug("applied %d environment variables", count)


def load(stream: Iterable[bytes], environ: MutableMapping[str, str] | None = None) -> Envs:
    """Parse *stream* and apply the result; return what was applied."""
    envs = parse(stream)
    load_envs(envs, environ)
    return envs


def load_file(
    path: str | os.PathLike[str],
    environ: MutableMapping[str, str] | None = None,
) -> Envs:
    """Parse the file at *path* and apply the result; return what was applied."""
    envs = parse_file(path)
    load_envs(envs, environ)
    return envs
