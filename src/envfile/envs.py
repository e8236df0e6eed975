"""Envs — an ordered, read-only collection of ``KEY=VALUE`` lines.

The parser hands back the assignment lines exactly as they appeared in
the file, without splitting them.  Splitting happens on demand:

- ``pairs()`` — a lazy generator of ``(key, value)`` tuples in file order.
- ``to_dict()`` — a plain dict where the *last* occurrence of a key wins.

Key design properties:
    - **Duplicates are kept** — ``["A=1", "A=2"]`` stays two lines long.
      Uniqueness only appears in ``to_dict()``.
    - **Immutable** — there are no mutators; build a new ``Envs`` instead.
    - **No validation on construction** — ``Envs(["A=1"])`` trusts its
      input the same way a list would.  Use the parser for untrusted text.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

SEPARATOR = "="


class Envs(Sequence[str]):
    """An immutable sequence of raw ``KEY=VALUE`` assignment lines."""

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[str] = ()) -> None:
        """Create a collection from *lines*, kept in the given order.

        Args:
            lines: Assignment lines (copied, not referenced).

        """
        self._lines: tuple[str, ...] = tuple(lines)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Envs: ...

    def __getitem__(self, index: int | slice) -> str | Envs:
        """Return one line, or a new ``Envs`` for a slice."""
        if isinstance(index, slice):
            return Envs(self._lines[index])
        return self._lines[index]

    def __len__(self) -> int:
        """Return the number of lines, duplicates included."""
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the raw lines in order."""
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        """Compare line-by-line with another ``Envs``."""
        if not isinstance(other, Envs):
            return NotImplemented
        return self._lines == other._lines

    def __hash__(self) -> int:
        """Hash the underlying lines."""
        return hash(self._lines)

    def __repr__(self) -> str:
        """Return ``Envs([...])``."""
        return f"Envs({list(self._lines)!r})"

    def pairs(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` for every line, in order.

        Each line is split at its first ``=``; a line with no ``=`` gives
        the whole line as key and an empty value.  Every call returns a
        fresh generator, and nothing is split until it is asked for.
        """
        for line in self._lines:
            key, _, value = line.partition(SEPARATOR)
            yield key, value

    def to_dict(self) -> dict[str, str]:
        """Return a key-to-value mapping; later duplicates overwrite earlier ones."""
        return dict(self.pairs())
