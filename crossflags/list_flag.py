"""
Comma-separated list flags.

A ListFlagValue turns one raw command-line argument such as
``"FOO=1,BAR=2"`` into an ordered list of strings. The env, architecture
and tags flags are all the same parser; they only differ in how each
piece is normalised and validated, so each variant is built by a small
factory below.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional

from .errors import FlagAlreadySetError, MalformedEnvEntryError

LOG = logging.getLogger(__name__)

Normalizer = Callable[[str], str]
Validator = Callable[[str], None]

SEPARATOR = ","


class ListFlagValue:
    """
    An ordered list of strings parsed from a single comma-separated
    argument.

    Each call to set() replaces the held list. Elements keep the order
    they were given in and duplicates are allowed, since consumers such
    as the build loop rely on declaration order.
    """

    def __init__(
        self,
        name: str,
        normalize: Optional[Normalizer] = None,
        validate: Optional[Validator] = None,
        initial: Optional[Iterable[str]] = None,
    ) -> None:
        self.name = name
        self._normalize = normalize
        self._validate = validate
        self._values: List[str] = list(initial or [])

    @property
    def values(self) -> List[str]:
        return list(self._values)

    def set(self, raw: str) -> None:
        """
        Replace the held list with the pieces of ``raw``.

        Only a value that already holds more than one element counts as
        "already set"; a single-element value may be set again. Validation
        runs over every piece before anything is stored, so a failed call
        leaves the previous value in place.
        """

        if len(self._values) > 1:
            raise FlagAlreadySetError()

        pieces = raw.split(SEPARATOR)
        if self._normalize is not None:
            pieces = [self._normalize(piece) for piece in pieces]
        if self._validate is not None:
            for piece in pieces:
                self._validate(piece)

        self._values = pieces
        LOG.debug("flag %s set to %s", self.name, self._values)

    def string(self) -> str:
        return str(self._values)

    def __str__(self) -> str:
        return self.string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self._values!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ListFlagValue):
            return self._values == other._values
        if isinstance(other, list):
            return self._values == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


def validate_env_entry(entry: str) -> None:
    """Accept ``KEY=VALUE`` and ``KEY=``; reject anything without exactly one ``=``."""

    if len(entry.split("=")) != 2:
        raise MalformedEnvEntryError(entry)


def env_flag() -> ListFlagValue:
    # Env entries are kept verbatim, surrounding whitespace included.
    return ListFlagValue("env", validate=validate_env_entry)


def target_arch_flag(default: Optional[Iterable[str]] = None) -> ListFlagValue:
    return ListFlagValue("arch", normalize=str.strip, initial=default)


def tags_flag() -> ListFlagValue:
    return ListFlagValue("tags", normalize=str.strip)
