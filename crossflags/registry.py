"""
Flag registration and parsing.

FlagRegistry is a builder owned by the entry point: options are declared
on it once, the command line is parsed once, and the registry is then
thrown away. It wraps argparse so that options behave like the classic
single-dash flags of the build tool (``-env A=1``, ``-env=A=1`` and
``--env A=1`` are all accepted).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List, Optional, Sequence, Set, Union

from .errors import FlagError, FlagRegistrationError
from .list_flag import ListFlagValue

LOG = logging.getLogger(__name__)

_TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_LITERALS = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(raw: str) -> bool:
    """Parse a boolean literal the way the flag syntax expects (``-debug=false``)."""

    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {raw!r}")


class ListFlagAction(argparse.Action):
    """Argparse action that hands the raw argument to a ListFlagValue."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        flag_value: ListFlagValue,
        help: Optional[str] = None,
        metavar: Optional[str] = None,
    ) -> None:
        super().__init__(option_strings, dest, default=flag_value, help=help, metavar=metavar)
        self.flag_value = flag_value

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        try:
            self.flag_value.set(values)
        except FlagError as exc:
            raise argparse.ArgumentError(self, str(exc)) from exc

        setattr(namespace, self.dest, self.flag_value)


class FlagRegistry:
    """
    Declares named options, their destinations, defaults and help text.

    Scalar options store their default until the command line overwrites
    it; list options store a ListFlagValue that parses its own argument.
    """

    def __init__(self, prog: str, description: Optional[str] = None) -> None:
        self.parser = argparse.ArgumentParser(
            prog=prog,
            description=description,
            allow_abbrev=False,
            add_help=False,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )
        self.parser.add_argument("-h", "-help", "--help", action="help", help="Show this help message and exit")
        self._names: Set[str] = set()
        # Options that always take a value, in every spelling.
        self._value_options: Set[str] = set()

    @property
    def names(self) -> List[str]:
        return sorted(self._names)

    def _option_strings(self, name: str) -> List[str]:
        if name in self._names:
            raise FlagRegistrationError(f"flag redefined: {name}")
        self._names.add(name)
        return [f"-{name}", f"--{name}"]

    def register_string(self, name: str, dest: str, default: str, description: str) -> None:
        option_strings = self._option_strings(name)
        self._value_options.update(option_strings)
        self.parser.add_argument(
            *option_strings,
            dest=dest,
            default=default,
            metavar="value",
            help=description,
        )

    def register_bool(self, name: str, dest: str, description: str, default: bool = False) -> None:
        # A bare -name means true; -name=<literal> takes an explicit value.
        self.parser.add_argument(
            *self._option_strings(name),
            dest=dest,
            nargs="?",
            const=True,
            default=default,
            type=parse_bool,
            metavar="bool",
            help=description,
        )

    def register_list(self, name: str, dest: str, value: ListFlagValue, description: str) -> None:
        option_strings = self._option_strings(name)
        self._value_options.update(option_strings)
        self.parser.add_argument(
            *option_strings,
            dest=dest,
            action=ListFlagAction,
            flag_value=value,
            metavar="list",
            help=description,
        )

    def _attach_values(self, argv: Sequence[str]) -> List[str]:
        """
        Rewrite ``-name value`` as ``-name=value`` for options taking a value.

        The argument after such an option is its value whatever it looks
        like, so ``-ldflags -s`` sets ldflags to ``-s`` instead of being read
        as another option.
        """

        attached: List[str] = []
        args = iter(argv)
        for arg in args:
            if arg == "--":
                attached.append(arg)
                attached.extend(args)
                break
            if arg in self._value_options:
                value = next(args, None)
                if value is not None:
                    arg = f"{arg}={value}"
            attached.append(arg)
        return attached

    def parse(self, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """
        Parse ``argv`` (default: sys.argv[1:]).

        Any error is reported on stderr and ends the process with status 2.
        """

        if argv is None:
            argv = sys.argv[1:]

        namespace = self.parser.parse_args(self._attach_values(argv))
        LOG.debug("parsed flags: %s", vars(namespace))
        return namespace
