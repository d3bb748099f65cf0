# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Typed Flag Parsing.

The `flagset` module contains the `FlagSet` class, which holds the flags of
a program and parses command line tokens into them.

The procedure to parse a command line is:

1. Create a `FlagSet`
2. Define flags with `define_int`, `define_float`, `define_bool` and
   `define_string`, keeping the returned `Flag` handles if desired
3. Call `parse` and branch on the returned `ParseResult`
4. Read values from the handles, or by name with `get`

Parsing never raises on bad user input; the outcome is always reported
through the returned `ParseResult`.
"""

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO, TypeVar

from flagset.exceptions import FlagDefinitionError
from flagset.flag import Flag
from flagset.log import get_logger
from flagset.result import ParseResult
from flagset.value import Datum, Kind, Value

T = TypeVar("T", bound=Datum)

logger = get_logger(__name__)

HELP_FLAG = "help"
HELP_ALIAS = "h"
HELP_TOKENS = frozenset(("--help", "-h", "-help"))
TERMINATOR = "--"


class FlagSet:
    """An ordered, named collection of typed flags.

    A boolean ``help`` flag with alias ``h`` is registered on construction.
    Flags keep their declaration order, which is also the order used in
    :meth:`usage`. A flag set may be parsed any number of times; every call
    starts from the registered defaults.
    """

    def __init__(self, name: str, description: str = "") -> None:
        """Creates an empty flag set, apart from the help flag.

        :param name: Program name shown in the usage text.
        :param description: Optional program description for the usage text.
        """
        self.name = name
        self.description = description

        self._flags: list[Flag] = []
        self._index: dict[str, Flag] = {}
        self._alias_index: dict[str, Flag] = {}
        self._positional: list[str] = []

        self.define_bool(HELP_FLAG, False, "show this help message", HELP_ALIAS)

    def define_int(self, name: str, default: int, usage: str, alias: str | None = None) -> Flag:
        """Defines a signed 64 bit integer flag."""
        return self._add_flag(name, Kind.INT, default, usage, alias)

    def define_float(
        self, name: str, default: float, usage: str, alias: str | None = None
    ) -> Flag:
        """Defines a double precision float flag."""
        return self._add_flag(name, Kind.FLOAT, default, usage, alias)

    def define_bool(self, name: str, default: bool, usage: str, alias: str | None = None) -> Flag:
        """Defines a boolean flag. Boolean flags never consume the following
        token; ``--name`` and ``-a`` alone set them to true."""
        return self._add_flag(name, Kind.BOOL, default, usage, alias)

    def define_string(self, name: str, default: str, usage: str, alias: str | None = None) -> Flag:
        """Defines a text flag."""
        return self._add_flag(name, Kind.STRING, default, usage, alias)

    def define(
        self, name: str, kind: Kind, default: Datum, usage: str, alias: str | None = None
    ) -> Flag:
        """Defines a flag of the given kind."""
        return self._add_flag(name, kind, default, usage, alias)

    def _add_flag(
        self,
        name: str,
        kind: Kind,
        default: Datum,
        usage: str,
        alias: str | None,
    ) -> Flag:
        if name == "":
            raise FlagDefinitionError(name, "name must not be empty")
        if name.startswith("-") or "=" in name or any(c.isspace() for c in name):
            raise FlagDefinitionError(
                name, "name must not start with '-' or contain '=' or whitespace"
            )
        if name in self._index:
            raise FlagDefinitionError(name, "already defined")

        # An empty or NUL alias means "no alias".
        if alias == "" or alias == "\0":
            alias = None
        if alias is not None:
            if len(alias) != 1 or alias == "-":
                raise FlagDefinitionError(name, f"invalid alias {alias!r}")
            if (other := self._alias_index.get(alias)) is not None:
                raise FlagDefinitionError(
                    name, f"alias '-{alias}' is already used by '{other.name}'"
                )

        try:
            value = Value(kind, default)
        except TypeError as e:
            raise FlagDefinitionError(name, f"invalid default: {e}") from e

        flag = Flag(name=name, usage=usage, value=value, alias=alias)
        self._flags.append(flag)
        self._index[name] = flag
        if alias is not None:
            self._alias_index[alias] = flag

        logger.debug(f"defined {flag!r}")
        return flag

    def parse(self, args: Sequence[str]) -> ParseResult:
        """Parses a full argument vector.

        :param args: The arguments as found in ``sys.argv``; the first element
                     is the program name and is skipped.
        """
        return self.parse_args(args[1:])

    def parse_args(self, args: Sequence[str]) -> ParseResult:
        """Parses ``args``, which must not include the program name.

        All flags are reset to their defaults and the positional arguments
        are cleared first. Parsing stops at the first error; flags assigned
        before that stay set until the next call.
        """
        self._reset()
        no_more_flags = False

        i = 0
        while i < len(args):
            arg = args[i]
            i += 1

            if no_more_flags:
                self._positional.append(arg)
                continue

            if arg in HELP_TOKENS:
                logger.debug("help requested")
                self._reset()
                return ParseResult.help()

            if arg == TERMINATOR:
                logger.trace("end of flags")
                no_more_flags = True
                continue

            if not arg.startswith("-") or arg == "-":
                logger.trace(f"positional argument {arg!r}")
                self._positional.append(arg)
                continue

            if arg.startswith("--"):
                result, i = self._parse_long(arg, args, i)
            else:
                result, i = self._parse_short(arg, args, i)

            if result is not None:
                logger.debug(f"parsing failed: {result.message}")
                return result

        logger.debug(f"parsed {len(args)} arguments, {len(self._positional)} positional")
        return ParseResult.success()

    def _parse_long(
        self, arg: str, args: Sequence[str], i: int
    ) -> tuple[ParseResult | None, int]:
        name, sep, text = arg[2:].partition("=")
        flag = self._index.get(name)

        if sep == "" and flag is not None:
            if flag.kind is Kind.BOOL:
                text = "true"
            # A following token which looks like a flag is never taken as value.
            elif i < len(args) and not args[i].startswith("-"):
                text = args[i]
                i += 1
            else:
                return ParseResult.missing_value(name, name), i

        if flag is None:
            return ParseResult.unknown_flag(name, name), i

        if (err := flag.value.set(text)) is not None:
            return ParseResult.invalid_value(name, name, err), i

        logger.trace(f"--{name} = {flag.value}")
        flag.set = True
        return None, i

    def _parse_short(
        self, arg: str, args: Sequence[str], i: int
    ) -> tuple[ParseResult | None, int]:
        alias = arg[1]
        spelling = f"-{alias}"
        flag = self._alias_index.get(alias)

        if flag is None:
            return ParseResult.unknown_flag(alias, spelling), i

        if len(arg) > 2:
            text = arg[2:]
        elif flag.kind is Kind.BOOL:
            text = "true"
        # Unlike the long form, the next token is taken whatever it looks like.
        elif i < len(args):
            text = args[i]
            i += 1
        else:
            return ParseResult.missing_value(flag.name, spelling), i

        if (err := flag.value.set(text)) is not None:
            return ParseResult.invalid_value(flag.name, spelling, err), i

        logger.trace(f"{spelling} ({flag.name}) = {flag.value}")
        flag.set = True
        return None, i

    def _reset(self) -> None:
        for flag in self._flags:
            flag.reset()
        self._positional.clear()

    def lookup(self, name: str) -> Flag | None:
        """Returns the flag called ``name``, or None."""
        return self._index.get(name)

    def lookup_alias(self, alias: str) -> Flag | None:
        return self._alias_index.get(alias)

    def is_set(self, name: str) -> bool:
        """Reports whether the flag was given by the user in the most recent parse."""
        flag = self.lookup(name)
        return flag is not None and flag.set

    def set_flags(self) -> list[Flag]:
        return [flag for flag in self._flags if flag.set]

    @property
    def positional(self) -> list[str]:
        """The non-flag arguments of the most recent parse."""
        return list(self._positional)

    def arg(self, i: int) -> str | None:
        """Returns the i-th positional argument, or None if there is none."""
        if 0 <= i < len(self._positional):
            return self._positional[i]
        return None

    def narg(self) -> int:
        return len(self._positional)

    def __getitem__(self, name: str) -> Flag:
        if (flag := self.lookup(name)) is None:
            raise KeyError(name)
        return flag

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def usage(self) -> str:
        out = f"Usage: {self.name}"
        if self._flags:
            out += " [flags]"
        out += "\n"

        if self.description:
            out += f"{self.description}\n"

        if self._flags:
            out += "\nFlags:\n"
            for flag in self._flags:
                out += "  "
                if flag.alias is not None:
                    out += f"-{flag.alias}, "
                out += f"--{flag.name}\t{flag.usage} (default: {flag.default})\n"

        return out

    def print_usage(self, file: TextIO | None = None) -> None:
        file = file if file is not None else sys.stderr
        file.write(self.usage())

    def print_error(self, result: ParseResult, file: TextIO | None = None) -> None:
        file = file if file is not None else sys.stderr
        file.write(f"error: {result.message}\n")


def get(source: FlagSet | Flag, name: str, type_: type[T]) -> T:
    """Returns the current value of the flag ``name`` as ``type_``.

    If there is no such flag, or it holds a different kind, the zero value of
    ``type_`` is returned instead. Use :meth:`FlagSet.lookup` or
    :meth:`FlagSet.is_set` to tell these cases apart from a real zero.

    :param source: A flag set, or a flag handle which must be called ``name``.
    :param name: The long flag name.
    :param type_: One of ``int``, ``float``, ``bool`` or ``str``.
    """
    if isinstance(source, Flag):
        flag: Flag | None = source if source.name == name else None
    else:
        flag = source.lookup(name)

    if flag is None:
        if Kind.from_type(type_) is None:
            raise TypeError(f"unsupported flag type: {type_.__name__}")
        return type_()

    return flag.as_type(type_)
