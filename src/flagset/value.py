# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Typed flag values.

A :class:`Value` holds exactly one datum of one of four kinds (see
:class:`Kind`). The kind is fixed when the value is created; parsing only
ever replaces the datum. Conversion from user supplied text never raises,
:meth:`Value.set` reports failures as an error string instead.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum, unique
from typing import Self

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_DIGITS = 19

TRUE_LITERALS = frozenset(("true", "1", "yes", "on"))
FALSE_LITERALS = frozenset(("false", "0", "no", "off"))

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

Datum = int | float | bool | str


@unique
class Kind(Enum):
    """The primitive type a flag holds for its whole lifetime.

    The enum values are the type names shown in usage output.
    """

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"

    @property
    def python_type(self) -> type:
        match self:
            case Kind.INT:
                return int
            case Kind.FLOAT:
                return float
            case Kind.BOOL:
                return bool
            case Kind.STRING:
                return str

    @classmethod
    def from_type(cls, type_: type) -> Kind | None:
        """Maps a Python type to its kind. ``bool`` is checked before ``int``
        on purpose, since it is a subclass of it. Returns None for anything
        else."""
        if type_ is bool:
            return cls.BOOL
        if type_ is int:
            return cls.INT
        if type_ is float:
            return cls.FLOAT
        if type_ is str:
            return cls.STRING
        return None

    def zero(self) -> Datum:
        match self:
            case Kind.INT:
                return 0
            case Kind.FLOAT:
                return 0.0
            case Kind.BOOL:
                return False
            case Kind.STRING:
                return ""


def _check_datum(kind: Kind, datum: object) -> Datum:
    match kind:
        case Kind.INT:
            if not isinstance(datum, int) or isinstance(datum, bool):
                raise TypeError(f"expected int, got {type(datum).__name__}")
            if not INT64_MIN <= datum <= INT64_MAX:
                raise TypeError(f"{datum} is out of range for int64_t")
            return datum
        case Kind.FLOAT:
            if not isinstance(datum, int | float) or isinstance(datum, bool):
                raise TypeError(f"expected float, got {type(datum).__name__}")
            return float(datum)
        case Kind.BOOL:
            if not isinstance(datum, bool):
                raise TypeError(f"expected bool, got {type(datum).__name__}")
            return datum
        case Kind.STRING:
            if not isinstance(datum, str):
                raise TypeError(f"expected str, got {type(datum).__name__}")
            return datum


def parse_int(text: str) -> tuple[int | None, str | None]:
    if _INT_RE.fullmatch(text) is None:
        return None, "not an integer"
    # int64_t has at most 19 digits; longer strings must not reach int().
    if len(text.lstrip("+-").lstrip("0")) > INT64_DIGITS:
        return None, "out of range for int64_t"
    val = int(text, 10)
    if not INT64_MIN <= val <= INT64_MAX:
        return None, "out of range for int64_t"
    return val, None


def parse_float(text: str) -> tuple[float | None, str | None]:
    if (m := _FLOAT_RE.fullmatch(text)) is None:
        return None, "not a float"
    val = float(text)
    # Finite literals which do not fit into a double end up as inf or 0.0.
    if math.isinf(val) and "inf" not in text.lower():
        return None, "out of range for float"
    mantissa = m.group(2)
    if val == 0.0 and mantissa is not None and mantissa.strip("0.") != "":
        return None, "out of range for float"
    return val, None


def parse_bool(text: str) -> tuple[bool | None, str | None]:
    lower = text.lower()
    if lower in TRUE_LITERALS:
        return True, None
    if lower in FALSE_LITERALS:
        return False, None
    return None, "invalid boolean value, accepts true/false, 1/0, yes/no, on/off"


@dataclass(slots=True)
class Value:
    """A datum tagged with its :class:`Kind`."""

    kind: Kind
    datum: Datum

    def __post_init__(self) -> None:
        self.datum = _check_datum(self.kind, self.datum)

    @classmethod
    def of(cls, datum: Datum) -> Self:
        """Creates a value, inferring the kind from the Python type of ``datum``."""
        kind = Kind.from_type(type(datum))
        if kind is None:
            raise TypeError(f"unsupported value type: {type(datum).__name__}")
        return cls(kind, datum)

    @classmethod
    def zero(cls, kind: Kind) -> Self:
        return cls(kind, kind.zero())

    @property
    def type_name(self) -> str:
        return self.kind.value

    def set(self, text: str) -> str | None:
        """Interprets ``text`` according to this value's kind.

        :param text: The raw text as given on the command line.
        :return: None on success, otherwise a human readable error message.
                 The datum is left untouched on failure.
        """
        datum: Datum | None
        match self.kind:
            case Kind.INT:
                datum, err = parse_int(text)
            case Kind.FLOAT:
                datum, err = parse_float(text)
            case Kind.BOOL:
                datum, err = parse_bool(text)
            case Kind.STRING:
                datum, err = text, None

        if err is not None:
            return err

        assert datum is not None
        self.datum = datum
        return None

    def clone(self) -> Self:
        return type(self)(self.kind, self.datum)

    def __str__(self) -> str:
        match self.kind:
            case Kind.BOOL:
                return "true" if self.datum else "false"
            case Kind.FLOAT:
                # repr() gives the shortest text which parses back to the same double.
                return repr(self.datum)
            case _:
                return str(self.datum)
