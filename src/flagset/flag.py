# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar

from flagset.value import Datum, Kind, Value

T = TypeVar("T", bound=Datum)


@dataclass(eq=False)
class Flag:
    """A named, typed and optionally aliased command line flag.

    Flags are created and owned by a :class:`flagset.FlagSet`; the instance
    returned on registration stays valid for the lifetime of that set and
    always reflects the most recent parse.
    """

    name: str
    usage: str
    value: Value
    alias: str | None = None
    default: Value = field(init=False)
    #: True iff the most recent parse assigned this flag from user input.
    set: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.default = self.value.clone()

    @property
    def kind(self) -> Kind:
        return self.value.kind

    @property
    def type_name(self) -> str:
        return self.value.type_name

    def get(self) -> Datum:
        """Returns the current datum."""
        return self.value.datum

    def as_type(self, type_: type[T]) -> T:
        """Returns the current datum if this flag holds a ``type_``, otherwise
        the zero value of ``type_``."""
        kind = Kind.from_type(type_)
        if kind is None:
            raise TypeError(f"unsupported flag type: {type_.__name__}")
        if kind is not self.kind:
            return type_()
        return self.value.datum  # type: ignore[return-value]

    def reset(self) -> None:
        self.value = self.default.clone()
        self.set = False

    def __repr__(self) -> str:
        alias = f", alias={self.alias!r}" if self.alias is not None else ""
        return f"Flag(name={self.name!r}{alias}, {self.type_name}={self.value}, set={self.set})"
