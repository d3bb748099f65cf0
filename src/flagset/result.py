# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from enum import Enum, unique
from typing import Self

from pydantic import BaseModel, ConfigDict


@unique
class ParseErrorKind(Enum):
    NONE = "none"
    #: Not an error; the user asked for the usage text.
    HELP_REQUESTED = "help requested"
    UNKNOWN_FLAG = "unknown flag"
    MISSING_VALUE = "missing value"
    INVALID_VALUE = "invalid value"


class ParseResult(BaseModel):
    """Outcome of :meth:`flagset.FlagSet.parse`.

    A result is truthy only on success. ``flag`` names the offending flag
    (or alias character for unknown short flags) and ``message`` carries the
    text shown by :meth:`flagset.FlagSet.print_error`.
    """

    model_config = ConfigDict(frozen=True)

    kind: ParseErrorKind = ParseErrorKind.NONE
    flag: str = ""
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is ParseErrorKind.NONE

    @property
    def help_requested(self) -> bool:
        return self.kind is ParseErrorKind.HELP_REQUESTED

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> Self:
        return cls()

    @classmethod
    def help(cls) -> Self:
        return cls(kind=ParseErrorKind.HELP_REQUESTED)

    @classmethod
    def unknown_flag(cls, flag: str, spelling: str) -> Self:
        return cls(kind=ParseErrorKind.UNKNOWN_FLAG, flag=flag, message=f"unknown flag: {spelling}")

    @classmethod
    def missing_value(cls, flag: str, spelling: str) -> Self:
        return cls(
            kind=ParseErrorKind.MISSING_VALUE,
            flag=flag,
            message=f"flag '{spelling}' needs a value",
        )

    @classmethod
    def invalid_value(cls, flag: str, spelling: str, reason: str) -> Self:
        return cls(
            kind=ParseErrorKind.INVALID_VALUE,
            flag=flag,
            message=f"invalid value for flag '{spelling}': {reason}",
        )
