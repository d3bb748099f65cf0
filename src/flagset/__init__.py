# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Typed Command Line Flag Parsing.

The public interface exposed by this package is the `FlagSet` class, the
`Flag` handles it hands out, the `ParseResult` returned by parsing and the
`get` helper for typed access by name.
"""

from flagset.exceptions import FlagDefinitionError
from flagset.flag import Flag
from flagset.flagset import FlagSet, get
from flagset.model import FlagField, bind_model, define_model
from flagset.result import ParseErrorKind, ParseResult
from flagset.value import Kind, Value

# Public Re-Exports
__all__ = (
    "Flag",
    "FlagDefinitionError",
    "FlagField",
    "FlagSet",
    "Kind",
    "ParseErrorKind",
    "ParseResult",
    "Value",
    "bind_model",
    "define_model",
    "get",
)
