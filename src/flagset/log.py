# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Logging for the parser.

The parser reports every consumed token at ``TRACE`` and each parse outcome
at ``DEBUG`` on the ``flagset`` logger hierarchy. Nothing is printed unless
the program configures logging, either on its own or via
:func:`setup_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import IntEnum, unique
from typing import TYPE_CHECKING, Any, TextIO, cast

if TYPE_CHECKING:
    from logging import _ExcInfoType

TRACE = 5

# Other libraries may have registered the name already.
if logging.getLevelName(TRACE) != "TRACE":
    logging.addLevelName(TRACE, "TRACE")


@unique
class Loglevel(IntEnum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    TRACE = TRACE

    @classmethod
    def from_str(cls, string: str) -> Loglevel:
        """Accepts a numeric level or a case insensitive level name."""
        if string.isnumeric():
            return cls(int(string))

        try:
            return cls[string.upper()]
        except KeyError:
            raise ValueError(f"{string} not a valid loglevel") from None


def setup_logging(level: Loglevel | None = None, stream: TextIO | None = None) -> None:
    """Shows the parser's log records on ``stream`` (stderr by default).

    :param level: The loglevel to enable. If this argument is None, the env
                  variable ``FLAGSET_LOGLEVEL`` is read, falling back to
                  ``INFO``.
    """
    if level is None:
        if (raw := os.getenv("FLAGSET_LOGLEVEL")) is not None:
            level = Loglevel.from_str(raw)
        else:
            level = Loglevel.INFO

    logger = logging.getLogger("flagset")
    logger.setLevel(level)

    while len(logger.handlers) > 0:
        logger.handlers[0].close()
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
    logger.addHandler(handler)


class Logger(logging.Logger):
    def trace(
        self,
        msg: Any,
        *args: Any,
        exc_info: _ExcInfoType = None,
        stack_info: bool = False,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if self.isEnabledFor(TRACE):
            self._log(
                TRACE,
                msg,
                args,
                exc_info=exc_info,
                extra=extra,
                stack_info=stack_info,
                **kwargs,
            )


logging.setLoggerClass(Logger)


def get_logger(name: str) -> Logger:
    return cast(Logger, logging.getLogger(name))
