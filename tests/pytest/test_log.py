# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import io
import logging
from collections.abc import Iterator

import pytest

from flagset import FlagSet
from flagset.log import Loglevel, get_logger, setup_logging


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("trace", Loglevel.TRACE),
        ("DEBUG", Loglevel.DEBUG),
        ("10", Loglevel.DEBUG),
        ("5", Loglevel.TRACE),
    ],
)
def test_loglevel_from_str(raw: str, expected: Loglevel) -> None:
    assert Loglevel.from_str(raw) is expected


def test_loglevel_from_str_invalid() -> None:
    with pytest.raises(ValueError):
        Loglevel.from_str("loud")


def test_logger_has_trace() -> None:
    logger = get_logger("flagset.test")
    assert hasattr(logger, "trace")
    assert logging.getLevelName(Loglevel.TRACE) == "TRACE"


def test_parser_traces_tokens(caplog: pytest.LogCaptureFixture) -> None:
    fs = FlagSet("prog")
    fs.define_int("port", 1, "", "p")

    with caplog.at_level(Loglevel.TRACE, logger="flagset"):
        assert fs.parse(["prog", "--port", "2", "file"])

    messages = [record.getMessage() for record in caplog.records]
    assert "--port = 2" in messages
    assert "positional argument 'file'" in messages


@pytest.fixture
def flagset_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("flagset")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_logging_env(
    monkeypatch: pytest.MonkeyPatch, flagset_logger: logging.Logger
) -> None:
    monkeypatch.setenv("FLAGSET_LOGLEVEL", "debug")
    buf = io.StringIO()
    setup_logging(stream=buf)

    fs = FlagSet("prog")
    assert fs.parse(["prog", "--bogus"]).kind.name == "UNKNOWN_FLAG"

    lines = buf.getvalue().splitlines()
    assert "flagset.flagset DEBUG: parsing failed: unknown flag: bogus" in lines
    assert not any("TRACE" in line for line in lines)
    assert flagset_logger.level == Loglevel.DEBUG
