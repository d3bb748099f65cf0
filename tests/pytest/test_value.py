# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import math

import pytest

from flagset.value import INT64_MAX, INT64_MIN, Kind, Value


@pytest.mark.parametrize(
    "kind,text,expected",
    [
        (Kind.INT, "42", 42),
        (Kind.INT, "-17", -17),
        (Kind.INT, "+8", 8),
        (Kind.INT, "0" * 30 + "42", 42),
        (Kind.INT, "9223372036854775807", INT64_MAX),
        (Kind.INT, "-9223372036854775808", INT64_MIN),
        (Kind.FLOAT, "2.5", 2.5),
        (Kind.FLOAT, "-1e3", -1000.0),
        (Kind.FLOAT, ".5", 0.5),
        (Kind.FLOAT, "7", 7.0),
        (Kind.FLOAT, "inf", math.inf),
        (Kind.FLOAT, "0e-400", 0.0),
        (Kind.FLOAT, "-0.0", -0.0),
        (Kind.BOOL, "true", True),
        (Kind.BOOL, "YES", True),
        (Kind.BOOL, "On", True),
        (Kind.BOOL, "1", True),
        (Kind.BOOL, "False", False),
        (Kind.BOOL, "no", False),
        (Kind.BOOL, "OFF", False),
        (Kind.BOOL, "0", False),
        (Kind.STRING, "  spaced  ", "  spaced  "),
        (Kind.STRING, "a\\nb", "a\\nb"),
        (Kind.STRING, "", ""),
    ],
)
def test_set(kind: Kind, text: str, expected: object) -> None:
    value = Value.zero(kind)
    assert value.set(text) is None
    assert value.datum == expected
    assert type(value.datum) is kind.python_type


@pytest.mark.parametrize(
    "kind,text,error",
    [
        (Kind.INT, "abc", "not an integer"),
        (Kind.INT, "12abc", "not an integer"),
        (Kind.INT, "1.5", "not an integer"),
        (Kind.INT, "", "not an integer"),
        (Kind.INT, " 1", "not an integer"),
        (Kind.INT, "1_000", "not an integer"),
        (Kind.INT, "9223372036854775808", "out of range for int64_t"),
        (Kind.INT, "-9223372036854775809", "out of range for int64_t"),
        (Kind.INT, "9" * 5000, "out of range for int64_t"),
        (Kind.INT, "-" + "1" * 20, "out of range for int64_t"),
        (Kind.FLOAT, "notanumber", "not a float"),
        (Kind.FLOAT, "1.5x", "not a float"),
        (Kind.FLOAT, "", "not a float"),
        (Kind.FLOAT, "1e400", "out of range for float"),
        (Kind.FLOAT, "1e-400", "out of range for float"),
        (Kind.FLOAT, "-2.5e-999", "out of range for float"),
        (Kind.BOOL, "maybe", "invalid boolean value"),
        (Kind.BOOL, "", "invalid boolean value"),
    ],
)
def test_set_invalid(kind: Kind, text: str, error: str) -> None:
    value = Value.zero(kind)
    err = value.set(text)
    assert err is not None
    assert err.startswith(error)
    assert value.datum == kind.zero()


@pytest.mark.parametrize(
    "datum,expected",
    [
        (True, "true"),
        (False, "false"),
        (8080, "8080"),
        (-3, "-3"),
        (2.5, "2.5"),
        (1.0, "1.0"),
        (0.1, "0.1"),
        ("fast", "fast"),
    ],
)
def test_str(datum: int | float | bool | str, expected: str) -> None:
    assert str(Value.of(datum)) == expected


@pytest.mark.parametrize("datum", [0, INT64_MAX, INT64_MIN, 0.1, 1e-300, 123456.789, True, False, "x y"])
def test_str_round_trip(datum: int | float | bool | str) -> None:
    value = Value.of(datum)
    other = Value.zero(value.kind)
    assert other.set(str(value)) is None
    assert other == value


def test_type_name() -> None:
    assert Value.of(1).type_name == "int"
    assert Value.of(1.0).type_name == "float"
    assert Value.of(True).type_name == "bool"
    assert Value.of("").type_name == "string"


def test_clone_is_independent() -> None:
    value = Value(Kind.INT, 1)
    copy = value.clone()
    assert value.set("2") is None
    assert copy.datum == 1
    assert copy.kind is Kind.INT


def test_float_widens_int() -> None:
    value = Value(Kind.FLOAT, 1)
    assert value.datum == 1.0
    assert type(value.datum) is float


@pytest.mark.parametrize(
    "kind,datum",
    [
        (Kind.INT, True),
        (Kind.INT, "1"),
        (Kind.INT, 2**63),
        (Kind.FLOAT, False),
        (Kind.BOOL, 1),
        (Kind.STRING, 1),
    ],
)
def test_mismatched_datum(kind: Kind, datum: object) -> None:
    with pytest.raises(TypeError):
        Value(kind, datum)  # type: ignore[arg-type]


def test_of_unsupported() -> None:
    with pytest.raises(TypeError):
        Value.of(b"bytes")  # type: ignore[arg-type]


def test_kind_from_type() -> None:
    assert Kind.from_type(bool) is Kind.BOOL
    assert Kind.from_type(int) is Kind.INT
    assert Kind.from_type(float) is Kind.FLOAT
    assert Kind.from_type(str) is Kind.STRING
    assert Kind.from_type(bytes) is None
