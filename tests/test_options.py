"""Tests for -X key=value option parsing."""

import pytest

from capture import InvalidOptionFormat, to_query_string
from capture.cli.options import parse_option_value, parse_options


@pytest.mark.parametrize(
    "tokens, expected",
    [
        ([], {}),
        (None, {}),
        (["format=png"], {"format": "png"}),
        (["vw=1920"], {"vw": 1920}),
        (["deviceScale=1.5"], {"deviceScale": 1.5}),
        (["fullPage=true"], {"fullPage": True}),
        (["darkMode=false"], {"darkMode": False}),
        (["selector=div.class=value"], {"selector": "div.class=value"}),
        (["waitFor="], {"waitFor": ""}),
        (
            ["vw=1920", "vh=1080", "fullPage=true", "format=webp"],
            {"vw": 1920, "vh": 1080, "fullPage": True, "format": "webp"},
        ),
        (["vw=800", "vw=1024"], {"vw": 1024}),
    ],
)
def test_parse_options(tokens, expected):
    got = parse_options(tokens)
    assert got == expected
    for key, value in expected.items():
        assert type(got[key]) is type(value)


@pytest.mark.parametrize("token", ["invalid", "=value", "="])
def test_parse_options_rejects_malformed_tokens(token):
    with pytest.raises(InvalidOptionFormat) as ei:
        parse_options(["vw=1", token])
    assert ei.value.option == token
    assert token in str(ei.value)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", 0),
        ("-5", -5),
        ("+7", 7),
        ("007", 7),
        ("1.5", 1.5),
        ("1.", 1.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("9223372036854775808", 9223372036854775808.0),
        ("1e400", "1e400"),
        ("-1e400", "-1e400"),
        ("9" * 400, "9" * 400),
        ("0" * 25 + "42", 42),
        ("TRUE", True),
        ("False", False),
        ("png", "png"),
        ("1_000", "1_000"),
        (" 1", " 1"),
        ("nan", "nan"),
        ("yes", "yes"),
        ("", ""),
    ],
)
def test_parse_option_value(raw, expected):
    value = parse_option_value(raw)
    assert value == expected
    assert type(value) is type(expected)


def test_out_of_range_numbers_are_signed_as_typed():
    big = "9" * 400
    opts = parse_options(["delay=1e400", f"big={big}"])
    assert to_query_string(opts) == f"big={big}&delay=1e400"
