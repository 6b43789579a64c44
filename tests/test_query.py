"""Tests for canonical query strings and token derivation - no server required."""

import pytest

from capture import generate_token, to_query_string
from capture.http import HTTPClient
from capture.utils.query import format_option_value


@pytest.mark.parametrize(
    "options, expected",
    [
        ({}, ""),
        (None, ""),
        ({"width": 1920, "height": 1080}, "height=1080&width=1920"),
        ({"width": 1920, "format": "png"}, "width=1920"),
        ({"width": 0, "height": 0, "full": False, "empty": "", "skip": None}, "full=false&height=0&width=0"),
        ({"userAgent": "Custom Agent (v1.0)"}, "userAgent=Custom+Agent+%28v1.0%29"),
        ({"url": "https://example.com/a?b=c&d=e"}, "url=https%3A%2F%2Fexample.com%2Fa%3Fb%3Dc%26d%3De"),
        ({"format": "A4"}, ""),
    ],
)
def test_to_query_string(options, expected):
    assert to_query_string(options) == expected


def test_query_string_ignores_insertion_order():
    a = {"vw": 1440, "full": True, "selector": ".main", "delay": 2.5}
    b = {"delay": 2.5, "selector": ".main", "full": True, "vw": 1440}
    assert to_query_string(a) == to_query_string(b)
    assert to_query_string(a) == "delay=2.5&full=true&selector=.main&vw=1440"


def test_keys_sort_by_byte_order():
    # uppercase sorts before lowercase
    assert to_query_string({"b": 1, "B": 2, "a": 3}) == "B=2&a=3&b=1"


def test_query_string_does_not_mutate_options():
    options = {"format": "png", "empty": "", "width": 10}
    to_query_string(options)
    assert options == {"format": "png", "empty": "", "width": 10}


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-42, "-42"),
        (1920, "1920"),
        (1.5, "1.5"),
        (1.0, "1"),
        (0.0, "0"),
        (100.0, "100"),
        (0.1, "0.1"),
        (1e-07, "0.0000001"),
        (1e21, "1000000000000000000000"),
        (float("inf"), "+Inf"),
        (float("-inf"), "-Inf"),
        (float("nan"), "NaN"),
        ("png", "png"),
    ],
)
def test_format_option_value(value, expected):
    assert format_option_value(value) == expected


def test_unknown_value_types_fall_back_to_str():
    class Custom:
        def __str__(self):
            return "custom value"

    assert to_query_string({"x": Custom()}) == "x=custom+value"
    assert to_query_string({"x": [1, 2]}) == "x=%5B1%2C+2%5D"


def test_encode_query_component():
    assert HTTPClient.encode_query_component("hello world") == "hello+world"
    assert HTTPClient.encode_query_component("a/b&c=d") == "a%2Fb%26c%3Dd"
    assert HTTPClient.encode_query_component("-_.~") == "-_.~"
    assert HTTPClient.encode_query_component("") == ""


def test_generate_token_is_md5_hex():
    token = generate_token("test_secret", "url=https%3A%2F%2Fexample.com&width=1920")
    assert token == "f7699aa31121f4afefc2b4fd873b8495"


def test_generate_token_is_deterministic():
    query = "url=example.com&width=1920"
    assert generate_token("s", query) == generate_token("s", query)
    assert len(generate_token("s", query)) == 32


def test_generate_token_changes_with_inputs():
    query = "url=example.com&width=1920"
    token = generate_token("secret", query)
    assert generate_token("secreT", query) != token
    assert generate_token("secret", query.replace("1920", "1921")) != token
