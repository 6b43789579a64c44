"""Parsing of ``-X key=value`` command-line options into typed request options."""

import math
import re
from typing import Any, Callable, Iterable, List, Optional

from ..errors import InvalidOptionFormat
from ..types import RequestOptions

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1
# digits in the largest int64, ignoring sign and leading zeros
_INT64_DIGITS = 19


def _parse_int(raw: str) -> Optional[int]:
    if not _INT_RE.fullmatch(raw):
        return None
    if len(raw.lstrip("+-").lstrip("0")) > _INT64_DIGITS:
        return None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _parse_float(raw: str) -> Optional[float]:
    if not _FLOAT_RE.fullmatch(raw):
        return None
    value = float(raw)
    # out of range: keep what the user typed
    if math.isinf(value):
        return None
    return value


def _parse_bool(raw: str) -> Optional[bool]:
    return {"true": True, "false": False}.get(raw.lower())


# Order matters: "0" is an int, not False.
_PARSERS: List[Callable[[str], Any]] = [_parse_int, _parse_float, _parse_bool]


def parse_option_value(raw: str) -> Any:
    """Infer the narrowest type for a raw option value.

    Tries integer, then float, then boolean (true/false, any case) and
    falls back to the string itself.
    """
    for parse in _PARSERS:
        value = parse(raw)
        if value is not None:
            return value
    return raw


def parse_options(tokens: Optional[Iterable[str]]) -> RequestOptions:
    """Turn ``key=value`` tokens into request options.

    Each token is split on its first ``=``, so values may contain ``=``.
    A later token for the same key replaces an earlier one.

    Args:
        tokens: Raw ``-X`` values in command-line order

    Returns:
        Option name to typed value

    Raises:
        InvalidOptionFormat: If a token has no ``=`` or an empty key
    """
    opts: RequestOptions = {}
    for token in tokens or ():
        key, sep, raw = token.partition("=")
        if not sep or not key:
            raise InvalidOptionFormat(token)
        opts[key] = parse_option_value(raw)
    return opts
