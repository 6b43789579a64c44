import math
from decimal import Decimal
from typing import Any, Dict, Optional

from ..http import HTTPClient


# Applied by the server separately, never signed.
EXCLUDED_KEYS = frozenset({"format"})


def format_option_value(value: Any) -> str:
    """Render an option value the way the API signs it."""
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        # repr is the shortest round-trip form; print it positionally
        return format(Decimal(repr(value)).normalize(), "f")
    if isinstance(value, str):
        return value
    return str(value)


def to_query_string(options: Optional[Dict[str, Any]]) -> str:
    """Build the canonical query string for a set of request options.

    Drops ``format`` and unset values (None or ""), keeps zero and False,
    sorts by key and escapes every key and value as a query component.

    Args:
        options: Option name to scalar value

    Returns:
        ``key=value`` pairs joined with ``&``, or "" if nothing remains
    """
    if not options:
        return ""

    params: Dict[str, str] = {}
    for key, value in options.items():
        if key in EXCLUDED_KEYS:
            continue
        if value is None or (isinstance(value, str) and value == ""):
            continue
        params[key] = format_option_value(value)

    return "&".join(
        f"{HTTPClient.encode_query_component(key)}={HTTPClient.encode_query_component(params[key])}"
        for key in sorted(params)
    )
