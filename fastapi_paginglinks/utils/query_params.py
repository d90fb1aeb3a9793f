"""Helpers for reading and rewriting pagination query parameters."""

from __future__ import annotations

import re
import string
from typing import Any, Mapping
from urllib.parse import SplitResult, parse_qs, quote, urlencode, urlsplit, urlunsplit

import structlog

logger = structlog.get_logger()

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Same range as a signed 64-bit integer
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

# Query strings are rewritten byte for byte: latin-1 maps every byte to one char.
_RAW_ENCODING = "latin-1"


def copy_url(url: Any) -> SplitResult:
    """Return an independent copy of a URL as a split result.

    Accepts a string or anything whose ``str()`` is a URL (e.g. Starlette's ``URL``).
    """
    if isinstance(url, SplitResult):
        return url._replace()
    return urlsplit(str(url))


def query_params(url: Any) -> dict[str, list[str]]:
    """Decode a URL's query string, keeping blank values (``?flag`` -> ``{"flag": [""]}``)."""
    return parse_qs(copy_url(url).query, keep_blank_values=True)


def get_int(params: Mapping[str, list[str]], key: str, default: int) -> int:
    """Return the first value of ``key`` as an int, or ``default`` if missing or malformed.

    Values outside the signed 64-bit range count as malformed.
    """
    values = params.get(key)
    if not values:
        return default
    raw_value = values[0]
    if _INT_RE.fullmatch(raw_value):
        sign = "-" if raw_value.startswith("-") else ""
        digits = raw_value.lstrip("+-").lstrip("0") or "0"
        # Anything longer is out of range, and too long for int() to parse.
        value = int(sign + digits) if len(digits) <= 19 else INT_MAX + 1
        if INT_MIN <= value <= INT_MAX:
            return value
    logger.debug("query_param_fallback", key=key, value=raw_value[:64], default=default)
    return default


def _raw(value: Any) -> str:
    return str(value).encode("utf-8").decode(_RAW_ENCODING)


def _encode(params: Mapping[str, list[str]]) -> str:
    # Keys sorted, values keep their order: "a=1&a=2&b=".
    pairs = [(key, value) for key in sorted(params) for value in params[key]]
    return urlencode(pairs, encoding=_RAW_ENCODING)


def replace_query_params(url: Any, values: Mapping[str, Any]) -> str:
    """Return a copy of ``url`` with the query parameters in ``values`` set.

    Each key replaces all of its previous values. The whole query string is
    re-encoded, so a bare ``flag`` comes back as ``flag=``. Other parameters
    keep their bytes, even when they are not valid UTF-8.
    """
    split = copy_url(url)
    # Non-ASCII characters are escaped as UTF-8 first, existing escapes are kept.
    query = quote(split.query, safe=string.punctuation)
    params = parse_qs(query, keep_blank_values=True, encoding=_RAW_ENCODING)
    for key, value in values.items():
        params[_raw(key)] = [_raw(value)]
    return urlunsplit(split._replace(query=_encode(params)))
