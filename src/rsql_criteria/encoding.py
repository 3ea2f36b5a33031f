"""
Value encoding for RSQL literals.

Pure functions that turn a Python value into the literal text placed on the
right-hand side of an RSQL comparison, together with a flag telling the
operator grammar whether the literal must be wrapped in double quotes.

Numbers and percent-encoding follow the ECMAScript rules
(``Number.prototype.toString`` and ``encodeURIComponent``) so that the
produced query strings are byte-for-byte what the API's other clients send.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, NamedTuple
from urllib.parse import quote as _url_quote

logger = logging.getLogger("rsql_criteria.encoding")

# Characters encodeURIComponent leaves alone besides ASCII alphanumerics
# and ``-_.`` (which urllib never encodes).
_UNRESERVED = "!~*'()"


class _Unset:
    """Marker for an absent value (distinct from ``None`` / RSQL ``null``)."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Unset:
        return self


UNSET: Any = _Unset()


class EncodedValue(NamedTuple):
    text: str
    should_quote: bool


# ---------------------------------------------------------------------------
# Primitive helpers
# ---------------------------------------------------------------------------


def escape_string(value: str) -> str:
    """Escape backslashes, then double quotes."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def quote(value: str) -> str:
    return f'"{value}"'


def percent_encode(text: str) -> str:
    """Percent-encode *text* exactly as ``encodeURIComponent`` does."""
    return _url_quote(text, safe=_UNRESERVED)


def format_number(value: int | float | Decimal) -> str:
    """
    Render a number the way ``Number.prototype.toString`` does.

    ``1.0`` → ``"1"``, ``0.5`` → ``"0.5"``, ``1e-7`` → ``"1e-7"``,
    ``1e21`` → ``"1e+21"``.  Integers are rendered without any limit.
    """
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        value = Decimal(repr(value))
    elif value.is_nan():
        return "NaN"
    elif value.is_infinite():
        return "Infinity" if value > 0 else "-Infinity"

    if value.is_zero():
        return "0"

    sign, digit_tuple, exponent = value.as_tuple()
    digits = "".join(map(str, digit_tuple))
    significant = digits.rstrip("0")
    exponent = int(exponent) + len(digits) - len(significant)

    # k significant digits, decimal point after position n
    k = len(significant)
    n = k + exponent
    if k <= n <= 21:
        text = significant + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{significant[:n]}.{significant[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + significant
    else:
        e = n - 1
        mantissa = significant if k == 1 else f"{significant[0]}.{significant[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return f"-{text}" if sign else text


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def _to_local(value: date) -> date:
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone()
    return value


def _to_utc(value: date) -> datetime:
    # Naive values (and plain dates, at midnight) are local wall-clock time.
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    return value.astimezone(timezone.utc)


def format_date(value: date, *, use_utc: bool = False) -> str:
    """Return ``YYYY-MM-DD`` from local (default) or UTC calendar fields."""
    moment = _to_utc(value) if use_utc else _to_local(value)
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def format_timestamp(value: date) -> str:
    """Return the UTC time of day as ``THH:mm:ss.SSSZ``."""
    moment = _to_utc(value)
    return (
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )


# ---------------------------------------------------------------------------
# Value encoding
# ---------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _encode_sequence(values: list[Any] | tuple[Any, ...]) -> str:
    encoded: list[str] = []
    for item in values:
        if item is None or item is UNSET:
            continue
        if _is_number(item):
            encoded.append(format_number(item))
        elif isinstance(item, str):
            encoded.append(percent_encode(quote(escape_string(item))))
        elif isinstance(item, bool):
            encoded.append(percent_encode(quote("true" if item else "false")))
        else:
            encoded.append(percent_encode(quote(str(item))))
    return ",".join(encoded)


def encode_value(value: Any, *, include_timestamp: bool = False) -> EncodedValue:
    """
    Encode *value* into its RSQL literal.

    Sequence elements are already quoted and percent-encoded one by one, so
    the joined result reports ``should_quote=False``.  ``UNSET`` and any
    unsupported type encode to the empty string.
    """
    if isinstance(value, str):
        return EncodedValue(escape_string(value), True)
    if isinstance(value, bool):
        return EncodedValue("true" if value else "false", False)
    if _is_number(value):
        return EncodedValue(format_number(value), False)
    if isinstance(value, list | tuple):
        return EncodedValue(_encode_sequence(value), False)
    if isinstance(value, date):
        if include_timestamp:
            text = format_date(value, use_utc=True) + format_timestamp(value)
        else:
            text = format_date(value)
        return EncodedValue(text, True)
    if value is None:
        return EncodedValue("null", False)
    if value is not UNSET:
        logger.debug(
            "Unsupported value type %s encodes as an empty literal",
            type(value).__name__,
        )
    return EncodedValue("", False)
