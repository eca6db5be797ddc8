"""Wire encoders for query-string and path values."""

import calendar
import enum
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any
from urllib.parse import quote

# The API expects list values separated by an encoded comma.
LIST_SEPARATOR = "%2C"


def encode_value(value: Any) -> str:
    """Encode a scalar: enums by token, bools as true/false, the rest via str()."""
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, bool):
        return encode_bool(value)
    return quote(str(value), safe="")


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


def encode_list(values: Iterable[Any] | str) -> str:
    if isinstance(values, str):
        values = [values]
    return LIST_SEPARATOR.join(encode_value(v) for v in values)


def encode_history_date(value: date) -> str:
    """Single-day lookups use DD-MM-YYYY."""
    return value.strftime("%d-%m-%Y")


def encode_event_date(value: date) -> str:
    """Event date ranges use YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def to_unix_timestamp(value: datetime) -> int:
    """Convert to whole epoch seconds. Naive datetimes are taken as UTC."""
    return calendar.timegm(value.utctimetuple())


def encode_timestamp(value: datetime) -> str:
    return str(to_unix_timestamp(value))
