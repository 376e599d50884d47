"""
Custom Column Types

CalendarDate stores a DATE but also accepts text from request bodies,
the way MySQL accepts relaxed date literals:

    "2024-01-01"           -> 2024-01-01
    "2024-1-1"             -> 2024-01-01
    "2024/01/01"           -> 2024-01-01
    "20240101"             -> 2024-01-01
    "2024-01-01 10:30:00"  -> 2024-01-01 (time part dropped)

Anything else is refused when the statement is executed, so the client
sees the same storage failure it would get from the database itself.
"""

import datetime
import re

from sqlalchemy import Date
from sqlalchemy.types import TypeDecorator

DELIMITED_DATE = re.compile(r"^(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})(?:[ T].*)?$")
COMPACT_DATE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")


def parse_calendar_date(value: str) -> datetime.date:
    """
    Parse a relaxed date literal.

    Raises:
        ValueError: If the text is not a real calendar date
    """
    text = value.strip()
    match = DELIMITED_DATE.match(text) or COMPACT_DATE.match(text)
    if match is None:
        raise ValueError(f"Incorrect date value: '{value}'")

    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError:
        raise ValueError(f"Incorrect date value: '{value}'") from None


def is_calendar_date(value: str) -> bool:
    """Check whether parse_calendar_date() would accept the text."""
    try:
        parse_calendar_date(value)
    except ValueError:
        return False
    return True


class CalendarDate(TypeDecorator):
    """DATE column that also binds relaxed date strings."""

    impl = Date
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if isinstance(value, str):
            return parse_calendar_date(value)
        return value
