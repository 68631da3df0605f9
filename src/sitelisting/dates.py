"""Date formatting for listing values.

`date-format` may be a token pattern (`MMM d, yyyy`, `dd/MM/yyyy HH:mm`) or, when it contains a
`%`, a `strftime` pattern. Text inside single quotes is copied literally (`''` is a quote).
"""

import re

from datetime import date, datetime
from typing import Callable, Dict


LOCALE_DATE_FORMAT = "%x"
LOCALE_DATETIME_FORMAT = "%c"

_TOKENS: Dict[str, Callable[[datetime], str]] = {
    "yyyy": lambda d: f"{d.year:04d}",
    "yy":   lambda d: f"{d.year % 100:02d}",
    "MMMM": lambda d: d.strftime("%B"),
    "MMM":  lambda d: d.strftime("%b"),
    "MM":   lambda d: f"{d.month:02d}",
    "M":    lambda d: str(d.month),
    "dd":   lambda d: f"{d.day:02d}",
    "d":    lambda d: str(d.day),
    "EEEE": lambda d: d.strftime("%A"),
    "EEE":  lambda d: d.strftime("%a"),
    "HH":   lambda d: f"{d.hour:02d}",
    "H":    lambda d: str(d.hour),
    "hh":   lambda d: f"{(d.hour % 12) or 12:02d}",
    "h":    lambda d: str((d.hour % 12) or 12),
    "mm":   lambda d: f"{d.minute:02d}",
    "m":    lambda d: str(d.minute),
    "ss":   lambda d: f"{d.second:02d}",
    "s":    lambda d: str(d.second),
    "a":    lambda d: "AM" if d.hour < 12 else "PM",
}

# Longest tokens first so `yyyy` is not read as two `yy`.
_TOKEN_PATTERN = re.compile(
    r"'(?P<literal>(?:[^']|'')*)'|(?P<token>" + "|".join(sorted(_TOKENS, key=len, reverse=True)) + ")"
)


def format_tokens(value: datetime, pattern: str) -> str:
    def replace(match: re.Match) -> str:
        if (literal := match.group("literal")) is not None:
            return literal.replace("''", "'") if literal else "'"
        return _TOKENS[match.group("token")](value)
    return _TOKEN_PATTERN.sub(replace, pattern)


def format_date(value: datetime | date, date_format: str | None, with_time: bool = False) -> str:
    """Format with the listing's date format, or the locale default when it has none."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if not date_format:
        return value.strftime(LOCALE_DATETIME_FORMAT if with_time else LOCALE_DATE_FORMAT)
    if "%" in date_format:
        return value.strftime(date_format)
    return format_tokens(value, date_format)
