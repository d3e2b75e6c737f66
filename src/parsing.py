"""Parsing of loosely formatted dates from user input."""

from datetime import date
import re


# Month names and their common abbreviations
MONTH_MAP = {
    "JAN": 1,
    "JANUARY": 1,
    "FEB": 2,
    "FEBRUARY": 2,
    "MAR": 3,
    "MARCH": 3,
    "APR": 4,
    "APRIL": 4,
    "MAY": 5,
    "JUN": 6,
    "JUNE": 6,
    "JUL": 7,
    "JULY": 7,
    "AUG": 8,
    "AUGUST": 8,
    "SEP": 9,
    "SEPT": 9,
    "SEPTEMBER": 9,
    "OCT": 10,
    "OCTOBER": 10,
    "NOV": 11,
    "NOVEMBER": 11,
    "DEC": 12,
    "DECEMBER": 12,
}

QUALIFIERS = re.compile(
    r"^(ABOUT|ABT|BEFORE|BEF|AFTER|AFT|EST|CAL|CIRCA|CA|AROUND)\b\.?:?\s*",
    flags=re.IGNORECASE,
)


def _make_date(year: int, month: int | None, day: int) -> date | None:
    if month is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _month(token: str) -> int | None:
    return MONTH_MAP.get(token.upper().rstrip("."))


def parse_date_string(date_str: str | None) -> date | None:
    """
    Parse a loosely formatted date into a `date`.
    Returns None if the date cannot be parsed.

    Handles formats like:
    - "1948-11-14"
    - "14 NOV 1948" / "14 November 1948" / "14 Nov. 1948"
    - "NOV 1948" / "November, 1948" (first of the month)
    - "1948" (first of January)
    - "11/14/1948" / "11-14-1948" (month first)
    - "November 14, 1948" / "Nov.14,1948"
    - "ABT 1948", "(about 1948)", "1948?"
    """
    if not date_str:
        return None

    s = date_str.strip().strip("()").rstrip("?")
    s = QUALIFIERS.sub("", s).strip()
    if not s:
        return None

    # ISO, treating 00 month/day as unknown
    match = re.match(r"^(\d{4})-(\d{2})-(\d{2})$", s)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return _make_date(year, month or 1, day or 1)

    # Day month year, e.g. "14 NOV 1948" or "02 May1838"
    match = re.match(r"^(\d{1,2})\s+([A-Za-z]+)\.?\s*(\d{4})$", s)
    if match:
        return _make_date(int(match.group(3)), _month(match.group(2)), int(match.group(1)))

    # Month year
    match = re.match(r"^([A-Za-z]+)\.?,?\s*(\d{4})$", s)
    if match:
        return _make_date(int(match.group(2)), _month(match.group(1)), 1)

    match = re.match(r"^(\d{4})$", s)
    if match:
        return _make_date(int(match.group(1)), 1, 1)

    # Numeric, month first
    match = re.match(r"^(\d{1,2})[-/ ](\d{1,2})[-/ ](\d{4})$", s)
    if match:
        month, day, year = (int(g) for g in match.groups())
        return _make_date(year, month if 1 <= month <= 12 else None, day)

    # Month day, year
    match = re.match(r"^([A-Za-z]+)\.?\s*(\d{1,2}),?\s*(\d{4})$", s)
    if match:
        return _make_date(int(match.group(3)), _month(match.group(1)), int(match.group(2)))

    return None

