"""Render a validated date in several display formats."""

import datetime

import dateutil.parser


ORDINAL_DAY = "{ordinal_day}"
DEFAULT_DATE_FORMATS = [
    "%B %d, %Y",
    "%m/%d/%Y",
    "%d-%m-%Y",
    "%Y-%m-%d",
    f"%A, %B {ORDINAL_DAY}, %Y",
]


class FormattingError(ValueError):
    """Date text could not be parsed or rendered."""


def ordinal(number: int) -> str:
    """Convert an integer to its English ordinal, e.g., 1st, 12th, 23rd."""
    if 11 <= number % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def parse_date(date_str: str) -> datetime.date:
    """Parse YYYY-MM-DD text into a date object."""
    try:
        return dateutil.parser.parse(date_str, yearfirst=True, dayfirst=False).date()
    except (dateutil.parser.ParserError, OverflowError) as err:
        raise FormattingError(f"Unable to parse date '{date_str}': {err}") from err


def format_date(date_str: str, patterns: list[str] | None = None) -> list[str]:
    """Render a date string with each strftime pattern.

    Patterns may contain the `{ordinal_day}` placeholder, which is replaced
    with the day of the month as an English ordinal, e.g., 26th.
    """
    if patterns is None:
        patterns = DEFAULT_DATE_FORMATS
    parsed = parse_date(date_str)
    formatted = []
    for pattern in patterns:
        pattern = pattern.replace(ORDINAL_DAY, ordinal(parsed.day))
        try:
            formatted.append(parsed.strftime(pattern))
        except ValueError as err:
            raise FormattingError(f"Bad date pattern '{pattern}': {err}") from err
    return formatted


def format_report(date_str: str, patterns: list[str] | None = None) -> str:
    """Formatted dates, one per line, under a heading."""
    return "Formatted dates:\n" + "\n".join(format_date(date_str, patterns))
