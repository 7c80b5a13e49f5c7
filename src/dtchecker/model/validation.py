"""Check whether a YYYY-MM-DD string names a real calendar date."""

import dataclasses
import datetime
import enum
from typing import Optional


MIN_YEAR = 1000
DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

EMPTY_MESSAGE = "Date field cannot be empty."
FORMAT_MESSAGE = "Invalid date format. Expected YYYY-MM-DD."
YEAR_MESSAGE = "Year must be between {min_year} and {current_year}."
MONTH_MESSAGE = "Invalid month."
DAY_MESSAGE = "Invalid day for the selected month."


class DateErrorType(enum.Enum):
    """Reasons a date string can fail validation."""

    EMPTY = 1
    FORMAT = 2
    YEAR = 3
    MONTH = 4
    DAY = 5


@dataclasses.dataclass(frozen=True)
class DateCheck:
    """Outcome of checking a date string.

    Both fields are None when the date is valid.
    """

    error_type: Optional[DateErrorType] = None
    message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        """True if no error was found."""
        return self.error_type is None


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, accounting for leap years."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}.")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def _split_date(date_str: str) -> Optional[tuple[int, int, int]]:
    """Split YYYY-MM-DD into integers, or return None if malformed."""
    parts = date_str.split("-")
    if len(parts) != 3:
        return None
    if not all(part and part.isascii() and part.isdigit() for part in parts):
        return None
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError:
        # Longer than the interpreter allows for int conversion.
        return None
    return year, month, day


def check_date(
    date_str: Optional[str],
    current_year: Optional[int] = None,
    min_year: int = MIN_YEAR,
) -> DateCheck:
    """Validate a date string and categorize any failure.

    Args:
        date_str: Text expected in YYYY-MM-DD form.
        current_year: Latest acceptable year. Defaults to the current
            year in the local timezone, read when the function is called.
        min_year: Earliest acceptable year.

    Returns:
        A DateCheck. Checks run in order (empty, format, year, month, day)
        and the first failure is reported.
    """
    if not date_str:
        return DateCheck(DateErrorType.EMPTY, EMPTY_MESSAGE)

    fields = _split_date(date_str)
    if fields is None:
        return DateCheck(DateErrorType.FORMAT, FORMAT_MESSAGE)
    year, month, day = fields

    if current_year is None:
        current_year = datetime.date.today().year
    if year < min_year or year > current_year:
        return DateCheck(
            DateErrorType.YEAR,
            YEAR_MESSAGE.format(min_year=min_year, current_year=current_year),
        )

    if month < 1 or month > 12:
        return DateCheck(DateErrorType.MONTH, MONTH_MESSAGE)

    if day < 1 or day > days_in_month(year, month):
        return DateCheck(DateErrorType.DAY, DAY_MESSAGE)

    return DateCheck()


def validate_date(
    date_str: Optional[str],
    current_year: Optional[int] = None,
    min_year: int = MIN_YEAR,
) -> Optional[str]:
    """Return an error message for an invalid date, or None if it is valid."""
    return check_date(date_str, current_year, min_year).message


def is_valid_date(
    date_str: Optional[str],
    current_year: Optional[int] = None,
    min_year: int = MIN_YEAR,
) -> bool:
    return validate_date(date_str, current_year, min_year) is None
