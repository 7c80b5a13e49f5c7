"""The dtchecker.model namespace."""

# ruff: noqa: F401
from dtchecker.model.validation import (
    DateCheck,
    DateErrorType,
    check_date,
    days_in_month,
    is_leap_year,
    is_valid_date,
    validate_date,
)
from dtchecker.model.formatting import (
    DEFAULT_DATE_FORMATS,
    FormattingError,
    format_date,
    format_report,
)
