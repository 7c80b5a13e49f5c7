"""Data entry validator classes."""

from typing import Optional

from textual import validation

from dtchecker import config
from dtchecker.model import validation as date_validation


class DateValidator(validation.Validator):
    """Input must be a real YYYY-MM-DD date no later than the current year."""

    current_year: Optional[int]
    """Latest acceptable year. Read from the clock on each check if None."""
    min_year: Optional[int]
    """Earliest acceptable year. Taken from the settings if None."""

    def __init__(
        self,
        current_year: Optional[int] = None,
        min_year: Optional[int] = None,
        failure_description: Optional[str] = None,
    ) -> None:
        """Set the allowed year range."""
        super().__init__(failure_description)
        self.current_year = current_year
        self.min_year = min_year

    def validate(self, value: str) -> validation.ValidationResult:
        """Verify input is a valid date."""
        min_year = (
            self.min_year if self.min_year is not None else config.settings.min_year
        )
        error = date_validation.validate_date(value, self.current_year, min_year)
        if error is None:
            return self.success()
        return self.failure(error)

