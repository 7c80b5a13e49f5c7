"""Test the Date Time Checker form."""

import pytest
from textual import widgets

from dtchecker import config
from dtchecker.view import main_app, validators


@pytest.fixture(autouse=True)
def default_settings(settings: config.Settings) -> None:
    """Use default settings."""


def test_date_validator_success() -> None:
    result = validators.DateValidator(current_year=2025).validate("2024-02-29")
    assert result.is_valid


def test_date_validator_failure() -> None:
    # Act
    result = validators.DateValidator(current_year=2025).validate("2023-02-29")
    # Assert
    assert not result.is_valid
    assert result.failure_descriptions == ["Invalid day for the selected month."]


def test_date_validator_uses_settings(settings: config.Settings) -> None:
    settings.min_year = 1900
    result = validators.DateValidator(current_year=2025).validate("1899-12-31")
    assert result.failure_descriptions == ["Year must be between 1900 and 2025."]


@pytest.mark.asyncio
async def test_submit_valid_date() -> None:
    """Pressing enter in the date input checks the date."""
    app = main_app.DateTimeChecker()
    async with app.run_test() as pilot:
        # Arrange
        app.query_one("#date-input", widgets.Input).value = "2024-02-29"
        # Act
        await pilot.press("enter")
        await pilot.pause()
        # Assert
        assert app.result == "2024-02-29 is a valid date."
        assert app.popup_message == ""


@pytest.mark.asyncio
async def test_check_invalid_date() -> None:
    app = main_app.DateTimeChecker()
    async with app.run_test() as pilot:
        # Arrange
        app.query_one("#date-input", widgets.Input).value = "2023-13-01"
        # Act
        await pilot.press("f5")
        await pilot.pause()
        # Assert
        assert app.popup_message == "Invalid month."
        assert app.result == ""


@pytest.mark.asyncio
async def test_check_empty_date() -> None:
    app = main_app.DateTimeChecker()
    async with app.run_test() as pilot:
        await pilot.press("f5")
        await pilot.pause()
        assert app.popup_message == "Date field cannot be empty."


@pytest.mark.asyncio
async def test_format_date() -> None:
    app = main_app.DateTimeChecker()
    async with app.run_test() as pilot:
        # Arrange
        app.query_one("#date-input", widgets.Input).value = "2023-10-26"
        # Act
        await pilot.press("f6")
        await pilot.pause()
        # Assert
        assert app.result.splitlines()[0] == "Formatted dates:"
        assert "Thursday, October 26th, 2023" in app.result


@pytest.mark.asyncio
async def test_format_invalid_date() -> None:
    app = main_app.DateTimeChecker()
    async with app.run_test() as pilot:
        app.query_one("#date-input", widgets.Input).value = "2023-04-31"
        await pilot.press("f6")
        await pilot.pause()
        assert app.popup_message == "Invalid day for the selected month."
        assert app.result == ""


@pytest.mark.asyncio
async def test_whitespace_is_not_stripped() -> None:
    """The app and the input's validator agree on padded input."""
    app = main_app.DateTimeChecker()
    async with app.run_test() as pilot:
        # Arrange
        date_input = app.query_one("#date-input", widgets.Input)
        date_input.value = " 2023-10-26"
        # Act
        await pilot.press("enter")
        await pilot.pause()
        # Assert
        assert app.popup_message == "Invalid date format. Expected YYYY-MM-DD."
        assert app.result == ""
        assert date_input.has_class("-invalid")


def history_lines(app: main_app.DateTimeChecker) -> list[tuple[str, str]]:
    """Text and style of each line in the history log."""
    history = app.query_one("#history", widgets.RichLog)
    lines = []
    for strip in history.lines:
        styles = " ".join(
            str(segment.style) for segment in strip if segment.text.strip()
        )
        lines.append((strip.text.rstrip(), styles))
    return lines


@pytest.mark.asyncio
async def test_history_log() -> None:
    """Valid dates are logged in green and errors in red."""
    app = main_app.DateTimeChecker()
    async with app.run_test() as pilot:
        # Arrange
        date_input = app.query_one("#date-input", widgets.Input)
        # Act
        date_input.value = "2024-02-29"
        await pilot.press("f5")
        date_input.value = "2023-04-31"
        await pilot.press("f5")
        date_input.value = ""
        await pilot.press("f5")
        await pilot.pause()
        # Assert
        lines = history_lines(app)
        assert [text for text, _ in lines] == [
            "2024-02-29: valid",
            "2023-04-31: Invalid day for the selected month.",
            "(empty): Date field cannot be empty.",
        ]
        assert "green" in lines[0][1]
        assert "red" in lines[1][1]
        assert "red" in lines[2][1]
