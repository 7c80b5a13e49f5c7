"""Main entry point for the Date Time Checker application."""

import rich.markup
import textual
from textual import app, containers, reactive, widgets

from dtchecker import config
from dtchecker.model import formatting, validation
import dtchecker.view
from dtchecker.view import validators


class DateTimeChecker(app.App):
    """Form for checking and formatting a calendar date."""

    CSS_PATH = dtchecker.view.CSS_FOLDER / "main.tcss"
    TITLE = "Date Time Checker"
    BINDINGS = [
        ("f5", "check_date", "Check Date"),
        ("f6", "format_date", "Format Date"),
    ]

    result = reactive.reactive("", init=False)
    """Text shown in the result pane."""
    popup_message = reactive.reactive("", init=False)
    """Most recent error shown to the user."""

    def compose(self) -> app.ComposeResult:
        """Add widgets to screen."""
        yield widgets.Header()
        with containers.VerticalGroup(classes="outer"):
            yield widgets.Label("Date:", classes="emphasis")
            yield widgets.Input(
                placeholder="YYYY-MM-DD",
                id="date-input",
                validators=[validators.DateValidator()],
                validate_on=["submitted"],
            )
        with containers.HorizontalGroup(id="button-group", classes="outer"):
            yield widgets.Button("Check Date", variant="primary", id="check-date")
            yield widgets.Button("Format Date", id="format-date")
        yield widgets.Static("", id="result", classes="outer")
        yield widgets.RichLog(
            id="history", markup=True, max_lines=config.settings.history_size
        )
        yield widgets.Footer()

    def on_mount(self) -> None:
        """Put focus on the date input."""
        self.query_one("#date-input", widgets.Input).focus()
        self.log.info(f"Configuration file: {config.settings.config_path}")

    @property
    def date_value(self) -> str:
        """Current contents of the date input."""
        return self.query_one("#date-input", widgets.Input).value

    def _check(self, date_str: str) -> bool:
        """Run the validator, showing an error popup on failure."""
        error = validation.validate_date(date_str, min_year=config.settings.min_year)
        if error is not None:
            self.show_error(error, date_str)
            return False
        return True

    @textual.on(widgets.Button.Pressed, "#check-date")
    @textual.on(widgets.Input.Submitted, "#date-input")
    def action_check_date(self) -> None:
        """Validate the date and report the outcome."""
        date_str = self.date_value
        if not self._check(date_str):
            return
        self.result = f"{date_str} is a valid date."
        self.write_history(f"[green]{rich.markup.escape(date_str)}: valid[/]")

    @textual.on(widgets.Button.Pressed, "#format-date")
    def action_format_date(self) -> None:
        """Show the date in several display formats."""
        date_str = self.date_value
        if not self._check(date_str):
            return
        try:
            report = formatting.format_report(date_str, config.settings.date_formats)
        except formatting.FormattingError as err:
            self.log.error(str(err))
            self.show_error("Error formatting date.", date_str)
            return
        self.result = report
        self.write_history(f"[green]{rich.markup.escape(date_str)}: formatted[/]")

    def show_error(self, message: str, date_str: str = "") -> None:
        """Display a transient error notification."""
        self.popup_message = message
        self.notify(
            message,
            title="Invalid date",
            severity="error",
            timeout=config.settings.notify_timeout,
        )
        label = rich.markup.escape(date_str) if date_str else "(empty)"
        self.write_history(f"[bold red]{label}: {rich.markup.escape(message)}[/]")

    def write_history(self, line: str) -> None:
        """Add a line to the history log."""
        self.query_one("#history", widgets.RichLog).write(line)

    def watch_result(self, result: str) -> None:
        """Update the result pane."""
        self.query_one("#result", widgets.Static).update(rich.markup.escape(result))
