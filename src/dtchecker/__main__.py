"""Start the Date Time Checker."""
import argparse
import pathlib
import sys
from typing import Optional

import rich.console
import rich.markup

from dtchecker import config
from dtchecker.model import formatting, validation
import dtchecker.view.main_app


console = rich.console.Console(highlight=False)
error_console = rich.console.Console(stderr=True, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    """Define command line arguments."""
    parser = argparse.ArgumentParser(prog="dtchecker")
    parser.set_defaults(func=None)
    subparsers = parser.add_subparsers()

    app_parser = subparsers.add_parser(
        "app",
        help="Run the Date Time Checker application."
    )
    app_parser.set_defaults(func=run_app)
    add_config_arg(app_parser)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that one or more YYYY-MM-DD dates are valid."
    )
    validate_parser.set_defaults(func=validate_dates)
    validate_parser.add_argument(
        "dates",
        nargs="+",
        help="Dates in YYYY-MM-DD format."
    )
    validate_parser.add_argument(
        "-y", "--year",
        help="Latest acceptable year (default: the current year).",
        type=int,
        default=None
    )
    add_config_arg(validate_parser)

    format_parser = subparsers.add_parser(
        "format",
        help="Show a YYYY-MM-DD date in several display formats."
    )
    format_parser.set_defaults(func=format_date)
    format_parser.add_argument("date", help="Date in YYYY-MM-DD format.")
    add_config_arg(format_parser)

    init_parser = subparsers.add_parser(
        "init-config",
        help="Create a settings file with the default values."
    )
    init_parser.set_defaults(func=init_config)
    init_parser.add_argument(
        "path",
        nargs="?",
        type=pathlib.Path,
        default=pathlib.Path(config.CONFIG_FILE_NAME),
        help=f"Path of the new settings file (default: {config.CONFIG_FILE_NAME})."
    )
    return parser


def add_config_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c", "--config_path",
        help="Path to config file",
        type=pathlib.Path,
        default=None
    )


def run_app(args: argparse.Namespace) -> int:
    """Run the Date Time Checker TUI application."""
    app = dtchecker.view.main_app.DateTimeChecker()
    app.run()
    return 0


def validate_dates(args: argparse.Namespace) -> int:
    """Print the validation outcome of each date.

    Returns 0 if every date is valid, otherwise 1.
    """
    all_valid = True
    for date_str in args.dates:
        error = validation.validate_date(
            date_str, args.year, config.settings.min_year
        )
        label = rich.markup.escape(date_str)
        if error is None:
            console.print(f"[green]{label}: valid[/]")
        else:
            all_valid = False
            console.print(f"[bold red]{label}: {rich.markup.escape(error)}[/]")
    return 0 if all_valid else 1


def format_date(args: argparse.Namespace) -> int:
    """Print a date in each configured display format."""
    error = validation.validate_date(args.date, min_year=config.settings.min_year)
    if error is not None:
        console.print(f"[bold red]{rich.markup.escape(error)}[/]")
        return 1
    try:
        report = formatting.format_report(args.date, config.settings.date_formats)
    except formatting.FormattingError as err:
        message = rich.markup.escape(str(err))
        error_console.print(f"[bold red]Error formatting date: {message}[/]")
        return 1
    console.print(report, markup=False)
    return 0


def init_config(args: argparse.Namespace) -> int:
    """Write the example settings file to a new path."""
    try:
        config_path = config.settings.create_new_config_file(args.path)
    except config.ConfigError as err:
        message = rich.markup.escape(str(err))
        error_console.print(f"[bold red]Configuration error: {message}[/]")
        return 2
    console.print(f"[green]Created {rich.markup.escape(str(config_path))}[/]")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Function to run the app, used for the console script entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.func is None:
        parser.print_help()
        return 0
    try:
        config.settings.update_from_args(args)
    except config.ConfigError as err:
        message = rich.markup.escape(str(err))
        error_console.print(f"[bold red]Configuration error: {message}[/]")
        return 2
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
