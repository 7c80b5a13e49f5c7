"""Manage configuration settings for the date checker."""

import argparse
import dataclasses
import enum
import pathlib
import shutil
import tomllib
from typing import Any, Optional

from dtchecker.model import formatting, validation


CONFIG_FILE_NAME = "dtchecker.toml"
MIN_YEAR = validation.MIN_YEAR


class ConfigError(Exception):
    """Errors when setting or accessing settings."""

    class ErrorType(enum.Enum):
        NOT_A_FILE = 1
        PATH_DOES_NOT_EXIST = 2
        BAD_VALUE = 3
        FILE_EXISTS = 4

    error_type: ErrorType

    def __init__(self, message: str, error_type: ErrorType) -> None:
        """Set error type."""
        super().__init__(message)
        self.error_type = error_type


@dataclasses.dataclass
class Settings:
    """Configuration data for the dtchecker application.

    notify_timeout is the number of seconds an error popup stays on screen.
    history_size is the maximum number of lines kept in the history log.
    """

    config_path: Optional[pathlib.Path] = None
    min_year: int = MIN_YEAR
    date_formats: list[str] = dataclasses.field(
        default_factory=lambda: list(formatting.DEFAULT_DATE_FORMATS)
    )
    notify_timeout: float = 3.0
    history_size: int = 100

    def update_from_args(self, args: argparse.Namespace) -> None:
        """Read settings."""
        self.config_path = self._get_full_path(
            getattr(args, "config_path", None), CONFIG_FILE_NAME
        )
        if self.config_path is not None:
            self._read_config_file()

    @staticmethod
    def _convert_path_to_absolute(path: pathlib.Path) -> pathlib.Path:
        """Convert relative paths to absolute paths."""
        return path if path.is_absolute() else pathlib.Path.cwd() / path

    @staticmethod
    def _get_full_path(
        path: Optional[pathlib.Path], default_file_name: str
    ) -> Optional[pathlib.Path]:
        """Convert path arg to full filesystem path.

        If path is None, looks for the default file in the current working
        directory and returns None if it isn't there. An explicit path must
        point to an existing file.
        """
        cwd = pathlib.Path.cwd()
        if path is None:
            default_path = cwd / default_file_name
            return default_path if default_path.is_file() else None
        full_path = path if path.is_absolute() else cwd / path
        if not full_path.exists():
            raise ConfigError(
                f"Configuration file {full_path} does not exist.",
                ConfigError.ErrorType.PATH_DOES_NOT_EXIST,
            )
        if not full_path.is_file():
            raise ConfigError(
                f"Configuration path {full_path} is not a file.",
                ConfigError.ErrorType.NOT_A_FILE,
            )
        return full_path

    @staticmethod
    def _check_value(setting_name: str, value: Any) -> Any:
        """Raise a ConfigError if a setting from the file has the wrong type."""
        match setting_name:
            case "min_year" | "history_size":
                valid = isinstance(value, int) and not isinstance(value, bool)
            case "notify_timeout":
                valid = isinstance(value, (int, float)) and not isinstance(value, bool)
            case "date_formats":
                valid = isinstance(value, list) and all(
                    isinstance(pattern, str) for pattern in value
                )
            case _:
                valid = True
        if not valid:
            raise ConfigError(
                f"Invalid value for {setting_name}: {value!r}",
                ConfigError.ErrorType.BAD_VALUE,
            )
        return value

    def _read_config_file(self) -> None:
        """Read TOML configuration file."""
        if self.config_path is None:
            return
        app_settings = dataclasses.asdict(self)
        with open(self.config_path, "rb") as toml_file:
            try:
                file_settings = tomllib.load(toml_file)
            except tomllib.TOMLDecodeError as err:
                raise ConfigError(
                    f"Unable to parse {self.config_path}: {err}",
                    ConfigError.ErrorType.BAD_VALUE,
                ) from err
        for setting_name, value in file_settings.items():
            if setting_name not in app_settings or setting_name == "config_path":
                continue
            if isinstance(value, str) and value.lower() in ["", "none", "null"]:
                continue
            setattr(self, setting_name, self._check_value(setting_name, value))

    def create_new_config_file(self, config_path: pathlib.Path) -> pathlib.Path:
        """Write the example settings to a new TOML file.

        Relative paths are resolved against the current working directory.
        An existing file is never overwritten.
        """
        full_path = self._convert_path_to_absolute(config_path)
        if full_path.exists():
            raise ConfigError(
                f"Configuration file {full_path} already exists.",
                ConfigError.ErrorType.FILE_EXISTS,
            )
        if not full_path.parent.is_dir():
            raise ConfigError(
                f"Folder {full_path.parent} does not exist.",
                ConfigError.ErrorType.PATH_DOES_NOT_EXIST,
            )
        shutil.copy(pathlib.Path(__file__).parent / "example-config.toml", full_path)
        return full_path


# Store settings in a module-level variable, which will be available from any
# other module that imports dtchecker.config. There is only a single instance
# of the Settings class.
settings = Settings()
