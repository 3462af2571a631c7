"""Check settings loaded from command-line arguments."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import IO, Annotated, Any, Literal, NoReturn

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, ValidationError, field_validator

from ...application.exceptions import ConfigurationError
from ...domain.value_objects import AgeThresholds, Duration, TimeMode

logger = logging.getLogger(__name__)

DEFAULT_WARNING = "24h"
DEFAULT_CRITICAL = "48h"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _to_duration(value: Any) -> Duration:
    if isinstance(value, Duration):
        return value
    if isinstance(value, str):
        return Duration.parse(value)
    msg = f"expected a duration string, got {type(value).__name__}"
    raise ValueError(msg)


DurationField = Annotated[Duration, PlainValidator(_to_duration)]

# Flag reported in error messages for each settings field
_FLAGS = {
    "file_path": "-f",
    "time_mode": "-t",
    "warning": "-w",
    "critical": "-c",
    "log_level": "--log-level",
}


class CheckSettings(BaseModel):
    """Validated settings for a single check run."""

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(description="File whose age is checked")
    time_mode: TimeMode = Field(default=TimeMode.CHANGE_TIME, description="Timestamp to compare")
    warning: DurationField = Field(default_factory=lambda: Duration.parse(DEFAULT_WARNING))
    critical: DurationField = Field(default_factory=lambda: Duration.parse(DEFAULT_CRITICAL))
    log_level: LogLevel = "WARNING"

    @field_validator("file_path")
    @classmethod
    def _require_file_path(cls, value: str) -> str:
        if not value.strip():
            msg = "no file specified"
            raise ValueError(msg)
        return value

    @field_validator("time_mode", mode="before")
    @classmethod
    def _parse_time_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return TimeMode.parse(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def thresholds(self) -> AgeThresholds:
        """Get age thresholds."""
        return AgeThresholds(warning=self.warning, critical=self.critical)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting.

    Help text goes to stderr; stdout is kept for the single status line, and
    asking for help is reported as a configuration problem rather than OK.
    """

    def print_help(self, file: IO[str] | None = None) -> None:
        super().print_help(file or sys.stderr)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            sys.stderr.write(message)
        raise ConfigurationError(self.format_usage().strip())

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _ArgumentParser(
        prog="check_file_age",
        description="Check the age of a file and report a monitoring plugin status.",
    )
    parser.add_argument(
        "-f", "--file",
        default="",
        help="The full location to the file to be checked",
    )
    parser.add_argument(
        "-t", "--time-mode",
        default=str(TimeMode.CHANGE_TIME),
        help=(
            "Which time stat to use for comparison: access-time, modify-time "
            "or change-time (atime, mtime and ctime are accepted too)"
        ),
    )
    parser.add_argument(
        "-w", "--warning",
        default=DEFAULT_WARNING,
        help="The max age a file can be before triggering a warning, e.g. 24h or 90m",
    )
    parser.add_argument(
        "-c", "--critical",
        default=DEFAULT_CRITICAL,
        help="The max age a file can be before triggering a critical, e.g. 48h",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Diagnostic log level, written to stderr",
    )
    return parser


def load_settings(argv: Sequence[str] | None = None) -> CheckSettings:
    """
    Parse command-line arguments into validated settings.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``.

    Returns:
        The validated settings.

    Raises:
        ConfigurationError: If an argument is missing, unknown or malformed.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = CheckSettings(
            file_path=args.file,
            time_mode=args.time_mode,
            warning=args.warning,
            critical=args.critical,
            log_level=args.log_level,
        )
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e

    if settings.thresholds.is_inverted:
        logger.warning(
            "Warning threshold %s is longer than critical threshold %s",
            settings.warning,
            settings.critical,
        )

    return settings


def _describe(error: ValidationError) -> str:
    """Flatten a validation error into one line naming the offending flags."""
    parts: list[str] = []
    for item in error.errors():
        field = str(item["loc"][0]) if item["loc"] else ""
        cause = item.get("ctx", {}).get("error")
        detail = str(cause) if cause is not None else item["msg"]
        parts.append(f"{_FLAGS.get(field, field)}: {detail}")
    return "; ".join(parts)
