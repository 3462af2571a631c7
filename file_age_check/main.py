#!/usr/bin/env python3
"""
File Age Check

Composition root and plugin entry point.
Parses settings, runs the check and turns the outcome into one status line
and a matching exit code.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Sequence

from . import __version__
from .application.exceptions import ConfigurationError, FileAccessError
from .application.use_cases import CheckFileAge
from .domain.entities import Status
from .infrastructure.adapters import StatTimestampReader
from .infrastructure.config import CheckSettings, load_settings

# Configure logging; stdout is reserved for the status line
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


def create_check_use_case(
    settings: CheckSettings,
    *,
    clock: Callable[[], int] | None = None,
) -> CheckFileAge:
    """Wire the use case with the filesystem adapter."""
    return CheckFileAge(
        timestamp_reader=StatTimestampReader(),
        path=settings.file_path,
        thresholds=settings.thresholds,
        time_mode=settings.time_mode,
        clock=clock or time.time_ns,
    )


def run(
    argv: Sequence[str] | None = None,
    *,
    clock: Callable[[], int] | None = None,
) -> Status:
    """
    Run the check and return the status to report.

    Every failure is mapped to an UNKNOWN status; nothing here exits.
    """
    try:
        settings = load_settings(argv)
        logging.getLogger().setLevel(settings.log_level)
        logger.debug("check_file_age %s starting with %s", __version__, settings)

        result = create_check_use_case(settings, clock=clock).execute()
        return result.status

    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return Status.unknown(_single_line(str(e)))
    except FileAccessError as e:
        logger.error("File access error: %s", e)
        return Status.unknown(_single_line(str(e)))
    except Exception as e:
        logger.exception("Unexpected error")
        return Status.unknown(_single_line(f"Unexpected error: {e.__class__.__name__}: {e}"))


def exit_with_status(status: Status) -> None:
    """Print the status line and exit with its severity."""
    sys.stdout.write(f"{_printable(status.line)}\n")
    sys.stdout.flush()
    sys.exit(status.exit_code)


def main() -> None:
    """Main entry point."""
    exit_with_status(run())


def _single_line(text: str) -> str:
    return " ".join(text.split())


def _printable(text: str) -> str:
    """Escape undecodable path bytes and control characters so the line prints as one line."""
    try:
        text = text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
    except UnicodeEncodeError:
        text = text.encode("utf-8", "backslashreplace").decode("utf-8")
    return "".join(ch if ch.isprintable() else repr(ch)[1:-1] for ch in text)


if __name__ == "__main__":
    main()
