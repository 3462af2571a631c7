"""Application use cases."""

from .check_file_age import CheckFileAge, CheckResult

__all__ = ["CheckFileAge", "CheckResult"]
