"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from file_age_check.application.exceptions import FileAccessError
from file_age_check.domain.entities import TimestampSnapshot
from file_age_check.domain.value_objects import AgeThresholds, Duration

HOUR_NS = 3_600 * 1_000_000_000

# Fixed evaluation instant: 2024-01-01T00:00:00Z
NOW_NS = 1_704_067_200 * 1_000_000_000


class FakeTimestampReader:
    """In-memory TimestampReader returning a fixed snapshot."""

    def __init__(self, snapshot: TimestampSnapshot | None = None) -> None:
        self.snapshot = snapshot
        self.paths: list[str] = []

    def read(self, path: str) -> TimestampSnapshot:
        self.paths.append(path)
        if self.snapshot is None:
            msg = f"File: {path}: No such file or directory"
            raise FileAccessError(msg)
        return self.snapshot


@pytest.fixture
def default_thresholds() -> AgeThresholds:
    """Default 24h warning / 48h critical thresholds."""
    return AgeThresholds(warning=Duration.parse("24h"), critical=Duration.parse("48h"))


@pytest.fixture
def now_ns() -> int:
    """Fixed evaluation instant."""
    return NOW_NS


@pytest.fixture
def snapshot_aged() -> Callable[..., TimestampSnapshot]:
    """Build a snapshot whose timestamps are the given number of hours before NOW_NS."""

    def build(access: float = 0, modify: float = 0, change: float = 0) -> TimestampSnapshot:
        return TimestampSnapshot(
            access_ns=NOW_NS - int(access * HOUR_NS),
            modify_ns=NOW_NS - int(modify * HOUR_NS),
            change_ns=NOW_NS - int(change * HOUR_NS),
        )

    return build


@pytest.fixture
def aged_file(tmp_path: Path) -> Callable[[float], Path]:
    """Create a real file whose access and modify times lie ``hours`` in the past."""

    def create(hours: float, name: str = "target.dat") -> Path:
        path = tmp_path / name
        path.write_text("payload")
        stamp = NOW_NS - int(hours * HOUR_NS)
        os.utime(path, ns=(stamp, stamp))
        return path

    return create


@pytest.fixture
def fake_reader() -> Callable[[TimestampSnapshot | None], FakeTimestampReader]:
    """Build a fake reader; ``None`` makes every read fail."""
    return FakeTimestampReader
