"""Duration value object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Self

from ..exceptions import InvalidDurationError

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_MAX_NANOSECONDS = 2**63 - 1

_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT = r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)"
_COMPONENT_RE = re.compile(_COMPONENT)
_DURATION_RE = re.compile(rf"(?:{_COMPONENT})+")


@dataclass(frozen=True, slots=True, order=True)
class Duration:
    """A non-negative span of time with nanosecond resolution.

    Parsed from compact unit strings such as ``24h``, ``90m`` or
    ``1h30m15.5s`` and rendered back in normalised form (``24h0m0s``).
    """

    nanoseconds: int

    def __post_init__(self) -> None:
        """Reject spans that cannot be represented."""
        if self.nanoseconds < 0:
            msg = f"duration must not be negative: {self.nanoseconds}ns"
            raise InvalidDurationError(msg)
        if self.nanoseconds > _MAX_NANOSECONDS:
            msg = f"duration out of range: {self.nanoseconds}ns"
            raise InvalidDurationError(msg)

    def __str__(self) -> str:
        return _format(self.nanoseconds)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a duration string.

        Args:
            text: One or more ``<number><unit>`` groups, optionally prefixed
                with ``+``. Units: ns, us (or µs), ms, s, m, h. The bare
                string ``0`` is also accepted.

        Returns:
            The parsed duration.

        Raises:
            InvalidDurationError: If the text is malformed or negative.
        """
        original = text
        text = text.strip()
        if text.startswith("-"):
            msg = f"duration must not be negative: {original!r}"
            raise InvalidDurationError(msg)
        if text.startswith("+"):
            text = text[1:]
        if text == "0":
            return cls(0)
        if not _DURATION_RE.fullmatch(text):
            msg = f"invalid duration {original!r}"
            raise InvalidDurationError(msg)

        total = 0
        for match in _COMPONENT_RE.finditer(text):
            number, unit = match.groups()
            whole, _, fraction = number.partition(".")
            scale = _UNITS[unit]
            total += int(whole or 0) * scale
            if fraction:
                # Sub-unit digits below nanosecond resolution are truncated.
                total += int(fraction) * scale // 10 ** len(fraction)
            if total > _MAX_NANOSECONDS:
                msg = f"invalid duration {original!r}: out of range"
                raise InvalidDurationError(msg)
        return cls(total)


def _format(ns: int) -> str:
    """Render nanoseconds as e.g. ``24h0m0s``, ``1m30s``, ``1.5s`` or ``500ms``."""
    if ns == 0:
        return "0s"
    if ns < MICROSECOND:
        return f"{ns}ns"
    if ns < MILLISECOND:
        return f"{_decimal(ns, 3)}µs"
    if ns < SECOND:
        return f"{_decimal(ns, 6)}ms"

    hours, rest = divmod(ns, HOUR)
    minutes, rest = divmod(rest, MINUTE)
    seconds = f"{_decimal(rest, 9)}s"
    if hours:
        return f"{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{minutes}m{seconds}"
    return seconds


def _decimal(value: int, digits: int) -> str:
    """Format ``value / 10**digits`` without trailing fractional zeros."""
    whole, fraction = divmod(value, 10**digits)
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")
