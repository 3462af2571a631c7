"""Time mode value object."""

from __future__ import annotations

from enum import StrEnum

from ..exceptions import InvalidTimeModeError


class TimeMode(StrEnum):
    """Which file timestamp governs the age check."""

    ACCESS_TIME = "access-time"
    MODIFY_TIME = "modify-time"
    CHANGE_TIME = "change-time"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> TimeMode:
        """Parse a mode name, accepting the short atime/mtime/ctime aliases."""
        name = value.strip().lower()
        mode = _ALIASES.get(name)
        if mode is not None:
            return mode
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            msg = f"invalid time mode {value!r} (expected one of: {choices})"
            raise InvalidTimeModeError(msg) from None


_ALIASES = {
    "atime": TimeMode.ACCESS_TIME,
    "mtime": TimeMode.MODIFY_TIME,
    "ctime": TimeMode.CHANGE_TIME,
}
