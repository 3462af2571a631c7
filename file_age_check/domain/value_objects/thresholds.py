"""Age thresholds value object."""

from dataclasses import dataclass, field

from .duration import Duration


@dataclass(frozen=True, slots=True)
class AgeThresholds:
    """Maximum file ages before a warning or critical status is raised."""

    warning: Duration = field(default_factory=lambda: Duration.parse("24h"))
    critical: Duration = field(default_factory=lambda: Duration.parse("48h"))

    @property
    def is_inverted(self) -> bool:
        """True when the warning tier is longer than the critical tier."""
        return self.warning > self.critical
