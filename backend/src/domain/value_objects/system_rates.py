"""System-wide wage rates."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from domain.exceptions import ValidationError


@dataclass(frozen=True)
class SystemRates:
    """
    Immutable snapshot of the regulatory wage rate.

    Attributes:
        min_wage_per_hour: Legal minimum wage per hour of work
        last_updated: When the rate was last changed
    """

    min_wage_per_hour: Decimal
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate rates."""
        if not isinstance(self.min_wage_per_hour, Decimal):
            object.__setattr__(
                self, "min_wage_per_hour", Decimal(str(self.min_wage_per_hour))
            )
        if self.min_wage_per_hour < 0:
            raise ValidationError("Minimum wage cannot be negative")

    def __str__(self) -> str:
        return f"{self.min_wage_per_hour}/hour"
