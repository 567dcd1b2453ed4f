"""User profile entity representing a supervisor or a worker."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from domain.enums import UserRole
from domain.exceptions import ValidationError


@dataclass
class UserProfile:
    """
    Entity representing a registered user.

    The id is assigned by the external login provider and never changes;
    the role can only be changed through change_role().
    """

    id: str
    role: UserRole = UserRole.LABOR
    phone_number: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate profile."""
        if not self.id or not self.id.strip():
            raise ValidationError("User id cannot be empty")
        self.role = UserRole(self.role)

    def change_role(self, role: UserRole) -> None:
        """Switch the user between supervisor and labor."""
        self.role = UserRole(role)

    @property
    def is_supervisor(self) -> bool:
        return self.role == UserRole.SUPERVISOR

    @property
    def is_labor(self) -> bool:
        return self.role == UserRole.LABOR

    def __str__(self) -> str:
        return f"UserProfile(id={self.id}, role={self.role})"
