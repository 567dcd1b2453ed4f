"""Domain errors raised by the booking core."""

from typing import Any, Optional


class DomainError(Exception):
    """
    Base class for all errors raised by the booking core.

    Attributes:
        code: Stable machine-readable error code
        message: Human-readable message, safe to show to users
    """

    code: str = "domain_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a response payload."""
        return {"success": False, "error": self.code, "message": self.message}


class ValidationError(DomainError, ValueError):
    """Bad input shape or values; raised before any state change."""

    code = "validation_error"


class InvalidDateError(ValidationError):
    """A date could not be parsed."""

    code = "invalid_date"

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid date: {value!r}")
        self.value = value


class WageBelowMinimumError(ValidationError):
    """Offered wage is below the legal floor for the posting."""

    code = "wage_below_minimum"

    def __init__(self, offered: Any, minimum: Any) -> None:
        super().__init__(
            f"Offered wage {offered} is below the minimum of {minimum}."
        )
        self.offered = offered
        self.minimum = minimum

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["minimum"] = str(self.minimum)
        return data


class NotFoundError(DomainError):
    """A referenced posting, application or user does not exist."""

    code = "not_found"

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class AlreadyAppliedError(DomainError):
    """The worker already has an application for this posting."""

    code = "already_applied"

    def __init__(self, job_id: Any, labor_id: str) -> None:
        super().__init__("You have already applied for this job!")
        self.job_id = job_id
        self.labor_id = labor_id


class SafetyLimitExceededError(DomainError):
    """Accepting the job would push the worker over the weekly hour cap."""

    code = "safety_limit_exceeded"

    def __init__(self, projected_hours: float, limit: float) -> None:
        super().__init__(
            f"Health Safety Warning: This job would put you at "
            f"{projected_hours:g} hours this week. The limit is {limit:g} hours."
        )
        self.projected_hours = projected_hours
        self.limit = limit

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["projected_hours"] = self.projected_hours
        data["limit"] = self.limit
        return data


class CapacityExceededError(DomainError):
    """The posting has no remaining slots or no longer accepts workers."""

    code = "capacity_exceeded"

    def __init__(self, job_id: Any, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or "Sorry, this job has reached its maximum number of applicants."
        )
        self.job_id = job_id


class StorageError(DomainError):
    """
    The store is unavailable or a transaction kept conflicting.

    Attributes:
        retryable: Whether repeating the whole operation may succeed
    """

    code = "system_error"

    def __init__(
        self,
        message: str = "System error. Please try again.",
        retryable: bool = True,
    ) -> None:
        super().__init__(message)
        self.retryable = retryable
