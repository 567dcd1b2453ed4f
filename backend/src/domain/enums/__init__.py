"""Domain Enums - Constant values used across the domain."""

from .user_role import UserRole
from .wage_type import WageType
from .job_status import JobStatus
from .application_status import ApplicationStatus, BookingStatus

__all__ = ["UserRole", "WageType", "JobStatus", "ApplicationStatus", "BookingStatus"]
