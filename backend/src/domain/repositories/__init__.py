"""Domain Repository Interfaces - Abstract definitions."""

from .user_repository import IUserRepository
from .job_repository import IJobRepository
from .application_repository import IApplicationRepository
from .booking_repository import IBookingRepository
from .system_rates_repository import ISystemRatesRepository
from .unit_of_work import IUnitOfWork

__all__ = [
    "IUserRepository",
    "IJobRepository",
    "IApplicationRepository",
    "IBookingRepository",
    "ISystemRatesRepository",
    "IUnitOfWork",
]
