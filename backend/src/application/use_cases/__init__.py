"""Use cases - application workflows exposed to the outer layers."""

from .apply_for_job import ApplyForJobUseCase, ApplicationResult
from .book_job import BookJobUseCase
from .review_application import AcceptApplicationUseCase, RejectApplicationUseCase
from .manage_postings import (
    CreateJobPostingUseCase,
    ToggleJobListingUseCase,
    DelistJobPostingUseCase,
)
from .get_jobs import GetOpenJobsUseCase, GetJobUseCase, GetSupervisorJobsUseCase
from .get_bookings import GetLaborBookingsUseCase, GetSupervisorBookingsUseCase
from .get_applications import GetJobApplicationsUseCase, GetLaborApplicationsUseCase
from .manage_users import (
    CreateUserProfileUseCase,
    GetUserProfileUseCase,
    UpdateUserRoleUseCase,
)
from .get_system_rates import GetSystemRatesUseCase

__all__ = [
    "ApplyForJobUseCase",
    "ApplicationResult",
    "BookJobUseCase",
    "AcceptApplicationUseCase",
    "RejectApplicationUseCase",
    "CreateJobPostingUseCase",
    "ToggleJobListingUseCase",
    "DelistJobPostingUseCase",
    "GetOpenJobsUseCase",
    "GetJobUseCase",
    "GetSupervisorJobsUseCase",
    "GetLaborBookingsUseCase",
    "GetSupervisorBookingsUseCase",
    "GetJobApplicationsUseCase",
    "GetLaborApplicationsUseCase",
    "CreateUserProfileUseCase",
    "GetUserProfileUseCase",
    "UpdateUserRoleUseCase",
    "GetSystemRatesUseCase",
]
