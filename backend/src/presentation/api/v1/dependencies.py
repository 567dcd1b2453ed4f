"""FastAPI dependency injection setup."""

from fastapi import Depends

from application.services import UnitOfWorkFactory
from application.use_cases import (
    AcceptApplicationUseCase,
    ApplyForJobUseCase,
    BookJobUseCase,
    CreateJobPostingUseCase,
    CreateUserProfileUseCase,
    DelistJobPostingUseCase,
    GetJobApplicationsUseCase,
    GetJobUseCase,
    GetLaborApplicationsUseCase,
    GetLaborBookingsUseCase,
    GetOpenJobsUseCase,
    GetSupervisorBookingsUseCase,
    GetSupervisorJobsUseCase,
    GetSystemRatesUseCase,
    GetUserProfileUseCase,
    RejectApplicationUseCase,
    ToggleJobListingUseCase,
    UpdateUserRoleUseCase,
)
from infrastructure.config import Settings, get_settings
from infrastructure.database import SQLAlchemyUnitOfWork, get_session_factory


# Unit of work dependency
def get_uow_factory() -> UnitOfWorkFactory:
    """Get a factory opening one unit of work per transaction."""
    session_factory = get_session_factory()
    return lambda: SQLAlchemyUnitOfWork(session_factory)


# Booking use cases
def get_apply_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> ApplyForJobUseCase:
    """Get apply for job use case dependency."""
    return ApplyForJobUseCase(
        uow_factory,
        weekly_hour_limit=settings.weekly_hour_limit,
        max_retries=settings.transaction_max_retries,
    )


def get_book_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> BookJobUseCase:
    """Get legacy direct booking use case dependency."""
    return BookJobUseCase(
        uow_factory,
        weekly_hour_limit=settings.weekly_hour_limit,
        max_retries=settings.transaction_max_retries,
    )


def get_accept_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> AcceptApplicationUseCase:
    """Get accept application use case dependency."""
    return AcceptApplicationUseCase(
        uow_factory,
        weekly_hour_limit=settings.weekly_hour_limit,
        max_retries=settings.transaction_max_retries,
    )


def get_reject_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> RejectApplicationUseCase:
    """Get reject application use case dependency."""
    return RejectApplicationUseCase(uow_factory, settings.transaction_max_retries)


# Posting use cases
def get_create_posting_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> CreateJobPostingUseCase:
    """Get create posting use case dependency."""
    return CreateJobPostingUseCase(
        uow_factory,
        expiry_days=settings.posting_expiry_days,
        fallback_min_wage=settings.default_min_wage_per_hour,
        max_retries=settings.transaction_max_retries,
    )


def get_toggle_listing_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> ToggleJobListingUseCase:
    return ToggleJobListingUseCase(uow_factory, settings.transaction_max_retries)


def get_delist_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> DelistJobPostingUseCase:
    return DelistJobPostingUseCase(uow_factory, settings.transaction_max_retries)


def get_open_jobs_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetOpenJobsUseCase:
    return GetOpenJobsUseCase(uow_factory, settings.transaction_max_retries)


def get_job_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetJobUseCase:
    return GetJobUseCase(uow_factory, settings.transaction_max_retries)


def get_supervisor_jobs_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetSupervisorJobsUseCase:
    return GetSupervisorJobsUseCase(uow_factory, settings.transaction_max_retries)


# Read models
def get_job_applications_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetJobApplicationsUseCase:
    return GetJobApplicationsUseCase(uow_factory, settings.transaction_max_retries)


def get_labor_applications_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetLaborApplicationsUseCase:
    return GetLaborApplicationsUseCase(uow_factory, settings.transaction_max_retries)


def get_labor_bookings_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetLaborBookingsUseCase:
    return GetLaborBookingsUseCase(uow_factory, settings.transaction_max_retries)


def get_supervisor_bookings_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetSupervisorBookingsUseCase:
    return GetSupervisorBookingsUseCase(uow_factory, settings.transaction_max_retries)


def get_system_rates_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetSystemRatesUseCase:
    return GetSystemRatesUseCase(
        uow_factory,
        fallback_min_wage=settings.default_min_wage_per_hour,
        max_retries=settings.transaction_max_retries,
    )


# User use cases
def get_create_user_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> CreateUserProfileUseCase:
    return CreateUserProfileUseCase(uow_factory, settings.transaction_max_retries)


def get_user_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> GetUserProfileUseCase:
    return GetUserProfileUseCase(uow_factory, settings.transaction_max_retries)


def get_update_role_use_case(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    settings: Settings = Depends(get_settings),
) -> UpdateUserRoleUseCase:
    return UpdateUserRoleUseCase(uow_factory, settings.transaction_max_retries)
