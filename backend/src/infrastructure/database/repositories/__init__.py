"""Repository implementations."""

from .sqlalchemy_user_repository import SQLAlchemyUserRepository
from .sqlalchemy_job_repository import SQLAlchemyJobRepository
from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository
from .sqlalchemy_booking_repository import SQLAlchemyBookingRepository
from .sqlalchemy_system_rates_repository import SQLAlchemySystemRatesRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyJobRepository",
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyBookingRepository",
    "SQLAlchemySystemRatesRepository",
]
