"""SQLAlchemy ORM models."""

from .user_model import UserModel
from .job_model import JobModel
from .application_model import ApplicationModel
from .booking_model import BookingModel
from .system_rates_model import SystemRatesModel, LaborGuardModel

__all__ = [
    "UserModel",
    "JobModel",
    "ApplicationModel",
    "BookingModel",
    "SystemRatesModel",
    "LaborGuardModel",
]
