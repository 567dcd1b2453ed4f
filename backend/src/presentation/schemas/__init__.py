"""Pydantic schemas for request/response validation."""

from .common_schemas import HealthResponse, ErrorResponse
from .job_schemas import CreateJobRequest, JobResponse, ListingRequest
from .application_schemas import (
    ApplyRequest,
    ApplyResponse,
    ApplicationResponse,
    BookingResponse,
)
from .user_schemas import (
    CreateUserRequest,
    UpdateRoleRequest,
    UserResponse,
    SystemRatesResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "CreateJobRequest",
    "JobResponse",
    "ListingRequest",
    "ApplyRequest",
    "ApplyResponse",
    "ApplicationResponse",
    "BookingResponse",
    "CreateUserRequest",
    "UpdateRoleRequest",
    "UserResponse",
    "SystemRatesResponse",
]
