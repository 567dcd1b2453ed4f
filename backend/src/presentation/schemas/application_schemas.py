"""Application and booking Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from domain.enums import ApplicationStatus, BookingStatus


class ApplyRequest(BaseModel):
    """Request schema for applying to (or directly booking) a posting."""
    
    labor_id: str = Field(..., min_length=1, max_length=128, description="Applying worker")
    
    model_config = {
        "json_schema_extra": {
            "examples": [{"labor_id": "labor-7"}]
        }
    }


class ApplicationResponse(BaseModel):
    """Response schema for an application."""
    
    id: UUID
    job_id: UUID
    labor_id: str
    supervisor_id: str
    status: ApplicationStatus
    applied_at: datetime
    
    model_config = {"from_attributes": True}


class BookingResponse(BaseModel):
    """Response schema for a booking."""
    
    id: UUID
    job_id: UUID
    labor_id: str
    supervisor_id: str
    application_id: Optional[UUID] = None
    job_title: str
    location_name: str
    job_date: date
    duration_hours: float
    wage_amount: Decimal
    status: BookingStatus
    created_at: datetime
    
    model_config = {"from_attributes": True}


class ApplyResponse(BaseModel):
    """Response schema for a successful application."""
    
    success: bool = Field(True)
    message: str = Field(..., description="Message shown to the worker")
    booking: BookingResponse
    application: Optional[ApplicationResponse] = None
    laborers_applied: Optional[int] = Field(None, description="Applied count after this booking")
    
    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "message": "Job booked successfully! You're all set.",
                    "laborers_applied": 2
                }
            ]
        }
    }
