"""Job posting Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from domain.enums import JobStatus, WageType


class CreateJobRequest(BaseModel):
    """Request schema for publishing a posting."""
    
    supervisor_id: str = Field(..., min_length=1, max_length=128, description="Posting owner")
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=5000)
    location_name: str = Field(..., min_length=1, max_length=200)
    location_details: Optional[str] = Field(None, max_length=500)
    work_type: Optional[str] = Field(None, max_length=100)
    wage_type: WageType = Field(..., description="hourly or daily")
    wage_amount: Decimal = Field(..., ge=0, description="Offered wage")
    required_date: date = Field(..., description="Day the work happens")
    start_time: Optional[str] = Field(None, max_length=20)
    end_time: Optional[str] = Field(None, max_length=20)
    duration_hours: float = Field(..., gt=0, le=24)
    laborers_required: int = Field(..., ge=1)
    supervisor_name: Optional[str] = Field(None, max_length=200)
    supervisor_phone: Optional[str] = Field(None, max_length=50)
    expires_at: Optional[datetime] = Field(None, description="Defaults to seven days after creation")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "supervisor_id": "sup-42",
                    "title": "Site cleanup",
                    "description": "Clear debris from the ground floor",
                    "location_name": "Riverside Tower",
                    "wage_type": "daily",
                    "wage_amount": "600",
                    "required_date": "2026-03-02",
                    "start_time": "08:00",
                    "end_time": "16:00",
                    "duration_hours": 8,
                    "laborers_required": 3
                }
            ]
        }
    }


class JobResponse(BaseModel):
    """Response schema for a posting."""
    
    id: UUID
    supervisor_id: str
    title: str
    description: str
    location_name: str
    location_details: Optional[str] = None
    work_type: Optional[str] = None
    wage_type: WageType
    wage_amount: Decimal
    required_date: date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration_hours: float
    laborers_required: int
    laborers_applied: int
    supervisor_name: Optional[str] = None
    supervisor_phone: Optional[str] = None
    status: JobStatus
    is_listed: bool
    created_at: datetime
    expires_at: datetime
    
    model_config = {"from_attributes": True}


class ListingRequest(BaseModel):
    """Request schema for showing or hiding a posting."""
    
    is_listed: bool = Field(..., description="Whether the posting appears in the feed")
