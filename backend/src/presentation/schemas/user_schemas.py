"""User profile and system rates Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from domain.enums import UserRole


class CreateUserRequest(BaseModel):
    """Request schema for registering a user after login."""
    
    id: str = Field(..., min_length=1, max_length=128, description="Id from the login provider")
    role: UserRole = Field(UserRole.LABOR)
    phone_number: Optional[str] = Field(None, max_length=50)
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "labor-7",
                    "role": "labor",
                    "phone_number": "+15550100"
                }
            ]
        }
    }


class UpdateRoleRequest(BaseModel):
    """Request schema for switching a user's role."""
    
    role: UserRole


class UserResponse(BaseModel):
    """Response schema for a user profile."""
    
    id: str
    role: UserRole
    phone_number: Optional[str] = None
    created_at: datetime
    
    model_config = {"from_attributes": True}


class SystemRatesResponse(BaseModel):
    """Response schema for the current wage rates."""
    
    min_wage_per_hour: Decimal
    last_updated: datetime
    
    model_config = {"from_attributes": True}
