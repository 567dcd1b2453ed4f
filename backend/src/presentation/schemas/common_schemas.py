"""Shared Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")
    weekly_hour_limit: float = Field(..., description="Weekly hour cap per worker")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "production",
                    "weekly_hour_limit": 50
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Body returned for every refused or failed operation."""
    
    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Message safe to show to users")
    projected_hours: Optional[float] = Field(None, description="Weekly total the job would lead to")
    limit: Optional[float] = Field(None, description="Weekly hour limit")
    minimum: Optional[str] = Field(None, description="Minimum wage for the posting")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "error": "safety_limit_exceeded",
                    "message": (
                        "Health Safety Warning: This job would put you at 51 hours "
                        "this week. The limit is 50 hours."
                    ),
                    "projected_hours": 51,
                    "limit": 50
                }
            ]
        }
    }
