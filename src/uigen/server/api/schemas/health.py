"""Health check Pydantic schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(description="Server health status")
    version: str = Field(description="Server version")
    uptime_seconds: float = Field(description="Seconds since the app started")
    projects: int = Field(description="Number of stored projects")
