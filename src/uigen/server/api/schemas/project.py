"""Project-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ProjectCreateRequest(BaseModel):
    """Request model for creating a project."""

    name: str = Field(description="Human-readable project name")
    messages: list[dict[str, Any]] = Field(
        default_factory=list, description="Chat history, oldest first"
    )
    data: dict[str, Any] = Field(
        default_factory=dict, description="Serialized virtual file system"
    )


class ProjectResponse(BaseModel):
    """Response model for project details."""

    id: str = Field(description="Unique project identifier")
    name: str = Field(description="Human-readable project name")
    messages: list[dict[str, Any]] = Field(default_factory=list)
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(description="When the project was created")
    updated_at: datetime = Field(description="When the project was last updated")


class ProjectListResponse(BaseModel):
    """Response model for listing projects."""

    projects: list[ProjectResponse] = Field(default_factory=list)
    total: int = Field(description="Total number of projects")
