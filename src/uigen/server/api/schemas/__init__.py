"""Pydantic schemas for the uigen API."""

from .health import HealthResponse
from .project import ProjectCreateRequest, ProjectResponse, ProjectListResponse
from .auth import CredentialsRequest, AuthResultResponse

__all__ = [
    "HealthResponse",
    "ProjectCreateRequest",
    "ProjectResponse",
    "ProjectListResponse",
    "CredentialsRequest",
    "AuthResultResponse",
]
