"""Auth-related Pydantic schemas."""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Request model for sign-in and sign-up."""

    email: str = Field(description="Account email address")
    password: str = Field(description="Account password")


class AuthResultResponse(BaseModel):
    """Outcome of a credential check."""

    success: bool
    error: str | None = None
