"""Pydantic schemas for authentication."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Schema for admin login.

    The password is optional at the schema level so a missing value is
    reported as a 400 with the usual ``{"error": ...}`` body.
    """

    password: str | None = None


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    success: bool = True
    token: str
    expiresIn: int


class VerifyResponse(BaseModel):
    """Schema for token verification."""

    valid: bool
