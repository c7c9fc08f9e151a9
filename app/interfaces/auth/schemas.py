"""
Pydantic schemas for the auth API request/response bodies.

Request fields are all optional strings: presence and shape rules are
enforced by the validation chains so that every client error surfaces
with the same message and status. No business logic belongs here.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request schema for the login endpoint."""

    username: Optional[str] = Field(default=None, description="Account identifier")
    password: Optional[str] = Field(default=None, description="Raw password")


class SignUpRequest(BaseModel):
    """Request schema for the sign-up endpoint."""

    username: Optional[str] = Field(default=None, description="Desired username (3-24 chars)")
    password: Optional[str] = Field(default=None, description="Raw password (min 8 chars)")
    email: Optional[str] = Field(default=None, description="Contact email address")


class CreatePortfolioRequest(BaseModel):
    """Request schema for the create-portfolio endpoint."""

    name: Optional[str] = Field(default=None, description="Portfolio name (max 50 chars)")


class ErrorItem(BaseModel):
    name: str
    message: str


class HttpBaseResponseSchema(BaseModel):
    """Body of every auth endpoint response."""

    status: int
    data: Optional[dict[str, Any]] = None
    error: Optional[ErrorItem] = None
    message: Optional[str] = None
