"""
Pydantic models for user data.

``UserCreate`` is the request body for registering a user,
``UserUpdate`` the partial body for updates and ``UserRead`` the
response shape.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    username: str = Field(..., examples=["ayla.demir"])
    email: str = Field(..., examples=["ayla.demir@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user."""
    pass


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided fields will be updated.
    """
    username: Optional[str] = None
    email: Optional[str] = None


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
