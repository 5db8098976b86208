"""Pydantic schemas for authentication endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserBase(BaseModel):
    """Public user fields."""

    email: EmailStr
    username: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=100)


class UserCreate(UserBase):
    """Schema for creating a user (seeding and service use)."""

    password: str = Field(..., min_length=8, description="Plain text password")


class UserLogin(BaseModel):
    """Login credentials."""

    email: EmailStr
    password: str = Field(..., min_length=8, description="Password must be at least 8 characters long")


class UserResponse(BaseModel):
    """Public user projection. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    username: str
    name: str


class LoginResponse(BaseModel):
    """Body returned by POST /auth/login. Tokens travel only in cookies."""

    user: UserResponse


class MessageResponse(BaseModel):
    """Generic acknowledgement body."""

    message: str
