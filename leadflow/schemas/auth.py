"""
Authentication schemas.
"""
import uuid
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from leadflow.core.security import BCRYPT_MAX_BYTES, password_too_long
from leadflow.models.enums import Role
from leadflow.schemas.common import CamelModel
from leadflow.schemas.user import UserResponse


def check_password_bytes(value: str) -> str:
    if password_too_long(value):
        raise ValueError(f"cannot be longer than {BCRYPT_MAX_BYTES} bytes")
    return value


class RegisterRequest(CamelModel):
    """User registration request."""
    email: EmailStr
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: Role = Role.REP

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)

    class Config:
        json_schema_extra = {
            "example": {
                "email": "rep@example.com",
                "password": "password123",
                "name": "John Rep",
                "role": "rep"
            }
        }


class LoginRequest(CamelModel):
    """User login request."""
    email: EmailStr
    password: str

    class Config:
        json_schema_extra = {
            "example": {
                "email": "rep@example.com",
                "password": "password123"
            }
        }


class AuthResponse(CamelModel):
    """Token and user returned by register and login."""
    token: str
    user: UserResponse


class ChangePasswordRequest(CamelModel):
    """Change password for logged-in user."""
    current_password: str
    new_password: str = Field(min_length=1)

    @field_validator("new_password")
    @classmethod
    def new_password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class Principal(BaseModel):
    """
    Authenticated identity attached to a request.
    Rebuilt from token claims on every request, never stored.
    """
    id: uuid.UUID
    email: str
    name: Optional[str] = None
    role: Role

    class Config:
        frozen = True
