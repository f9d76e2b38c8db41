from typing import Optional
from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class SignupRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    refresh_token: Optional[str] = None


class CurrentAdmin(BaseModel):
    """Authenticated principal with a row in admin_users."""

    id: str
    email: str
    access_token: Optional[str] = None
