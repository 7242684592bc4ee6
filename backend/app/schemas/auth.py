# app/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration, login and user information.
"""
from pydantic import BaseModel, EmailStr, Field

class RegisterIn(BaseModel):
    """
    Request model for account registration.
    The first account ever registered becomes the admin.
    """
    name: str = Field(min_length=1)  # Display name shown as post/article author
    email: EmailStr  # Login identifier, unique across users
    password: str = Field(min_length=6)  # Plain text, hashed server-side

class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    email: EmailStr
    password: str

class UserOut(BaseModel):
    """
    User information returned by auth endpoints.
    Never includes the password hash.
    """
    id: str
    name: str
    email: str
    role: str = "user"  # "user" or "admin"

class LoginResponse(BaseModel):
    """
    Response model for successful login.
    Returns user information and the session token.
    """
    user: UserOut
    accessToken: str  # JWT also set as the HttpOnly accessToken cookie
