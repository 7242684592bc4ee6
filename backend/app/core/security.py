# app/core/security.py
"""
Security module for authentication and authorization.
Handles password hashing, JWT session tokens, and the Requester identity
that the content layer uses for visibility and mutation checks.
"""
import datetime as dt
from dataclasses import dataclass
from typing import Optional

import jwt  # PyJWT
from passlib.context import CryptContext

from app.config import settings

# Password hashing context (Argon2 only)
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

JWT_ALG = "HS256"  # HMAC SHA-256
ROLE_ADMIN = "admin"
ROLE_USER = "user"


@dataclass(frozen=True)
class Requester:
    """Identity of whoever is making a request: the session's user id and role."""
    id: str
    role: str = ROLE_USER

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


def is_admin(requester: Optional[Requester]) -> bool:
    """Anonymous requesters are never admins."""
    return requester is not None and requester.is_admin


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Returns a salted hash string, safe to store. Never store or log plain text.
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """Return True if `plain` matches the stored hash."""
    return pwd_context.verify(plain, hashed)

def create_access_token(user_id: str, role: str, name: str | None = None) -> str:
    """
    Create a JWT session token.

    The payload carries the user id, role and display name. Route
    dependencies re-read the role from the users table on every request.

    Token payload:
        - sub: user id
        - role: "user" or "admin"
        - name: display name (optional)
        - iat / exp: issued-at and expiry timestamps
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": user_id,
        "role": role,
        "iat": now,
        "exp": now + dt.timedelta(minutes=settings.access_token_expire_minutes),
    }
    if name:
        payload["name"] = name
    return jwt.encode(payload, settings.jwt_secret, algorithm=JWT_ALG)

def decode_access_token(token: str) -> dict:
    """
    Decode and validate a JWT session token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, settings.jwt_secret, algorithms=[JWT_ALG])

def requester_from_token(token: str) -> Requester:
    """Build a Requester from a token; raises jwt.InvalidTokenError if the token is bad."""
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if not user_id:
        raise jwt.InvalidTokenError("token has no subject")
    return Requester(id=str(user_id), role=payload.get("role", ROLE_USER))
