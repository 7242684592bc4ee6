# app/api/v1/deps.py
import jwt
from fastapi import Depends, Header, HTTPException, Request, status
from app.core.security import Requester, requester_from_token
from app.models.user import User


def _extract_token(request: Request, authorization: str | None) -> str | None:
    # 1) Authorization: Bearer xxx, 2) HttpOnly cookie accessToken
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        if token:
            return token
    return request.cookies.get("accessToken")


async def get_requester(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Requester | None:
    """
    Session identity for read and content routes.

    Returns None for anonymous visitors, for unusable tokens and for tokens
    whose user no longer exists, so public pages keep working with a stale
    cookie. The role is read from the users table, not from the token, so a
    demoted admin loses write access immediately.
    """
    token = _extract_token(request, authorization)
    if not token:
        return None
    try:
        claimed = requester_from_token(token)
    except jwt.InvalidTokenError:
        return None

    user = await User.get_or_none(id=claimed.id)
    if not user:
        return None
    return Requester(id=str(user.id), role=user.role)


async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from the database.

    Raises:
        HTTPException (401): AUTH_REQUIRED, AUTH_INVALID_TOKEN or AUTH_USER_NOT_FOUND
    """
    token = _extract_token(request, authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_REQUIRED")

    try:
        requester = requester_from_token(token)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_INVALID_TOKEN")

    user = await User.get_or_none(id=requester.id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_USER_NOT_FOUND")
    return user


async def require_admin(current: User = Depends(get_current_user)) -> User:
    """
    FastAPI dependency to ensure the current user is an administrator.

    Raises:
        HTTPException (403): FORBIDDEN_ADMIN_ONLY
        HTTPException (401): from get_current_user
    """
    if getattr(current, "role", "user") != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="FORBIDDEN_ADMIN_ONLY")
    return current
