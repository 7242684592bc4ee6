# app/api/v1/routers/auth.py
import logging
from fastapi import APIRouter, HTTPException, Response, status, Depends
from app.core.bootstrap import role_for_new_user
from app.core.security import verify_password, create_access_token, hash_password
from app.api.v1.deps import get_current_user
from app.models.user import User
from app.schemas.auth import RegisterIn, LoginRequest

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_to_dict(u: User) -> dict:
    return {"id": str(u.id), "name": u.name, "email": u.email, "role": u.role}


@router.post("/register")
async def register(body: RegisterIn):
    """
    Register a new user account.

    The first account ever created is promoted to admin; every later one is
    a regular user. Email must be unique.

    Returns:
        dict: {"success": True, "data": user} or
              {"success": False, "error": {"code", "message"}}

    Error codes:
        - EMAIL_EXISTS: Email already registered
    """
    email = body.email.lower()
    if await User.get_or_none(email=email):
        return {"success": False, "error": {"code": "EMAIL_EXISTS", "message": "User with this email already exists"}}

    role = await role_for_new_user()
    u = await User.create(
        name=body.name.strip(),
        email=email,
        password_hash=hash_password(body.password),
        role=role,
    )
    logger.info("[auth] registered user id=%s role=%s", u.id, u.role)
    return {"success": True, "data": _user_to_dict(u)}

@router.post("/login")
async def login(payload: LoginRequest, response: Response):
    """
    Authenticate with email and password.

    The JWT is returned in the body and also set as the HttpOnly
    "accessToken" cookie for browser clients.

    Raises:
        HTTPException (401): AUTH_INVALID_CREDENTIALS
    """
    user = await User.get_or_none(email=payload.email.lower())
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Incorrect email or password"})
    token = create_access_token(str(user.id), user.role, user.name)
    response.set_cookie("accessToken", token, httponly=True, secure=False, samesite="lax")
    return {"success": True, "data": {"user": _user_to_dict(user), "accessToken": token}}

@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    """Current signed-in user."""
    return {"success": True, "data": _user_to_dict(user)}

@router.post("/logout")
async def logout(response: Response):
    """
    Clear the accessToken cookie.

    Note: the JWT itself stays valid until it expires.
    """
    response.delete_cookie("accessToken")
    return {"success": True}
