# app/core/bootstrap.py
"""
Bootstrap module for application initialization.
Handles initial setup tasks such as creating a default admin on first startup.
"""
import logging
from app.config import settings
from app.models.user import User
from app.core.security import hash_password, ROLE_ADMIN, ROLE_USER

logger = logging.getLogger("uvicorn.error")

async def role_for_new_user() -> str:
    """
    Role a newly registered account receives.
    The very first account becomes the admin; everybody after that is a regular user.
    """
    has_users = await User.all().exists()
    return ROLE_USER if has_users else ROLE_ADMIN

async def ensure_default_admin() -> None:
    """
    If no admin exists, create one from the ADMIN_* environment variables.
    Only takes effect when:
      - no user with role="admin" exists
      - and ADMIN_PASSWORD is set (never fall back to a default password)
    Environment variables:
      ADMIN_NAME     (default: "Admin")
      ADMIN_EMAIL    (default: "admin@example.com")
      ADMIN_PASSWORD (required, otherwise nothing is created)
    """
    if await User.filter(role=ROLE_ADMIN).exists():
        return

    if not settings.admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    if await User.filter(email=settings.admin_email).exists():
        # The address belongs to a regular account; promoting it silently would be surprising
        logger.warning("[bootstrap] ADMIN_EMAIL %s is already registered as a regular user -> skip.",
                       settings.admin_email)
        return

    u = await User.create(
        name=settings.admin_name,
        email=settings.admin_email,
        password_hash=hash_password(settings.admin_password),
        role=ROLE_ADMIN,
    )
    logger.warning("[bootstrap] Created default admin -> email=%s id=%s", u.email, u.id)
