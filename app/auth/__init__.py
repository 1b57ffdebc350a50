# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# JWT-based authentication using Supabase Auth, plus the admin gate that
# every catalog route sits behind.
#
# Usage:
#   from app.auth import require_admin, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(require_admin)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import get_current_user, require_admin
from app.auth.models import AuthUser, SignInRequest, UserResponse

__all__ = [
    "get_current_user",
    "require_admin",
    "AuthUser",
    "SignInRequest",
    "UserResponse",
]
