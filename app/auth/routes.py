# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Admin sign-in/sign-out and identity lookup. Non-admin accounts are signed
# out and rejected at sign-in.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user, require_admin
from app.auth.models import AuthUser, SignInRequest, UserResponse
from app.dependencies import AuthServiceDep
from app.responses import envelope_response
from core.models.user import UserRole

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/sign-in")
async def sign_in(request: SignInRequest, auth_service: AuthServiceDep):
    """
    Sign in with email and password.

    Returns session tokens on success. Accounts without the admin role
    are signed out immediately and get a 403.
    """
    return envelope_response(auth_service.sign_in(request.email, request.password))


@router.post("/sign-out")
async def sign_out(
    auth_service: AuthServiceDep,
    user: AuthUser = Depends(get_current_user),
):
    """Revoke the current session."""
    return envelope_response(auth_service.sign_out(user.access_token))


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(require_admin),
) -> UserResponse:
    """
    Get the current admin's identity.

    Raises:
        401: If not authenticated
        403: If the user is not an admin
    """
    return UserResponse(id=user.id, email=user.email, role=UserRole.ADMIN.value)
