# =============================================================================
# core/services/auth_service.py - Admin Authentication
# =============================================================================
# Password sign-in through Supabase Auth, restricted to users whose row in
# public.users has role = 'admin'. A non-admin principal is signed out as
# soon as it is detected and rejected with UnauthorizedError.
# =============================================================================

import logging
from typing import Any, Callable

from supabase import Client

from app.exceptions import AuthenticationError, UnauthorizedError
from core.models.user import UserRole
from core.services.catalog_repository import CatalogRepository
from core.services.workflow import require_non_blank, workflow_boundary

logger = logging.getLogger(__name__)


class AuthService:
    """
    Admin sign-in, sign-out and role checks.

    Args:
        repository: Catalog repository (for the users table)
        admin_client: Service-role client, used to revoke sessions
        client_factory: Builds a fresh anon client per sign-in
    """

    def __init__(
        self,
        repository: CatalogRepository,
        admin_client: Client,
        client_factory: Callable[[], Client],
    ):
        self.repository = repository
        self.admin_client = admin_client
        self.client_factory = client_factory

    def is_admin(self, user_id: str) -> bool:
        return self.repository.users.get_role(user_id) == UserRole.ADMIN.value

    def revoke_session(self, access_token: str) -> None:
        """Terminate the session behind an access token. Failures are logged."""
        try:
            self.admin_client.auth.admin.sign_out(access_token)
            logger.info("Revoked session for non-admin principal")
        except Exception as e:
            logger.error(f"Failed to revoke session: {e}")

    def ensure_admin(self, user_id: str, access_token: str | None = None) -> None:
        """
        Reject a principal that is not an admin.

        Signs the session out first when its token is known.

        Raises:
            UnauthorizedError: If the user has no admin role
        """
        if self.is_admin(user_id):
            return

        logger.warning(f"Rejected non-admin user: {user_id}")
        if access_token:
            self.revoke_session(access_token)
        raise UnauthorizedError()

    def _discard_session(self, client: Client, email: str) -> None:
        """Sign out a session that must not be handed to the caller."""
        try:
            client.auth.sign_out()
        except Exception as e:
            logger.error(f"Failed to sign out {email}: {e}")

    @workflow_boundary("sign in")
    def sign_in(self, email: str, password: str) -> dict[str, Any]:
        """
        Sign in with email and password, admins only.

        Returns:
            Session tokens and the signed-in user's id/email
        """
        email = require_non_blank(email, "email")
        password = require_non_blank(password, "password")

        client = self.client_factory()
        try:
            response = client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.warning(f"Sign-in rejected for {email}: {e}")
            raise AuthenticationError(getattr(e, "message", None) or str(e))

        user = response.user
        session = response.session

        try:
            admin = self.is_admin(str(user.id))
        except Exception:
            self._discard_session(client, email)
            raise

        if not admin:
            logger.warning(f"Rejected non-admin sign-in: {email}")
            self._discard_session(client, email)
            raise UnauthorizedError()

        logger.info(f"Admin signed in: {email}")
        return {
            "access_token": session.access_token,
            "refresh_token": session.refresh_token,
            "expires_in": session.expires_in,
            "user": {"id": str(user.id), "email": user.email},
        }

    @workflow_boundary("sign out")
    def sign_out(self, access_token: str) -> dict[str, str]:
        self.admin_client.auth.admin.sign_out(access_token)
        return {"message": "Signed out successfully"}
