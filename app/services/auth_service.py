"""Bearer token verification against the backend identity service."""

import logging

from supabase import Client, AuthError

from app.exceptions import InternalError, UnauthenticatedError
from app.models.recruiter import AuthenticatedUser

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str) -> str:
    """Pull the token out of an ``Authorization: Bearer <token>`` header.

    Raises:
        UnauthenticatedError: If the header is missing or not a bearer header.
    """
    header = authorization or ""
    token = header[len(BEARER_PREFIX):] if header.startswith(BEARER_PREFIX) else ""
    if not token:
        raise UnauthenticatedError("Missing Bearer token")
    return token


class AuthService:
    """Resolves bearer tokens to user identities.

    Only authentication happens here; authorization lives in OwnershipService.

    Attributes:
        db_client: Supabase client whose auth API verifies tokens.
    """

    def __init__(self, db_client: Client):
        self.db_client = db_client

    def verify_token(self, token: str) -> AuthenticatedUser:
        """Verify a token and return the user it belongs to.

        Args:
            token: Raw bearer token.

        Returns:
            AuthenticatedUser for the token's owner.

        Raises:
            UnauthenticatedError: If the identity service rejects the token
                or knows no user for it.
            InternalError: If verification fails for any other reason.
        """
        try:
            response = self.db_client.auth.get_user(token)
        except AuthError as error:
            logger.info(f"Token rejected by identity service: {error}")
            raise UnauthenticatedError("Invalid token")
        except Exception as error:
            logger.error(f"Token verification failed: {error}")
            raise InternalError("Auth middleware failed")

        user = getattr(response, "user", None) if response else None
        if user is None:
            raise UnauthenticatedError("Invalid token")

        return AuthenticatedUser(id=str(user.id), email=getattr(user, "email", None))
