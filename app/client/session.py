"""Explicit, per-call credentials for the careers client."""

import logging
from typing import Dict, Optional

import httpx
from pydantic import BaseModel

from app.client.errors import ApiError, error_from_response
from app.config import ClientSettings

logger = logging.getLogger(__name__)


class RequestContext(BaseModel):
    """Credentials for one signed-in recruiter, passed into every call.

    Attributes:
        access_token: Bearer token issued by the identity service.
        user_email: Email of the signed-in user, used for slug resolution.
        user_id: Identity service user id.
    """
    access_token: str
    user_email: Optional[str] = None
    user_id: Optional[str] = None

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}


def resolve_company_slug(
    email: Optional[str],
    slug_map: Dict[str, str],
    default_slug: str = ""
) -> str:
    """Pick the company slug for a user from their email domain.

    Args:
        email: User email; may be None.
        slug_map: Lower-case email domain to company slug.
        default_slug: Used when the domain is unknown.

    Returns:
        Resolved slug, or "" when nothing matches and no default is set.
    """
    domain = email.split("@")[1].lower() if email and "@" in email else None
    return (domain and slug_map.get(domain)) or default_slug or ""


def sign_in_with_password(
    settings: ClientSettings,
    email: str,
    password: str,
    http_client: Optional[httpx.Client] = None
) -> RequestContext:
    """Exchange email and password for an access token.

    Args:
        settings: Client settings carrying the backend URL and anon key.
        email: User email.
        password: User password.
        http_client: Optional client to reuse (tests inject a mock transport).

    Returns:
        RequestContext for the signed-in user.

    Raises:
        ApiError: If the backend is not configured or rejects the credentials.
    """
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise ApiError(None, "Missing SUPABASE_URL or SUPABASE_ANON_KEY.")

    client = http_client or httpx.Client()
    try:
        response = client.post(
            f"{settings.supabase_url.rstrip('/')}/auth/v1/token",
            params={"grant_type": "password"},
            headers={"apikey": settings.supabase_anon_key},
            json={"email": email, "password": password},
        )
    except httpx.RequestError as error:
        raise ApiError(None, str(error) or "Request failed.")
    finally:
        if http_client is None:
            client.close()

    if response.is_error:
        raise error_from_response(response)

    payload = response.json()
    user = payload.get("user") or {}
    if not payload.get("access_token"):
        raise ApiError(response.status_code, "Sign-in response did not include an access token.")

    logger.info(f"Signed in as {user.get('email') or email}")
    return RequestContext(
        access_token=payload["access_token"],
        user_email=user.get("email") or email,
        user_id=user.get("id"),
    )
