"""Factory for the managed backend (Supabase) client."""

from functools import lru_cache

from supabase import create_client, Client, ClientOptions

from app.config import get_server_settings


@lru_cache()
def get_supabase_client() -> Client:
    """Create the privileged backend client once per process.

    Raises:
        RuntimeError: If the backend URL or service role key is not configured.
    """
    settings = get_server_settings()
    if not settings.supabase_url:
        raise RuntimeError("Missing SUPABASE_URL in environment")
    if not settings.supabase_service_role_key:
        raise RuntimeError("Missing SUPABASE_SERVICE_ROLE_KEY in environment")

    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(schema=settings.db_schema),
    )
