"""Environment-driven settings for the API server and the careers client."""

import json
import logging
import os
from functools import lru_cache
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from app.constants import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_API_BASE_URL,
    DEFAULT_DB_SCHEMA,
    DEFAULT_PORT,
)

load_dotenv()

logger = logging.getLogger(__name__)


class ServerSettings(BaseModel):
    """Settings consumed by the API process.

    Attributes:
        supabase_url: Base URL of the managed backend.
        supabase_service_role_key: Privileged key used for all table access.
        db_schema: Postgres schema holding the companies/jobs/recruiters tables.
        port: Listening port for uvicorn.
        allowed_origins: Origins allowed to make (credentialed) cross-origin calls.
        log_level: Root log level name.
    """
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    db_schema: str = DEFAULT_DB_SCHEMA
    port: int = DEFAULT_PORT
    allowed_origins: List[str] = DEFAULT_ALLOWED_ORIGINS
    log_level: str = "INFO"


class ClientSettings(BaseModel):
    """Settings consumed by the careers client (editor and renderer)."""
    api_base_url: str = DEFAULT_API_BASE_URL
    company_slug_map: Dict[str, str] = {}
    default_company_slug: str = ""
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None


def parse_origins(raw: Optional[str]) -> List[str]:
    """Split a comma separated origin list, dropping blanks."""
    if not raw:
        return list(DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def parse_slug_map(raw: Optional[str]) -> Dict[str, str]:
    """Parse the email-domain to company-slug map.

    Invalid JSON or a non-object value yields an empty map.
    """
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("COMPANY_SLUG_MAP is not valid JSON; ignoring it")
        return {}
    if not isinstance(parsed, dict):
        return {}
    return {str(domain).lower(): str(slug) for domain, slug in parsed.items()}


@lru_cache()
def get_server_settings() -> ServerSettings:
    return ServerSettings(
        supabase_url=os.environ.get("SUPABASE_URL"),
        supabase_service_role_key=os.environ.get("SUPABASE_SERVICE_ROLE_KEY"),
        db_schema=os.environ.get("SUPABASE_SCHEMA", DEFAULT_DB_SCHEMA),
        port=int(os.environ.get("PORT", DEFAULT_PORT)),
        allowed_origins=parse_origins(os.environ.get("CORS_ALLOWED_ORIGINS")),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )


def get_client_settings() -> ClientSettings:
    return ClientSettings(
        api_base_url=os.environ.get("API_BASE_URL", DEFAULT_API_BASE_URL),
        company_slug_map=parse_slug_map(os.environ.get("COMPANY_SLUG_MAP")),
        default_company_slug=os.environ.get("COMPANY_SLUG", ""),
        supabase_url=os.environ.get("SUPABASE_URL"),
        supabase_anon_key=os.environ.get("SUPABASE_ANON_KEY"),
    )
