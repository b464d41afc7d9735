"""HTTP client for the careers page API."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.client.errors import ApiError, error_from_response
from app.client.session import RequestContext

logger = logging.getLogger(__name__)


def normalize_company(data: Any) -> Optional[Dict[str, Any]]:
    """Accept both {"company": {...}} and a bare company body."""
    if not data or not isinstance(data, dict):
        return None
    if "company" in data:
        company = data.get("company")
        return company if isinstance(company, dict) else None
    return data


class CareersApiClient:
    """Thin wrapper over the public and recruiter endpoints.

    Authenticated calls take a RequestContext argument; the client itself
    holds no credentials.

    Attributes:
        http_client: Underlying httpx client bound to the API base URL.
    """

    def __init__(self, base_url: str, http_client: Optional[httpx.Client] = None):
        """Initialize the client.

        Args:
            base_url: API base URL, e.g. "http://localhost:9000".
            http_client: Optional preconfigured httpx client (must carry base_url).
        """
        self.http_client = http_client or httpx.Client(base_url=base_url)

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> "CareersApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        context: Optional[RequestContext] = None,
        **kwargs
    ) -> Any:
        headers = context.auth_headers() if context else {}
        try:
            response = self.http_client.request(method, path, headers=headers, **kwargs)
        except httpx.RequestError as error:
            logger.error(f"{method} {path} failed: {error}")
            raise ApiError(None, str(error) or "Request failed.")

        if response.is_error:
            raise error_from_response(response)
        return response.json() if response.content else None

    # Public endpoints
    def get_public_company(self, slug: str) -> Optional[Dict[str, Any]]:
        return normalize_company(self._request("GET", f"/api/public/company/{slug}"))

    def get_public_jobs(
        self,
        slug: str,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        q: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Fetch a published company's jobs. Empty filters are not sent."""
        params = {
            key: value
            for key, value in (("location", location), ("jobType", job_type), ("q", q))
            if value
        }
        data = self._request("GET", f"/api/public/company/{slug}/jobs", params=params)
        jobs = data.get("jobs") if isinstance(data, dict) else None
        return jobs if isinstance(jobs, list) else []

    # Recruiter endpoints
    def get_company(self, slug: str, context: RequestContext) -> Optional[Dict[str, Any]]:
        return normalize_company(
            self._request("GET", f"/api/recruiter/company/{slug}", context)
        )

    def update_company(
        self,
        slug: str,
        payload: Dict[str, Any],
        context: RequestContext
    ) -> Optional[Dict[str, Any]]:
        return normalize_company(
            self._request("PUT", f"/api/recruiter/company/{slug}", context, json=payload)
        )

    def publish_company(self, slug: str, context: RequestContext) -> Optional[Dict[str, Any]]:
        return normalize_company(
            self._request("POST", f"/api/recruiter/company/{slug}/publish", context)
        )

    def unpublish_company(self, slug: str, context: RequestContext) -> Optional[Dict[str, Any]]:
        return normalize_company(
            self._request("POST", f"/api/recruiter/company/{slug}/unpublish", context)
        )
