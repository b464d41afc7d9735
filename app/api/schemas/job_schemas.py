"""Request and response schemas for job endpoints."""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class JobFilters(BaseModel):
    """Optional narrowing of a public job listing; filters are ANDed."""
    location: Optional[str] = None
    job_type: Optional[str] = None
    q: Optional[str] = None


class JobsResponse(BaseModel):
    """Success envelope for the job listing endpoint."""
    jobs: List[Dict[str, Any]]
