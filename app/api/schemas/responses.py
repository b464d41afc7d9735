"""Shared response schemas for API endpoints."""

from pydantic import BaseModel
from typing import Dict, List


class ValidationErrorDetail(BaseModel):
    """Flattened validation failure: payload-level and per-field messages."""
    formErrors: List[str] = []
    fieldErrors: Dict[str, List[str]] = {}


class HealthResponse(BaseModel):
    ok: bool
