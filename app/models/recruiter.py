"""Models for recruiter-to-company ownership."""

from pydantic import BaseModel
from typing import Any, Optional
from enum import Enum


class DenialReason(str, Enum):
    """Why an ownership check failed."""
    NOT_A_RECRUITER = "not_a_recruiter"
    WRONG_COMPANY = "wrong_company"


class Recruiter(BaseModel):
    """Binds an authenticated user to the single company they may edit."""
    id: str
    company_id: Optional[Any] = None


class OwnershipResult(BaseModel):
    ok: bool
    reason: Optional[DenialReason] = None


class AuthenticatedUser(BaseModel):
    """Identity resolved from a verified bearer token."""
    id: str
    email: Optional[str] = None
