"""Pydantic models for the careers page application."""

from app.models.company import CompanyStatus, SectionType, Theme, Section
from app.models.job import Job
from app.models.recruiter import (
    DenialReason,
    Recruiter,
    OwnershipResult,
    AuthenticatedUser
)

__all__ = [
    "CompanyStatus",
    "SectionType",
    "Theme",
    "Section",
    "Job",
    "DenialReason",
    "Recruiter",
    "OwnershipResult",
    "AuthenticatedUser"
]
