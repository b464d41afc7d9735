"""Pydantic models for published job listings."""

from pydantic import BaseModel, field_validator
from typing import Any, Optional
from datetime import datetime


class Job(BaseModel):
    """A job opening as shown to public visitors.

    Jobs are created outside this system and are read-only here.
    """
    id: str
    title: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    department: Optional[str] = None
    level: Optional[str] = None
    work_mode: Optional[str] = None
    salary_text: Optional[str] = None
    slug: Optional[str] = None
    posted_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        """Ids are opaque; integer keys are shown as text."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
