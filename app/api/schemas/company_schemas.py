"""Request and response schemas for company endpoints."""

from pydantic import BaseModel, AnyUrl, TypeAdapter, ValidationError, field_validator
from typing import Any, Dict, List, Optional

_url_adapter = TypeAdapter(AnyUrl)


class UpdateCompanyRequest(BaseModel):
    """Patch accepted by the recruiter update endpoint.

    theme and sections are stored as given; culture_video_url may be
    omitted, null, empty (stored as null) or a valid URL.
    """
    theme: Optional[Dict[str, Any]] = None
    sections: Optional[List[Any]] = None
    culture_video_url: Optional[str] = None

    @field_validator("theme", "sections", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Defaults are not validated, so only an explicit null lands here
        if value is None:
            raise ValueError("Expected a value, received null")
        return value

    @field_validator("culture_video_url", mode="before")
    @classmethod
    def normalize_video_url(cls, value: Any) -> Any:
        if value == "":
            return None
        if value is None:
            return value
        if not isinstance(value, str):
            raise ValueError("Expected string")
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("Invalid url")
        return value

    def to_updates(self) -> Dict[str, Any]:
        """Fields the caller actually sent, ready to write."""
        return self.model_dump(exclude_unset=True)


class CompanyResponse(BaseModel):
    """Success envelope for company endpoints."""
    company: Dict[str, Any]
