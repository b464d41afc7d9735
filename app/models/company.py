"""Pydantic models for company careers pages."""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union
from enum import Enum


class CompanyStatus(str, Enum):
    """Publish state of a careers page."""
    DRAFT = "draft"
    PUBLISHED = "published"


class SectionType(str, Enum):
    """Kinds of content block a careers page can hold."""
    ABOUT = "about"
    VALUES = "values"
    PERKS = "perks"
    CULTURE = "culture"
    FAQ = "faq"

    @property
    def is_enumerable(self) -> bool:
        """Whether content is a list of items rather than free text."""
        return self is SectionType.PERKS


class Theme(BaseModel):
    """Branding for a careers page. Every field is optional."""
    primaryColor: Optional[str] = None
    accentColor: Optional[str] = None
    logoUrl: Optional[str] = None
    bannerUrl: Optional[str] = None
    font: Optional[str] = None


class Section(BaseModel):
    """One content block on a careers page.

    Attributes:
        id: Identifier, unique within the owning company's section list.
        type: Section kind.
        title: Heading; empty means "use the type as heading".
        content: Free text, or a list of items for enumerable types.
        order: 1-based display position, recomputed on every save.
    """
    id: str
    type: SectionType = SectionType.ABOUT
    title: str = ""
    content: Union[str, List[str]] = ""
    order: int = 0

    model_config = ConfigDict(use_enum_values=True, validate_default=True)
