"""Recruiter-side draft of a careers page.

The editor keeps theme, sections and the culture video URL locally. Nothing
reaches the server until save(), which sends the whole draft as one update
and overwrites whatever is stored (last save wins).
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from app.client.api_client import CareersApiClient
from app.client.errors import ApiError
from app.client.session import RequestContext
from app.constants import DEFAULT_ACCENT_COLOR, DEFAULT_FONT, DEFAULT_PRIMARY_COLOR
from app.models.company import Section, SectionType, Theme

logger = logging.getLogger(__name__)

SECTION_TYPES = {section_type.value for section_type in SectionType}


def default_theme() -> Theme:
    return Theme(
        primaryColor=DEFAULT_PRIMARY_COLOR,
        accentColor=DEFAULT_ACCENT_COLOR,
        logoUrl="",
        bannerUrl="",
        font=DEFAULT_FONT,
    )


def merge_theme(current: Theme, incoming: Any) -> Theme:
    """Take each theme field from incoming when set, else keep current."""
    incoming = incoming if isinstance(incoming, dict) else {}
    merged = {
        field: str(incoming[field]) if incoming.get(field) is not None else value
        for field, value in current.model_dump().items()
    }
    return Theme(**merged)


def _coerce_content(content: Any) -> Any:
    if isinstance(content, list):
        return [str(item) for item in content]
    if content is None:
        return ""
    return content if isinstance(content, str) else str(content)


def normalize_sections(raw_sections: Any, fallback: List[Section]) -> List[Section]:
    """Turn loosely shaped section dicts from the server into Sections.

    Args:
        raw_sections: Value of the company's "sections" field.
        fallback: Returned unchanged when raw_sections is not a list.
    """
    if not isinstance(raw_sections, list):
        return fallback

    sections = []
    for index, raw in enumerate(raw_sections):
        raw = raw if isinstance(raw, dict) else {}
        raw_type = raw.get("type")
        section_type = raw_type if raw_type in SECTION_TYPES else SectionType.ABOUT.value
        order = raw.get("order")
        sections.append(Section(
            id=str(raw.get("id") or f"{raw_type or 'section'}-{index}"),
            type=section_type,
            title=str(raw.get("title") or ""),
            content=_coerce_content(raw.get("content")),
            order=order if isinstance(order, int) and not isinstance(order, bool) else index + 1,
        ))
    return sections


def perks_from_text(text: str) -> List[str]:
    """One perk per line; blank lines dropped, whitespace trimmed."""
    return [line.strip() for line in text.split("\n") if line.strip()]


class SectionEditor:
    """Local, single-user draft of one company's page.

    Attributes:
        api_client: Client for the recruiter endpoints.
        context: Credentials passed to every call.
        slug: Slug of the company being edited.
        company: Last company record received from the server.
        theme: Draft branding.
        sections: Draft sections in display order.
        culture_video_url: Draft culture video URL ("" when unset).
    """

    def __init__(self, api_client: CareersApiClient, context: RequestContext, slug: str):
        self.api_client = api_client
        self.context = context
        self.slug = slug
        self.company: Optional[Dict[str, Any]] = None
        self.theme = default_theme()
        self.sections: List[Section] = []
        self.culture_video_url = ""

    def load(self) -> Optional[Dict[str, Any]]:
        """Fetch the company and replace the local draft with it.

        Raises:
            ApiError: If no slug was resolved or the request fails.
        """
        if not self.slug:
            raise ApiError(400, "Company slug could not be resolved.")

        company = self.api_client.get_company(self.slug, self.context)
        self._apply(company, fallback_sections=[])
        return company

    def _apply(self, company: Optional[Dict[str, Any]], fallback_sections: List[Section]) -> None:
        self.company = company
        company = company or {}
        self.theme = merge_theme(self.theme, company.get("theme"))
        self.sections = normalize_sections(company.get("sections"), fallback_sections)
        if "culture_video_url" in company:
            self.culture_video_url = company.get("culture_video_url") or ""

    def add_section(self, section_type: SectionType) -> Section:
        """Append an empty section of the given type."""
        section_type = SectionType(section_type)
        section = Section(
            id=f"{section_type.value}-{uuid.uuid4().hex}",
            type=section_type,
            title="",
            content=[] if section_type.is_enumerable else "",
            order=len(self.sections) + 1,
        )
        self.sections.append(section)
        return section

    def delete_section(self, index: int) -> None:
        """Remove the section at index. Orders are fixed up on save."""
        del self.sections[index]

    def reorder(self, from_index: Optional[int], to_index: int) -> None:
        """Move one section to a new position."""
        if from_index is None or from_index == to_index:
            return
        moved = self.sections.pop(from_index)
        self.sections.insert(to_index, moved)

    def edit_field(self, index: int, **update: Any) -> Section:
        """Merge a partial update into the section at index."""
        section = Section.model_validate({**self.sections[index].model_dump(), **update})
        self.sections[index] = section
        return section

    def content_text(self, index: int) -> str:
        """Section content as shown in a text box."""
        section = self.sections[index]
        if SectionType(section.type).is_enumerable:
            return "\n".join(section.content) if isinstance(section.content, list) else ""
        return section.content if isinstance(section.content, str) else ""

    def set_content_text(self, index: int, text: str) -> Section:
        """Store text typed into a section's content box."""
        if SectionType(self.sections[index].type).is_enumerable:
            return self.edit_field(index, content=perks_from_text(text))
        return self.edit_field(index, content=text)

    def set_theme(self, **fields: Optional[str]) -> Theme:
        self.theme = self.theme.model_copy(update=fields)
        return self.theme

    def build_payload(self) -> Dict[str, Any]:
        """Draft as an update body, with order recomputed from position."""
        sections = [
            section.model_copy(update={"order": position})
            for position, section in enumerate(self.sections, start=1)
        ]
        return {
            "theme": self.theme.model_dump(mode="json"),
            "sections": [section.model_dump(mode="json") for section in sections],
            "culture_video_url": self.culture_video_url,
        }

    def save(self) -> Optional[Dict[str, Any]]:
        """Send the whole draft and adopt the server's answer.

        When the response carries no section list, the locally renumbered
        sections are kept.
        """
        payload = self.build_payload()
        payload_sections = normalize_sections(payload["sections"], [])

        company = self.api_client.update_company(self.slug, payload, self.context)
        self._apply(company, fallback_sections=payload_sections)
        logger.info(f"Saved {len(payload_sections)} sections for {self.slug}")
        return company

    def publish(self) -> Optional[Dict[str, Any]]:
        self.api_client.publish_company(self.slug, self.context)
        return self._refresh_company()

    def unpublish(self) -> Optional[Dict[str, Any]]:
        self.api_client.unpublish_company(self.slug, self.context)
        return self._refresh_company()

    def _refresh_company(self) -> Optional[Dict[str, Any]]:
        # Status changes only refresh the record; the local draft is kept
        self.company = self.api_client.get_company(self.slug, self.context)
        return self.company
