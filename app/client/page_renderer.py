"""Read-only rendering of a published careers page."""

import html
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from app.client.api_client import CareersApiClient
from app.client.errors import ApiError
from app.constants import DEFAULT_ACCENT_COLOR, DEFAULT_PRIMARY_COLOR
from app.models.company import Section, Theme
from app.models.job import Job

logger = logging.getLogger(__name__)

NO_SECTIONS_MESSAGE = "No sections published yet."
NO_JOBS_MESSAGE = "No open roles at the moment."


class RenderedSection(BaseModel):
    id: str
    type: str
    heading: str
    content: Any
    order: int


class CareersPage(BaseModel):
    """Everything a public careers page shows, with defaults resolved."""
    name: str
    slug: str
    theme: Theme
    sections: List[RenderedSection]
    jobs: List[Job]
    culture_video_url: Optional[str] = None
    sections_empty_message: Optional[str] = None
    jobs_empty_message: Optional[str] = None


class ErrorPage(BaseModel):
    status: Optional[int] = None
    title: str
    message: str


def resolve_theme(raw_theme: Any) -> Theme:
    """Theme with primary/accent colors falling back to defaults."""
    raw_theme = raw_theme if isinstance(raw_theme, dict) else {}
    theme = Theme(**{
        field: str(raw_theme[field])
        for field in Theme.model_fields
        if raw_theme.get(field) is not None
    })
    return theme.model_copy(update={
        "primaryColor": theme.primaryColor or DEFAULT_PRIMARY_COLOR,
        "accentColor": theme.accentColor or DEFAULT_ACCENT_COLOR,
    })


def sort_sections(raw_sections: Any) -> List[RenderedSection]:
    """Sections by ascending order; a missing order counts as 0."""
    if not isinstance(raw_sections, list):
        return []

    rendered = []
    for index, raw in enumerate(raw_sections):
        if not isinstance(raw, dict):
            continue
        order = raw.get("order")
        order = order if isinstance(order, int) and not isinstance(order, bool) else 0
        section_type = str(raw.get("type") or "")
        rendered.append(RenderedSection(
            id=str(raw.get("id") or f"{section_type or 'section'}-{index}"),
            type=section_type,
            heading=str(raw.get("title") or section_type),
            content=raw.get("content") if raw.get("content") is not None else "",
            order=order,
        ))
    # sorted() is stable, so equal orders keep their stored sequence
    return sorted(rendered, key=lambda section: section.order)


def build_careers_page(company: Dict[str, Any], jobs: List[Dict[str, Any]]) -> CareersPage:
    """Assemble the page view from API data.

    Args:
        company: Public company record.
        jobs: Job records, already ordered by the server.
    """
    sections = sort_sections(company.get("sections"))
    job_models = [Job.model_validate(job) for job in jobs or []]
    return CareersPage(
        name=str(company.get("name") or ""),
        slug=str(company.get("slug") or ""),
        theme=resolve_theme(company.get("theme")),
        sections=sections,
        jobs=job_models,
        culture_video_url=company.get("culture_video_url") or None,
        sections_empty_message=None if sections else NO_SECTIONS_MESSAGE,
        jobs_empty_message=None if job_models else NO_JOBS_MESSAGE,
    )


def load_careers_page(client: CareersApiClient, slug: str) -> Any:
    """Fetch and assemble a careers page, or an ErrorPage on failure."""
    try:
        company = client.get_public_company(slug)
        if company is None:
            raise ApiError(404, "Company not found")
        jobs = client.get_public_jobs(slug)
    except ApiError as error:
        logger.warning(f"Could not load careers page {slug}: {error.message}")
        return ErrorPage(status=error.status, title=error.title, message=error.message)
    return build_careers_page(company, jobs)


def _render_content(content: Any) -> str:
    if isinstance(content, list):
        items = "".join(f"<li>{html.escape(str(item))}</li>" for item in content)
        return f"<ul>{items}</ul>"
    return f"<p>{html.escape(str(content))}</p>"


def _render_section(section: RenderedSection, theme: Theme) -> str:
    return (
        f'<section class="section section-{html.escape(section.type)}">'
        f'<h2 style="color: {html.escape(theme.primaryColor)}">{html.escape(section.heading)}</h2>'
        f'<span class="badge" style="background-color: {html.escape(theme.accentColor)}">'
        f"{html.escape(section.type)}</span>"
        f"{_render_content(section.content)}</section>"
    )


def _render_job(job: Job, theme: Theme) -> str:
    posted = job.posted_at.date().isoformat() if job.posted_at else ""
    fields = [
        ("Department", job.department),
        ("Level", job.level),
        ("Salary", job.salary_text),
        ("Posted", posted),
    ]
    details = "".join(
        f"<div><strong>{label}:</strong> {html.escape(value or '')}</div>"
        for label, value in fields
    )
    return (
        '<article class="job">'
        f"<h3>{html.escape(job.title or '')}</h3>"
        f"<p>{html.escape(job.location or '')} · {html.escape(job.work_mode or '')}</p>"
        f'<span class="badge" style="background-color: {html.escape(theme.accentColor)}">'
        f"{html.escape(job.job_type or '')}</span>"
        f"{details}</article>"
    )


def render_html(page: Any) -> str:
    """Render a CareersPage (or ErrorPage) as an HTML fragment."""
    if isinstance(page, ErrorPage):
        status = f"Error {page.status}" if page.status else "Error"
        return (
            '<div class="error">'
            f"<div>{status}</div><h2>{html.escape(page.title)}</h2>"
            f"<p>{html.escape(page.message)}</p></div>"
        )

    theme = page.theme
    if theme.bannerUrl:
        banner = f'<img class="banner" src="{html.escape(theme.bannerUrl)}" alt="{html.escape(page.name)} banner">'
    else:
        banner = f'<div class="banner" style="background-color: {html.escape(theme.primaryColor)}"></div>'

    if theme.logoUrl:
        logo = f'<img class="logo" src="{html.escape(theme.logoUrl)}" alt="{html.escape(page.name)} logo">'
    else:
        logo = f'<div class="logo" style="background-color: {html.escape(theme.primaryColor)}">{html.escape(page.name[:1])}</div>'

    parts = [
        f"<header>{banner}{logo}<h1>{html.escape(page.name)}</h1></header>",
        '<main class="overview">',
    ]
    if page.sections_empty_message:
        parts.append(f'<div class="empty">{page.sections_empty_message}</div>')
    parts.extend(_render_section(section, theme) for section in page.sections)
    if page.culture_video_url:
        parts.append(
            '<section class="culture-video"><h2>Culture Video</h2>'
            f"<p>{html.escape(page.culture_video_url)}</p></section>"
        )
    parts.append('</main><div class="jobs">')
    if page.jobs_empty_message:
        parts.append(f'<div class="empty">{page.jobs_empty_message}</div>')
    parts.extend(_render_job(job, theme) for job in page.jobs)
    parts.append("</div>")
    return "".join(parts)
