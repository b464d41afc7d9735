"""Service for careers page reads, edits and publishing."""

import logging
from datetime import datetime, timezone
from typing import Dict, Any

from app.exceptions import NotFoundError
from app.models.company import CompanyStatus
from app.repositories.company_repository import CompanyRepository
from app.services.ownership_service import OwnershipService

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class CompanyService:
    """Business logic for the public and recruiter company paths.

    Public reads hide draft companies entirely. Recruiter operations resolve
    the company by slug, then run the ownership check before touching data.

    Attributes:
        company_repository: Repository for company data access.
        ownership_service: Recruiter-to-company authorization.
    """

    def __init__(
        self,
        company_repository: CompanyRepository,
        ownership_service: OwnershipService
    ):
        """Initialize the service.

        Args:
            company_repository: CompanyRepository instance.
            ownership_service: OwnershipService instance.
        """
        self.company_repository = company_repository
        self.ownership_service = ownership_service

    def get_published_company(self, slug: str) -> Dict[str, Any]:
        """Get the public view of a company.

        A draft company is reported exactly like a missing one.

        Args:
            slug: Company slug.

        Returns:
            Public subset of the company record.

        Raises:
            NotFoundError: If the company is missing or not published.
        """
        company = self.company_repository.get_published_by_slug(slug)
        if not company:
            raise NotFoundError("Company not found")
        return company

    def _resolve_owned_company_id(self, slug: str, user_id: str) -> Any:
        company = self.company_repository.get_by_slug(slug, columns="id")
        if not company:
            raise NotFoundError("Company not found")

        self.ownership_service.ensure_owner(user_id, company["id"])
        return company["id"]

    def get_company_for_edit(self, slug: str, user_id: str) -> Dict[str, Any]:
        """Get the full company record for its recruiter.

        Args:
            slug: Company slug.
            user_id: Authenticated user id.

        Returns:
            Full company record, drafts included.

        Raises:
            NotFoundError: If no company has this slug.
            ForbiddenError: If the user is not this company's recruiter.
        """
        company = self.company_repository.get_by_slug(slug)
        if not company:
            raise NotFoundError("Company not found")

        self.ownership_service.ensure_owner(user_id, company["id"])
        return company

    def update_company(self, slug: str, user_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Overwrite top-level company fields.

        Every key present in updates replaces the stored value wholesale
        (theme and sections included); absent keys are left alone.

        Args:
            slug: Company slug.
            user_id: Authenticated user id.
            updates: Validated patch (theme, sections, culture_video_url).

        Returns:
            Updated company record.
        """
        company_id = self._resolve_owned_company_id(slug, user_id)
        updated = self._write(company_id, {**updates, "updated_at": utc_now_iso()})
        logger.info(f"Company {slug} updated fields: {sorted(updates)}")
        return updated

    def publish_company(self, slug: str, user_id: str) -> Dict[str, Any]:
        """Make a company page publicly visible. Idempotent."""
        return self._set_status(slug, user_id, CompanyStatus.PUBLISHED)

    def unpublish_company(self, slug: str, user_id: str) -> Dict[str, Any]:
        """Return a company page to draft. Idempotent."""
        return self._set_status(slug, user_id, CompanyStatus.DRAFT)

    def _set_status(self, slug: str, user_id: str, status: CompanyStatus) -> Dict[str, Any]:
        company_id = self._resolve_owned_company_id(slug, user_id)
        updated = self._write(company_id, {"status": status.value, "updated_at": utc_now_iso()})
        logger.info(f"Company {slug} is now {status.value}")
        return updated

    def _write(self, company_id: Any, updates: Dict[str, Any]) -> Dict[str, Any]:
        updated = self.company_repository.update(company_id, updates)
        if not updated:
            # Row disappeared between lookup and write
            raise NotFoundError("Company not found")
        return updated
