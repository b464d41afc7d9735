"""Repository for company data access operations."""

from typing import Dict, Optional, Any

from supabase import Client

from app.constants import COMPANIES_TABLE, PUBLIC_COMPANY_COLUMNS
from app.models.company import CompanyStatus
from app.repositories.base_repository import BaseRepository


class CompanyRepository(BaseRepository):
    """Repository for the company aggregate (theme, sections, status).

    All lookups are keyed by slug; writes are keyed by id.
    """

    def __init__(self, db_client: Client):
        """Initialize the repository with a database client.

        Args:
            db_client: Supabase client instance.
        """
        super().__init__(db_client, COMPANIES_TABLE)

    def get_by_slug(self, slug: str, columns: str = "*") -> Optional[Dict[str, Any]]:
        """Retrieve a company by slug regardless of publish state."""
        return self.get_one_by("slug", slug, columns)

    def get_published_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        """Retrieve the public view of a published company.

        Args:
            slug: Company slug.

        Returns:
            Public subset of the company record, or None when the company is
            missing or not published.
        """
        try:
            response = (
                self.db_client.table(self.table_name)
                .select(PUBLIC_COMPANY_COLUMNS)
                .eq("slug", slug)
                .eq("status", CompanyStatus.PUBLISHED.value)
                .limit(1)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as error:
            raise self._fail("get published", error)
