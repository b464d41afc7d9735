"""Repository for job data access operations."""

from typing import Dict, List, Optional, Any

from supabase import Client

from app.constants import JOBS_TABLE, PUBLIC_JOB_COLUMNS
from app.repositories.base_repository import BaseRepository


class JobRepository(BaseRepository):
    """Repository for reading job listings.

    Jobs are created by another system, so only queries live here.
    """

    def __init__(self, db_client: Client):
        """Initialize the repository with a database client.

        Args:
            db_client: Supabase client instance.
        """
        super().__init__(db_client, JOBS_TABLE)

    def get_by_company(
        self,
        company_id: str,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        title_query: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Retrieve a company's jobs, newest first.

        Filters are ANDed together; a falsy filter is not applied.

        Args:
            company_id: The company's unique identifier.
            location: Exact location match.
            job_type: Exact job_type match.
            title_query: Case-insensitive substring of the title.

        Returns:
            List of job records restricted to the public columns.
        """
        try:
            query = (
                self.db_client.table(self.table_name)
                .select(PUBLIC_JOB_COLUMNS)
                .eq("company_id", company_id)
            )

            if location:
                query = query.eq("location", location)
            if job_type:
                query = query.eq("job_type", job_type)
            if title_query:
                query = query.ilike("title", f"%{title_query}%")

            response = query.order("posted_at", desc=True).execute()
            return response.data
        except Exception as error:
            raise self._fail("get jobs by company", error)
