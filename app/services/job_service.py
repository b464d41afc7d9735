"""Service for public job listings."""

from typing import List, Dict, Any

from app.api.schemas.job_schemas import JobFilters
from app.exceptions import NotFoundError
from app.models.company import CompanyStatus
from app.repositories.company_repository import CompanyRepository
from app.repositories.job_repository import JobRepository


class JobService:
    """Lists jobs of published companies.

    Attributes:
        job_repository: Repository for job data access.
        company_repository: Repository used to re-check publish state.
    """

    def __init__(self, job_repository: JobRepository, company_repository: CompanyRepository):
        self.job_repository = job_repository
        self.company_repository = company_repository

    def get_published_jobs(self, slug: str, filters: JobFilters) -> List[Dict[str, Any]]:
        """List a published company's jobs, newest first.

        Args:
            slug: Company slug.
            filters: Optional location / job type / title search filters.

        Returns:
            Job records matching every supplied filter.

        Raises:
            NotFoundError: If the company is missing or still a draft.
        """
        company = self.company_repository.get_by_slug(slug, columns="id,status")
        if not company or company.get("status") != CompanyStatus.PUBLISHED.value:
            raise NotFoundError("Company not found")

        return self.job_repository.get_by_company(
            company["id"],
            location=filters.location,
            job_type=filters.job_type,
            title_query=filters.q
        )
