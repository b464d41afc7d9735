"""
API Dependencies
Backend client, repositories, services and authentication for endpoints.
"""

from typing import Optional

from fastapi import Depends, Header, Request
from supabase import Client

from app.database.client import get_supabase_client
from app.models.recruiter import AuthenticatedUser
from app.repositories.company_repository import CompanyRepository
from app.repositories.job_repository import JobRepository
from app.repositories.recruiter_repository import RecruiterRepository
from app.services.auth_service import AuthService, extract_bearer_token
from app.services.company_service import CompanyService
from app.services.job_service import JobService
from app.services.ownership_service import OwnershipService


def get_db_client() -> Client:
    """Backend client; overridden in tests."""
    return get_supabase_client()


def get_company_repository(db: Client = Depends(get_db_client)) -> CompanyRepository:
    return CompanyRepository(db)


def get_company_service(
    db: Client = Depends(get_db_client),
    company_repository: CompanyRepository = Depends(get_company_repository)
) -> CompanyService:
    ownership_service = OwnershipService(RecruiterRepository(db))
    return CompanyService(company_repository, ownership_service)


def get_job_service(
    db: Client = Depends(get_db_client),
    company_repository: CompanyRepository = Depends(get_company_repository)
) -> JobService:
    return JobService(JobRepository(db), company_repository)


def get_auth_service(db: Client = Depends(get_db_client)) -> AuthService:
    return AuthService(db)


def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    auth_service: AuthService = Depends(get_auth_service)
) -> AuthenticatedUser:
    """
    Resolve the bearer token to a user and attach it to request.state.

    Authentication only; per-company authorization happens in the services.
    """
    token = extract_bearer_token(authorization)
    user = auth_service.verify_token(token)
    request.state.user = user
    return user
