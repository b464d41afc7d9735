"""FastAPI application for publishing and viewing company careers pages."""

import logging
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.deps import get_company_service, get_current_user, get_job_service
from app.api.schemas.company_schemas import CompanyResponse, UpdateCompanyRequest
from app.api.schemas.job_schemas import JobFilters, JobsResponse
from app.api.schemas.responses import HealthResponse, ValidationErrorDetail
from app.config import get_server_settings
from app.exceptions import AppError, BadRequestError
from app.models.recruiter import AuthenticatedUser
from app.services.company_service import CompanyService
from app.services.job_service import JobService
from app.utils.logging_config import configure_logging

settings = get_server_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Careers Page API")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def flatten_validation_errors(errors: List[Dict[str, Any]]) -> ValidationErrorDetail:
    """Group pydantic errors into payload-level and per-field messages.

    ("body", "culture_video_url") becomes a field error on culture_video_url;
    errors about the body as a whole become form errors.
    """
    detail = ValidationErrorDetail()
    for error in errors:
        message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
        location = [part for part in error.get("loc", ()) if part not in ("body", "query")]
        if location and isinstance(location[0], str):
            detail.fieldErrors.setdefault(location[0], []).append(message)
        else:
            detail.formErrors.append(message)
    return detail


# Global exception handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render taxonomy errors as {"error": ...} with their status code."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report payload validation failures as 400 with field-level detail."""
    detail = flatten_validation_errors(exc.errors())
    return await app_error_handler(request, BadRequestError(detail.model_dump()))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Convert unexpected exceptions to 500 Internal Server Error."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": f"Internal server error: {str(exc)}"}
    )


@app.get("/health", response_model=HealthResponse)
def health():
    """Liveness probe.

    Returns:
        Dictionary with ok flag.
    """
    return {"ok": True}


# Public endpoints
@app.get("/api/public/company/{slug}", response_model=CompanyResponse)
def get_public_company(
    slug: str,
    company_service: CompanyService = Depends(get_company_service)
):
    """Get a published company page by slug.

    Draft and missing companies both answer 404.
    """
    return {"company": company_service.get_published_company(slug)}


@app.get("/api/public/company/{slug}/jobs", response_model=JobsResponse)
def get_public_jobs(
    slug: str,
    location: Optional[str] = None,
    job_type: Optional[str] = Query(None, alias="jobType"),
    q: Optional[str] = None,
    job_service: JobService = Depends(get_job_service)
):
    """List a published company's jobs with optional filters.

    Args:
        slug: Company slug.
        location: Exact location match.
        job_type: Exact job type match (query parameter ``jobType``).
        q: Case-insensitive title search.

    Example:
        GET /api/public/company/acme/jobs?location=Berlin&q=engineer
    """
    filters = JobFilters(location=location, job_type=job_type, q=q)
    return {"jobs": job_service.get_published_jobs(slug, filters)}


# Recruiter endpoints
@app.get("/api/recruiter/company/{slug}", response_model=CompanyResponse)
def get_recruiter_company(
    slug: str,
    user: AuthenticatedUser = Depends(get_current_user),
    company_service: CompanyService = Depends(get_company_service)
):
    """Get the full company record, drafts included, for its recruiter."""
    return {"company": company_service.get_company_for_edit(slug, user.id)}


@app.put("/api/recruiter/company/{slug}", response_model=CompanyResponse)
def update_recruiter_company(
    slug: str,
    request: UpdateCompanyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    company_service: CompanyService = Depends(get_company_service)
):
    """Update theme, sections and culture video URL.

    Each field present in the body replaces the stored value wholesale.
    """
    return {"company": company_service.update_company(slug, user.id, request.to_updates())}


@app.post("/api/recruiter/company/{slug}/publish", response_model=CompanyResponse)
def publish_company(
    slug: str,
    user: AuthenticatedUser = Depends(get_current_user),
    company_service: CompanyService = Depends(get_company_service)
):
    """Make the company page publicly visible."""
    return {"company": company_service.publish_company(slug, user.id)}


@app.post("/api/recruiter/company/{slug}/unpublish", response_model=CompanyResponse)
def unpublish_company(
    slug: str,
    user: AuthenticatedUser = Depends(get_current_user),
    company_service: CompanyService = Depends(get_company_service)
):
    """Take the company page offline (back to draft)."""
    return {"company": company_service.unpublish_company(slug, user.id)}


if __name__ == "__main__":
    logger.info(f"API running on :{settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
