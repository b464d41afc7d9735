"""Recruiter-to-company authorization."""

import logging
from typing import Any

from app.exceptions import ForbiddenError
from app.models.recruiter import DenialReason, OwnershipResult
from app.repositories.recruiter_repository import RecruiterRepository

logger = logging.getLogger(__name__)


class OwnershipService:
    """Decides whether a user may edit a given company.

    The check is a direct point lookup and is repeated for every recruiter
    operation; results are never cached.

    Attributes:
        recruiter_repository: Repository for recruiter bindings.
    """

    def __init__(self, recruiter_repository: RecruiterRepository):
        self.recruiter_repository = recruiter_repository

    def check_ownership(self, user_id: str, company_id: Any) -> OwnershipResult:
        """Check that user_id is the recruiter bound to company_id.

        Args:
            user_id: Authenticated user id.
            company_id: Id of the company being accessed, compared as stored.

        Returns:
            OwnershipResult with ok=True, or ok=False and a denial reason.

        Raises:
            DatabaseError: If the recruiter lookup itself fails.
        """
        recruiter = self.recruiter_repository.get_by_user_id(user_id)

        if recruiter is None or recruiter.company_id in (None, ""):
            return OwnershipResult(ok=False, reason=DenialReason.NOT_A_RECRUITER)
        if recruiter.company_id != company_id:
            return OwnershipResult(ok=False, reason=DenialReason.WRONG_COMPANY)

        return OwnershipResult(ok=True)

    def ensure_owner(self, user_id: str, company_id: Any) -> None:
        """Raise ForbiddenError unless the ownership check passes."""
        result = self.check_ownership(user_id, company_id)
        if not result.ok:
            logger.warning(
                f"Denied user {user_id} access to company {company_id}: {result.reason.value}"
            )
            raise ForbiddenError("Forbidden")
