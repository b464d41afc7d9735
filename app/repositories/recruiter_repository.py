"""Repository for recruiter bindings (read-only here)."""

from typing import Optional

from supabase import Client

from app.constants import RECRUITERS_TABLE
from app.models.recruiter import Recruiter
from app.repositories.base_repository import BaseRepository


class RecruiterRepository(BaseRepository):
    """Looks up which company an authenticated user may edit.

    Recruiter rows are provisioned elsewhere; this repository never writes.
    """

    def __init__(self, db_client: Client):
        super().__init__(db_client, RECRUITERS_TABLE)

    def get_by_user_id(self, user_id: str) -> Optional[Recruiter]:
        """Return the recruiter binding for a user, or None if there is none."""
        row = self.get_by_id(user_id, columns="company_id")
        if row is None:
            return None
        return Recruiter(id=user_id, company_id=row.get("company_id"))
