import copy
import re
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient


class FakeQuery:
    """Chainable stand-in for the backend table query builder."""

    def __init__(self, db: "FakeSupabase", table_name: str):
        self.db = db
        self.table_name = table_name
        self.columns = "*"
        self.filters = []
        self.order_by = None
        self.row_limit = None
        self.updates = None

    def select(self, columns: str = "*"):
        self.columns = columns
        return self

    def update(self, updates: Dict[str, Any]):
        self.updates = updates
        return self

    def eq(self, column: str, value: Any):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def ilike(self, column: str, pattern: str):
        regex = re.compile(
            "".join(".*" if ch == "%" else re.escape(ch) for ch in pattern),
            re.IGNORECASE,
        )
        self.filters.append(
            lambda row: row.get(column) is not None and regex.fullmatch(row[column]) is not None
        )
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = (column, desc)
        return self

    def limit(self, count: int):
        self.row_limit = count
        return self

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if self.columns.strip() == "*":
            return copy.deepcopy(row)
        names = [name.strip() for name in self.columns.split(",")]
        return {name: copy.deepcopy(row.get(name)) for name in names}

    def execute(self):
        self.db.calls.append(self.table_name)
        if self.table_name in self.db.failing_tables:
            raise RuntimeError(f"connection to {self.table_name} refused")

        rows = [row for row in self.db.tables.setdefault(self.table_name, [])
                if all(check(row) for check in self.filters)]

        if self.updates is not None:
            for row in rows:
                row.update(copy.deepcopy(self.updates))
            return SimpleNamespace(data=[copy.deepcopy(row) for row in rows])

        if self.order_by:
            column, desc = self.order_by
            rows = sorted(rows, key=lambda row: row.get(column) or "", reverse=desc)
        if self.row_limit is not None:
            rows = rows[:self.row_limit]
        return SimpleNamespace(data=[self._project(row) for row in rows])


class FakeAuth:
    def __init__(self, db: "FakeSupabase"):
        self.db = db

    def get_user(self, token: str):
        if self.db.auth_failure:
            raise self.db.auth_failure
        user_id = self.db.tokens.get(token)
        if user_id is None:
            return SimpleNamespace(user=None)
        return SimpleNamespace(user=SimpleNamespace(id=user_id, email=f"{user_id}@example.com"))


class FakeSupabase:
    """In-memory double for the subset of the backend client the app uses."""

    def __init__(self, tables: Dict[str, List[Dict[str, Any]]], tokens: Dict[str, str]):
        self.tables = tables
        self.tokens = tokens
        self.failing_tables = set()
        self.auth_failure: Optional[Exception] = None
        self.calls: List[str] = []
        self.auth = FakeAuth(self)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def company(self, slug: str) -> Dict[str, Any]:
        return next(row for row in self.tables["companies"] if row["slug"] == slug)


def _company(company_id, slug, name, status, **extra):
    row = {
        "id": company_id,
        "slug": slug,
        "name": name,
        "status": status,
        "theme": {"primaryColor": "#111827", "accentColor": "#22c55e"},
        "sections": [
            {"id": "about-1", "type": "about", "title": "About us", "content": "We build things.", "order": 1},
            {"id": "perks-1", "type": "perks", "title": "", "content": ["Remote", "Equity"], "order": 2},
        ],
        "culture_video_url": None,
        "updated_at": "2024-01-01T00:00:00+00:00",
        "created_at": "2023-12-01T00:00:00+00:00",
        "internal_notes": "recruiter only",
    }
    row.update(extra)
    return row


def _job(job_id, company_id, title, location, job_type, posted_at):
    return {
        "id": job_id,
        "company_id": company_id,
        "title": title,
        "location": location,
        "job_type": job_type,
        "department": "Engineering",
        "level": "Senior",
        "work_mode": "Hybrid",
        "salary_text": "$100k",
        "slug": job_id,
        "posted_at": posted_at,
        "internal_notes": "do not show",
    }


@pytest.fixture()
def fake_db() -> FakeSupabase:
    tables = {
        "companies": [
            _company("c-acme", "acme", "Acme", "draft"),
            _company("c-globex", "globex", "Globex", "published"),
            _company("c-other", "other-co", "Other Co", "published"),
        ],
        "jobs": [
            _job("j-1", "c-globex", "Backend Engineer", "Berlin", "Full-time", "2024-03-01T00:00:00+00:00"),
            _job("j-2", "c-globex", "Frontend Engineer", "Remote", "Full-time", "2024-05-01T00:00:00+00:00"),
            _job("j-3", "c-globex", "Engineering Manager", "Berlin", "Contract", "2024-04-01T00:00:00+00:00"),
            _job("j-4", "c-globex", "Designer", "Berlin", "Full-time", "2024-02-01T00:00:00+00:00"),
            _job("j-5", "c-acme", "Acme Engineer", "Berlin", "Full-time", "2024-01-01T00:00:00+00:00"),
        ],
        "recruiters": [
            {"id": "u-acme", "company_id": "c-acme"},
            {"id": "u-globex", "company_id": "c-globex"},
            {"id": "u-unbound", "company_id": None},
        ],
    }
    tokens = {
        "token-acme": "u-acme",
        "token-globex": "u-globex",
        "token-unbound": "u-unbound",
        "token-stranger": "u-stranger",
    }
    return FakeSupabase(tables, tokens)


@pytest.fixture()
def client(fake_db):
    from app.api.deps import get_db_client
    from app.main import app

    app.dependency_overrides[get_db_client] = lambda: fake_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers():
    return bearer
