"""Pytest configuration and shared fixtures."""
import itertools
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from mannmitra import supabase_client


class FakeQuery:
    """Just enough of the postgrest query builder for the calls the app makes."""

    def __init__(self, backend, table):
        self.backend = backend
        self.table = table
        self.op = None
        self.payload = None
        self.filters = []
        self.order_by = None
        self.row_limit = None
        self.columns = "*"
        self.lower_bounds = []

    def select(self, columns="*"):
        self.op = "select"
        self.columns = columns
        return self

    def insert(self, payload):
        self.op, self.payload = "insert", payload
        return self

    def upsert(self, payload, on_conflict=None):
        self.op, self.payload = "upsert", payload
        self.on_conflict = on_conflict
        return self

    def update(self, payload):
        self.op, self.payload = "update", payload
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def gte(self, column, value):
        self.lower_bounds.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, n):
        self.row_limit = n
        return self

    def _matches(self, row):
        if not all(row.get(c) == v for c, v in self.filters):
            return False
        return all(datetime.fromisoformat(row[c]) >= datetime.fromisoformat(v) for c, v in self.lower_bounds)

    def _project(self, row):
        if self.columns == "*":
            return dict(row)
        return {c.strip(): row.get(c.strip()) for c in self.columns.split(",")}

    def execute(self):
        self.backend.queries.append(self)
        if self.table in self.backend.failing_tables:
            raise RuntimeError(f"permission denied for table {self.table}")
        rows = self.backend.tables.setdefault(self.table, [])
        if self.op == "select":
            out = [dict(r) for r in rows if self._matches(r)]
            if self.order_by:
                column, desc = self.order_by
                out.sort(key=lambda r: r[column], reverse=desc)
            if self.row_limit is not None:
                out = out[: self.row_limit]
            return SimpleNamespace(data=[self._project(r) for r in out])
        if self.op == "insert":
            row = {"id": str(next(self.backend.ids)), "created_at": self.backend.now(), **self.payload}
            rows.append(row)
            return SimpleNamespace(data=[row])
        if self.op == "upsert":
            key = self.on_conflict
            existing = next((r for r in rows if key and r.get(key) == self.payload.get(key)), None)
            if existing:
                existing.update(self.payload)
                return SimpleNamespace(data=[existing])
            row = {"id": str(next(self.backend.ids)), **self.payload}
            rows.append(row)
            return SimpleNamespace(data=[row])
        if self.op == "update":
            changed = [r for r in rows if self._matches(r)]
            for r in changed:
                r.update(self.payload)
            return SimpleNamespace(data=changed)
        if self.op == "delete":
            gone = [r for r in rows if self._matches(r)]
            self.backend.tables[self.table] = [r for r in rows if not self._matches(r)]
            return SimpleNamespace(data=gone)
        raise AssertionError(f"unexpected op {self.op}")


class FakeAuth:
    def __init__(self, backend):
        self.backend = backend
        self.current = None

    def _response(self, email):
        user = SimpleNamespace(id="user-1", email=email)
        session = SimpleNamespace(access_token="access-1", refresh_token="refresh-1", user=user)
        return SimpleNamespace(user=user, session=session)

    def sign_in_with_password(self, credentials):
        if credentials["password"] != self.backend.password:
            raise RuntimeError("Invalid login credentials")
        self.current = self._response(credentials["email"])
        return self.current

    def sign_up(self, credentials):
        if self.backend.confirm_email:
            return SimpleNamespace(user=SimpleNamespace(id="user-1", email=credentials["email"]), session=None)
        self.backend.signup_metadata = credentials.get("options", {}).get("data")
        self.current = self._response(credentials["email"])
        return self.current

    def sign_out(self):
        self.current = None


class FakeClient:
    def __init__(self):
        self.tables = {}
        self.queries = []
        self.failing_tables = set()
        self.ids = itertools.count(1)
        self.password = "secret"
        self.confirm_email = False
        self.signup_metadata = None
        self.auth = FakeAuth(self)

    @staticmethod
    def now():
        return datetime.now(timezone.utc).isoformat()

    def table(self, name):
        return FakeQuery(self, name)


@pytest.fixture
def fake_backend(monkeypatch):
    """Route every supabase_client call to an in-memory fake."""
    client = FakeClient()
    monkeypatch.setattr(supabase_client, "get_client", lambda: client)
    return client
