"""
Fixtures compartidos.

FakeSupabase imita el query builder de supabase-py (select/insert/update/
delete + eq/order/limit + execute) sobre tablas en memoria, y un Auth
mínimo con sign_up / sign_in_with_password / sign_out / get_session.
"""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from propertyhub.config import Settings
from propertyhub.database import SupabaseClient


class FakeAuthApiError(Exception):
    pass


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self.action = "select"
        self.payload = None
        self.filters: list[tuple[str, object]] = []
        self.order_by = None
        self.limit_to = None

    def select(self, columns: str = "*"):
        self.action = "select"
        return self

    def insert(self, data):
        self.action = "insert"
        self.payload = data
        return self

    def update(self, data):
        self.action = "update"
        self.payload = data
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.limit_to = count
        return self

    def execute(self):
        self.db.calls.append(
            {
                "table": self.table_name,
                "action": self.action,
                "filters": list(self.filters),
                "order": self.order_by,
                "limit": self.limit_to,
            }
        )
        pending = self.db.failures.get(self.table_name)
        if pending:
            raise pending.pop(0)

        rows = self.db.tables.setdefault(self.table_name, [])
        matched = [r for r in rows if all(r.get(c) == v for c, v in self.filters)]

        if self.action == "insert":
            self.db.sequence += 1
            row = {
                "id": f"row-{self.db.sequence}",
                "created_at": (datetime(2024, 1, 1) + timedelta(minutes=self.db.sequence)).isoformat(),
                **self.payload,
            }
            rows.append(row)
            data = [dict(row)]
        elif self.action == "update":
            for row in matched:
                row.update(self.payload)
            data = [dict(r) for r in matched]
        elif self.action == "delete":
            self.db.tables[self.table_name] = [r for r in rows if r not in matched]
            data = [dict(r) for r in matched]
        else:
            data = [dict(r) for r in matched]
            if self.order_by:
                column, desc = self.order_by
                data.sort(key=lambda r: r.get(column) or "", reverse=desc)
            if self.limit_to is not None:
                data = data[: self.limit_to]

        return SimpleNamespace(data=data)


class FakeAuth:
    def __init__(self):
        self.users: dict[str, tuple[str, SimpleNamespace]] = {}
        self.session = None
        self.sign_up_calls: list[dict] = []
        self.fail_sign_out = False

    def sign_up(self, credentials):
        self.sign_up_calls.append(credentials)
        email = credentials["email"]
        if email in self.users:
            raise FakeAuthApiError("User already registered")
        user = SimpleNamespace(
            id=f"user-{len(self.users) + 1}",
            email=email,
            user_metadata=credentials.get("options", {}).get("data", {}),
        )
        self.users[email] = (credentials["password"], user)
        return SimpleNamespace(user=user, session=None)

    def sign_in_with_password(self, credentials):
        entry = self.users.get(credentials["email"])
        if entry is None or entry[0] != credentials["password"]:
            raise FakeAuthApiError("Invalid login credentials")
        user = entry[1]
        self.session = SimpleNamespace(user=user, access_token=f"token-{user.id}")
        return SimpleNamespace(user=user, session=self.session)

    def sign_out(self):
        if self.fail_sign_out:
            raise FakeAuthApiError("Network error")
        self.session = None

    def get_session(self):
        return self.session


class FakeSupabase:
    """Cliente crudo en memoria con la misma forma que supabase.Client."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self.failures: dict[str, list[Exception]] = {}
        self.calls: list[dict] = []
        self.sequence = 0
        self.auth = FakeAuth()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, table: str, *errors: Exception):
        self.failures.setdefault(table, []).extend(errors)


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def client(fake_db) -> SupabaseClient:
    return SupabaseClient(fake_db)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://test.supabase.co",
        supabase_key="test-key",
        site_url="https://propertyhub.test",
        fetch_attempts=1,
    )


def make_property_row(**overrides) -> dict:
    row = {
        "id": "p-1",
        "title": "Modern Villa",
        "description": "Family home with a garden",
        "price": 28_000_000,
        "location": "Karen, Nairobi",
        "property_type": "house",
        "bedrooms": 4,
        "bathrooms": 3,
        "area_sqft": 3200,
        "features": ["Garden"],
        "images": [],
        "status": "available",
        "agent_id": "agent-1",
        "created_at": "2024-01-01T00:00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def property_row():
    return make_property_row
