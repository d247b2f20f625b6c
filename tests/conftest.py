import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest

from app.infra.supabase.repositories import RepositoryFactory


class StoreUnavailable(Exception):
    pass


class FakeResponse:
    def __init__(self, data: List[Dict[str, Any]], count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Mimics the postgrest builder chain used by the repositories"""

    def __init__(self, client: "FakeSupabaseClient", table: str, op: str, payload: Optional[Dict[str, Any]] = None):
        self._client = client
        self._table = table
        self._op = op
        self._payload = payload
        self._filters = []
        self._limit = None

    def eq(self, key, value):
        self._filters.append(lambda row: row.get(key) == value)
        return self

    def gte(self, key, value):
        self._filters.append(lambda row: row.get(key) is not None and row.get(key) >= value)
        return self

    def is_(self, key, value):
        if value == "null":
            self._filters.append(lambda row: row.get(key) is None)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def _matching(self) -> List[Dict[str, Any]]:
        rows = self._client.tables.setdefault(self._table, [])
        return [row for row in rows if all(f(row) for f in self._filters)]

    def execute(self) -> FakeResponse:
        self._client.calls.append((self._table, self._op, self._payload))
        if (self._table, self._op) in self._client.failures:
            raise StoreUnavailable(f"{self._op} on {self._table} failed")

        if self._op == "insert":
            row = {"id": str(uuid.uuid4()), "created_at": datetime.now(timezone.utc).isoformat(), **self._payload}
            self._client.tables.setdefault(self._table, []).append(row)
            return FakeResponse([dict(row)])

        if self._op == "update":
            matched = self._matching()
            for row in matched:
                row.update(self._payload)
            return FakeResponse([dict(row) for row in matched])

        rows = [dict(row) for row in self._matching()]
        if self._limit:
            rows = rows[: self._limit]
        return FakeResponse(rows, count=len(rows))


class FakeTable:
    def __init__(self, client: "FakeSupabaseClient", name: str):
        self._client = client
        self._name = name

    def select(self, *columns, count=None):
        return FakeQuery(self._client, self._name, "select")

    def insert(self, data):
        return FakeQuery(self._client, self._name, "insert", data)

    def update(self, data):
        return FakeQuery(self._client, self._name, "update", data)


class FakeSupabaseClient:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls = []
        self.failures = set()

    def table(self, name: str) -> FakeTable:
        return FakeTable(self, name)

    def fail(self, table: str, op: str) -> None:
        self.failures.add((table, op))

    def recover(self) -> None:
        self.failures.clear()

    def calls_to(self, table: str, op: Optional[str] = None):
        return [c for c in self.calls if c[0] == table and (op is None or c[1] == op)]


class FakeClock:
    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2025, 1, 6, 9, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def supabase_client():
    return FakeSupabaseClient()


@pytest.fixture
def repositories(supabase_client):
    return RepositoryFactory(supabase_client)


@pytest.fixture
def clock():
    return FakeClock()
