"""
Fixtures compartilhadas

FakeSupabase imita a API encadeada do cliente supabase-py
(table().select().eq().order().execute()) sobre listas em memória.
"""

import itertools
from types import SimpleNamespace
from typing import Optional
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.routes import api_router
from app.core.config import settings


class FakeResponse:
    def __init__(self, data: list, count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.operation = "select"
        self.payload = None
        self.filters: list[tuple[str, object]] = []
        self.order_column: Optional[str] = None
        self.descending = False
        self.limit_count: Optional[int] = None
        self.count_method: Optional[str] = None
        self.head = False

    def select(self, *columns, count=None, head=False):
        self.operation = "select"
        self.count_method = count
        self.head = head
        return self

    def insert(self, payload):
        self.operation = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.operation = "update"
        self.payload = payload
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_column = column
        self.descending = desc
        return self

    def limit(self, count):
        self.limit_count = count
        return self

    def _matches(self, row: dict) -> bool:
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self) -> FakeResponse:
        self.db.calls.append((self.table, self.operation, dict(self.filters)))
        if self.table in self.db.failing_tables:
            raise RuntimeError("banco indisponível")

        rows = self.db.tables.setdefault(self.table, [])

        if self.operation == "insert":
            items = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for item in items:
                row = {"id": str(uuid4()), "created_at": self.db.next_timestamp(), **item}
                rows.append(row)
                created.append(dict(row))
            return FakeResponse(created)

        matched = [row for row in rows if self._matches(row)]

        if self.operation == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse([dict(row) for row in matched])

        if self.order_column:
            matched.sort(key=lambda r: r.get(self.order_column) or "", reverse=self.descending)
        if self.limit_count is not None:
            matched = matched[: self.limit_count]

        count = len(matched) if self.count_method else None
        data = [] if self.head else [dict(row) for row in matched]
        return FakeResponse(data, count=count)


class FakeAuth:
    def __init__(self):
        self.users: dict[str, SimpleNamespace] = {}

    def get_user(self, token):
        if token not in self.users:
            raise RuntimeError("invalid JWT")
        return SimpleNamespace(user=self.users[token])


class FakeSupabase:
    def __init__(self, tables: Optional[dict] = None):
        self.tables: dict[str, list[dict]] = tables or {}
        self.failing_tables: set[str] = set()
        self.calls: list[tuple] = []
        self.auth = FakeAuth()
        self._clock = itertools.count(1)

    def next_timestamp(self) -> str:
        return f"2026-01-01T00:00:{next(self._clock):02d}+00:00"

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def api_app() -> FastAPI:
    app = FastAPI()
    app.include_router(api_router, prefix="/api/v1")
    return app


@pytest.fixture
def api_client(api_app) -> TestClient:
    return TestClient(api_app)


@pytest.fixture
def unconfigured_store(monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "")
    monkeypatch.setattr(settings, "supabase_key", "")
