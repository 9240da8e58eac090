from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.database import get_db, get_engine
from main import app


class FakeResult:
    def __init__(self, rows: list[dict[str, Any]]):
        self._rows = rows

    def mappings(self) -> "FakeResult":
        return self

    def all(self) -> list[dict[str, Any]]:
        return list(self._rows)

    def first(self) -> dict[str, Any] | None:
        return self._rows[0] if self._rows else None

    def scalar_one(self) -> Any:
        assert len(self._rows) == 1
        return next(iter(self._rows[0].values()))


class FakeConnection:
    """Stands in for a pooled SQLAlchemy connection.

    Each queued response is either a list of row dicts or an exception to
    raise; every execute call is recorded as (sql, params).
    """

    def __init__(self) -> None:
        self.responses: list[list[dict[str, Any]] | Exception] = []
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def queue(self, response: list[dict[str, Any]] | Exception) -> None:
        self.responses.append(response)

    def execute(self, statement, params: dict[str, Any] | None = None) -> FakeResult:
        self.calls.append((str(statement), dict(params or {})))
        response = self.responses.pop(0) if self.responses else []
        if isinstance(response, Exception):
            raise response
        return FakeResult(response)

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> dict[str, Any]:
        return self.calls[-1][1]

    def __enter__(self) -> "FakeConnection":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


class FakeEngine:
    def __init__(self, connection: FakeConnection):
        self.connection = connection
        self.connect_error: Exception | None = None

    def connect(self) -> FakeConnection:
        if self.connect_error is not None:
            raise self.connect_error
        return self.connection


@pytest.fixture
def fake_db() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def fake_engine(fake_db: FakeConnection) -> FakeEngine:
    return FakeEngine(fake_db)


@pytest.fixture
def client(fake_db: FakeConnection, fake_engine: FakeEngine) -> Iterator[TestClient]:
    def _get_db() -> Iterator[FakeConnection]:
        yield fake_db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_engine] = lambda: fake_engine
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_poem() -> dict[str, Any]:
    return {
        "id": 123,
        "title": "قصيدة الحب",
        "arabic": "بيت أول*بيت ثاني*بيت ثالث",
        "poet": "نزار قباني",
        "theme": "رومانسي",
    }
