"""Pytest fixtures shared across unit and integration tests."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pytest

from app import create_app
from extensions import DatabaseGateway


class FakeGateway(DatabaseGateway):
    """Records every call; query results are served FIFO, function rows by name.

    A queued/registered value that is an exception instance is raised instead.
    The routine allow-list check stays real.
    """

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, str, list[Any]]] = []
        self.query_results: list[Any] = []
        self.function_rows: dict[str, Any] = {}
        self.procedure_error: Optional[Exception] = None

    def query(self, query: str, params: Optional[Sequence[Any]] = None, db_name: Optional[str] = None):
        self.calls.append(("query", " ".join(query.split()), list(params or [])))
        result = self.query_results.pop(0) if self.query_results else []
        if isinstance(result, Exception):
            raise result
        return result

    def call_procedure(self, name: str, params: Optional[Sequence[Any]] = None, db_name: Optional[str] = None):
        params = list(params or [])
        self.routines.procedure_call(name, len(params))
        self.calls.append(("procedure", name, params))
        if self.procedure_error is not None:
            raise self.procedure_error

    def call_function(self, name: str, params: Optional[Sequence[Any]] = None, db_name: Optional[str] = None):
        params = list(params or [])
        self.routines.function_call(name, len(params))
        self.calls.append(("function", name, params))
        result = self.function_rows.get(name, [])
        if isinstance(result, Exception):
            raise result
        return result

    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.calls]


class FakeCursor:
    def __init__(self, conn: "FakeConnection") -> None:
        self.conn = conn
        self.description = None

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.conn.cursors_closed += 1

    def execute(self, query: str, params: Any = None) -> None:
        driver = self.conn.driver
        self.conn.executed.append((query, params))
        if driver.fail is not None:
            raise driver.fail
        self.description = None if driver.rows is None else [("Id",)]

    def fetchall(self) -> list[dict[str, Any]]:
        return list(self.conn.driver.rows or [])


class FakeConnection:
    """Minimal DB-API connection, enough for SQLAlchemy's QueuePool."""

    def __init__(self, driver: "FakeDriver", database: str) -> None:
        self.driver = driver
        self.database = database
        self.executed: list[tuple[str, Any]] = []
        self.cursors_closed = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def rollback(self) -> None:
        self.rollbacks += 1

    def commit(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


class FakeDriver:
    """Stands in for psycopg.connect; `rows`/`fail` drive every cursor."""

    def __init__(self) -> None:
        self.rows: Optional[list[dict[str, Any]]] = None
        self.fail: Optional[Exception] = None
        self.connections: list[FakeConnection] = []

    def connect(self, database: str) -> FakeConnection:
        conn = FakeConnection(self, database)
        self.connections.append(conn)
        return conn

    @property
    def executed(self) -> list[tuple[str, Any]]:
        return [item for conn in self.connections for item in conn.executed]


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def app(gateway: FakeGateway):
    app = create_app(config_overrides={"TESTING": True}, gateway=gateway)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def db_gateway(driver: FakeDriver) -> DatabaseGateway:
    """Real gateway (real QueuePool) over the fake driver."""
    gateway = DatabaseGateway(connect=driver.connect)
    yield gateway
    gateway.dispose()
