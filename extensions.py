# -*- coding: utf-8 -*-
"""
Шлюз доступу до БД: по одному пулу з'єднань на кожну назву бази.

Об'єкт створюється у create_app() і живе в app.extensions["db_gateway"];
хендлери отримують його через get_gateway(), тести підставляють свій.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional, Sequence

import psycopg
from flask import current_app
from psycopg.rows import dict_row
from sqlalchemy.pool import QueuePool

from routines import RoutineRegistry, default_registry

EXTENSION_KEY = "db_gateway"

Row = Dict[str, Any]


class DatabaseGateway:
    def __init__(
        self,
        app=None,
        routines: Optional[RoutineRegistry] = None,
        connect: Optional[Callable[[str], Any]] = None,
    ):
        self.routines = routines or default_registry()
        # connect(database) -> DB-API з'єднання; за замовчуванням psycopg
        self._connect = connect or self._psycopg_connect
        self._pools: Dict[str, QueuePool] = {}

        self.host = "localhost"
        self.port = 5432
        self.user = None
        self.password = None
        self.default_database = "postgres"
        self.pool_size = 5
        self.max_overflow = 10
        self.pool_timeout = 30

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        cfg = app.config
        self.host = cfg.get("PG_HOST", self.host)
        self.port = int(cfg.get("PG_PORT", self.port))
        self.user = cfg.get("PG_USERNAME", self.user)
        self.password = cfg.get("PG_PASSWORD", self.password)
        self.default_database = cfg.get("PG_DEFAULT_DB") or self.default_database
        self.pool_size = int(cfg.get("PG_POOL_SIZE", self.pool_size))
        self.max_overflow = int(cfg.get("PG_MAX_OVERFLOW", self.max_overflow))
        self.pool_timeout = int(cfg.get("PG_POOL_TIMEOUT", self.pool_timeout))
        app.extensions[EXTENSION_KEY] = self

    # ───────────────────────────── Пули ─────────────────────────────

    def _psycopg_connect(self, database: str):
        return psycopg.connect(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            dbname=database,
            autocommit=True,
            row_factory=dict_row,
            cursor_factory=psycopg.RawCursor,  # $1, $2 ... як є
        )

    def get_pool(self, db_name: Optional[str] = None) -> QueuePool:
        database = db_name or self.default_database
        pool = self._pools.get(database)
        if pool is None:
            pool = QueuePool(
                lambda: self._connect(database),
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                timeout=self.pool_timeout,
            )
            # пул лінивий: якщо інший потік встиг першим, наш ще не підключався
            pool = self._pools.setdefault(database, pool)
        return pool

    @property
    def databases(self) -> List[str]:
        return sorted(self._pools)

    def dispose(self):
        for pool in list(self._pools.values()):
            pool.dispose()

    @contextmanager
    def connection(self, db_name: Optional[str] = None):
        conn = self.get_pool(db_name).connect()
        try:
            yield conn
        finally:
            conn.close()  # повертає з'єднання в пул

    # ───────────────────────────── Операції ─────────────────────────────

    def query(self, query: str, params: Optional[Sequence[Any]] = None,
              db_name: Optional[str] = None) -> List[Row]:
        with self.connection(db_name) as conn:
            with conn.cursor() as cur:
                cur.execute(query, tuple(params) if params else None)
                if cur.description is None:
                    return []
                return list(cur.fetchall())

    def call_procedure(self, name: str, params: Optional[Sequence[Any]] = None,
                       db_name: Optional[str] = None) -> None:
        params = list(params or [])
        statement = self.routines.procedure_call(name, len(params))
        self.query(statement, params, db_name)

    def call_function(self, name: str, params: Optional[Sequence[Any]] = None,
                      db_name: Optional[str] = None) -> List[Row]:
        params = list(params or [])
        statement = self.routines.function_call(name, len(params))
        return self.query(statement, params, db_name)


def get_gateway() -> DatabaseGateway:
    return current_app.extensions[EXTENSION_KEY]
