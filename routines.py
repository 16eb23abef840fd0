# -*- coding: utf-8 -*-
"""
Білий список збережених процедур/функцій і побудова виразів виклику.

Імена приходять у вигляді "schema.Name" і рендеряться через identifier preparer
діалекту PostgreSQL: public.InsertCountry -> public."InsertCountry".
Плейсхолдери нативні для PostgreSQL ($1, $2, ...).
"""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.dialects.postgresql.base import PGDialect

_preparer = PGDialect().identifier_preparer


class RoutineNotAllowed(ValueError):
    """Ім'я процедури/функції відсутнє у білому списку."""


# ───────────────────────────── Контракт БД ─────────────────────────────

PROCEDURES = (
    "public.InsertCurrency",
    "public.InsertCountry",
    "public.InsertStockExchange",
    "public.InsertInvestmentSegment",
    "public.InsertInvestmentType",
)

FUNCTIONS = (
    "public.FetchCountries",
    "public.FetchExchange",
    "public.FetchInvestmentSegments",
    "public.FetchInvestmentTypes",
)


# ───────────────────────────── Helpers ─────────────────────────────

def _split(name: str) -> tuple[str, str]:
    schema, sep, routine = (name or "").partition(".")
    if not sep or not schema or not routine or "." in routine:
        raise RoutineNotAllowed(f"Expected 'schema.Name', got {name!r}")
    return schema, routine


def quote_routine(name: str) -> str:
    schema, routine = _split(name)
    return f"{_preparer.quote(schema)}.{_preparer.quote(routine)}"


def placeholders(count: int) -> str:
    return ", ".join(f"${i}" for i in range(1, count + 1))


# ───────────────────────────── Реєстр ─────────────────────────────

class RoutineRegistry:
    """Дозволені процедури та функції; будує SQL тільки для них."""

    def __init__(self, procedures: Iterable[str] = (), functions: Iterable[str] = ()):
        self.procedures = frozenset(procedures)
        self.functions = frozenset(functions)
        # зламане ім'я в реєстрі: помилка конфігурації
        for name in self.procedures | self.functions:
            _split(name)

    def procedure_call(self, name: str, param_count: int) -> str:
        if name not in self.procedures:
            raise RoutineNotAllowed(f"Procedure {name!r} is not allowed")
        return f"CALL {quote_routine(name)}({placeholders(param_count)})"

    def function_call(self, name: str, param_count: int) -> str:
        if name not in self.functions:
            raise RoutineNotAllowed(f"Function {name!r} is not allowed")
        return f"SELECT * FROM {quote_routine(name)}({placeholders(param_count)})"


def default_registry() -> RoutineRegistry:
    return RoutineRegistry(PROCEDURES, FUNCTIONS)
