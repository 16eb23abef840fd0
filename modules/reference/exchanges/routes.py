# -*- coding: utf-8 -*-
"""Біржі (StockExchanges). Кожна біржа прив'язана до країни."""

from __future__ import annotations

from flask import Blueprint

from extensions import get_gateway
from modules.reference.forms import json_formdata
from modules.reference.responses import created, failed, invalid_form, not_found, ok
from .forms import ExchangeForm

bp = Blueprint("exchanges", __name__, url_prefix="/api/exchange")

FETCH_FUNCTION = "public.FetchExchange"
INSERT_PROCEDURE = "public.InsertStockExchange"
REQUIRED_MESSAGE = "Country, Exchange Code, Name, and ISO MIC are required fields"


def _params(form: ExchangeForm) -> list:
    """Порядок як у InsertStockExchange та в UPDATE нижче."""
    return [
        form.countryId.data,
        form.exchangeCode.data,
        form.name.data,
        form.isoMic.data,
        form.description.data,
        form.bloombergCode.data,
        form.eodCode.data,
        form.isActive.data,
    ]


@bp.get("")
def index():
    try:
        exchanges = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch exchanges", e)
    return ok(exchanges)


@bp.get("/<int:id>")
def detail(id: int):
    try:
        exchanges = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch exchange", e)

    exchange = next((x for x in exchanges if x.get("Id") == id), None)
    if exchange is None:
        return not_found("Exchange not found")
    return ok(exchange)


@bp.post("")
def create():
    form = ExchangeForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        get_gateway().call_procedure(INSERT_PROCEDURE, _params(form))
    except Exception as e:
        return failed("create exchange", e)
    return created("Exchange created successfully")


@bp.put("/<int:id>")
def update(id: int):
    form = ExchangeForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        rows = get_gateway().query(
            """
            UPDATE public."StockExchanges"
            SET
              "CountryId" = $1,
              "ExchangeCode" = $2,
              "Name" = $3,
              "IsoMic" = $4,
              "Description" = $5,
              "BloombergCode" = $6,
              "EodCode" = $7,
              "IsActive" = $8,
              "UpdatedAt" = NOW()
            WHERE "Id" = $9
            RETURNING "Id"
            """,
            _params(form) + [id],
        )
    except Exception as e:
        return failed("update exchange", e)

    if not rows:
        return not_found("Exchange not found")
    return ok(message="Exchange updated successfully")


@bp.delete("/<int:id>")
def delete(id: int):
    try:
        rows = get_gateway().query('DELETE FROM public."StockExchanges" WHERE "Id" = $1 RETURNING "Id"', [id])
    except Exception as e:
        return failed("delete exchange", e)

    if not rows:
        return not_found("Exchange not found")
    return ok(message="Exchange deleted successfully")
