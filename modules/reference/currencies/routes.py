# modules/reference/currencies/routes.py
from flask import Blueprint

from extensions import get_gateway
from modules.reference.forms import json_formdata
from modules.reference.responses import created, failed, invalid_form, not_found, ok
from .forms import CurrencyForm

bp = Blueprint("currencies", __name__, url_prefix="/api/currency")

INSERT_PROCEDURE = "public.InsertCurrency"
REQUIRED_MESSAGE = "Name, currencyCode, and currencySymbol are required"


@bp.get("")
def index():
    try:
        currencies = get_gateway().query('SELECT * FROM public."CurrencyMaster" ORDER BY "Id" DESC')
    except Exception as e:
        return failed("fetch currencies", e)
    return ok(currencies)


@bp.get("/<int:id>")
def detail(id):
    try:
        rows = get_gateway().query('SELECT * FROM public."CurrencyMaster" WHERE "Id" = $1', [id])
    except Exception as e:
        return failed("fetch currency", e)

    if not rows:
        return not_found("Currency not found")
    return ok(rows[0])


@bp.post("")
def create():
    form = CurrencyForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        get_gateway().call_procedure(INSERT_PROCEDURE, [
            form.name.data,
            form.currencyCode.data,
            form.currencySymbol.data,
            form.isActive.data,
        ])
    except Exception as e:
        return failed("create currency", e)
    return created("Currency created successfully")


@bp.put("/<int:id>")
def update(id):
    form = CurrencyForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        rows = get_gateway().query(
            """
            UPDATE public."CurrencyMaster"
            SET "Name" = $1, "CurrencyCode" = $2, "CurrencySymbol" = $3, "IsActive" = $4, "UpdatedAt" = NOW()
            WHERE "Id" = $5
            RETURNING "Id"
            """,
            [form.name.data, form.currencyCode.data, form.currencySymbol.data, form.isActive.data, id],
        )
    except Exception as e:
        return failed("update currency", e)

    if not rows:
        return not_found("Currency not found")
    return ok(message="Currency updated successfully")


@bp.delete("/<int:id>")
def delete(id):
    try:
        rows = get_gateway().query('DELETE FROM public."CurrencyMaster" WHERE "Id" = $1 RETURNING "Id"', [id])
    except Exception as e:
        # валюта, на яку посилаються країни, не видаляється (FK)
        return failed("delete currency", e)

    if not rows:
        return not_found("Currency not found")
    return ok(message="Currency deleted successfully")
