# modules/reference/countries/routes.py
from flask import Blueprint

from extensions import get_gateway
from modules.reference.forms import json_formdata
from modules.reference.responses import created, fail, failed, invalid_form, not_found, ok
from .forms import CountryForm

bp = Blueprint("countries", __name__, url_prefix="/api/country")

FETCH_FUNCTION = "public.FetchCountries"
INSERT_PROCEDURE = "public.InsertCountry"
REQUIRED_MESSAGE = "Name, isoCode, currencyCode, and countryCode are required"

# ───────────────────────────── Helpers ─────────────────────────────

def _currency_id(gateway, currency_code):
    """Id валюти за кодом або None, якщо такої немає в CurrencyMaster."""
    rows = gateway.query(
        'SELECT "Id" FROM public."CurrencyMaster" WHERE "CurrencyCode" = $1',
        [currency_code],
    )
    return rows[0]["Id"] if rows else None


def _invalid_currency():
    return fail("Invalid currency code", "Please update the value in Currency Table.")

# ───────────────────────────── API ─────────────────────────────

@bp.get("")
def index():
    try:
        countries = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch countries", e)
    return ok(countries)


@bp.get("/<int:id>")
def detail(id):
    try:
        countries = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch country", e)

    country = next((c for c in countries if c.get("Id") == id), None)
    if country is None:
        return not_found("Country not found")
    return ok(country)


@bp.post("")
def create():
    form = CountryForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    gateway = get_gateway()
    try:
        # процедура приймає код валюти, але невідомий код відсікаємо ще до запису
        if _currency_id(gateway, form.currencyCode.data) is None:
            return _invalid_currency()

        gateway.call_procedure(INSERT_PROCEDURE, [
            form.name.data,
            form.isoCode.data,
            form.currencyCode.data,
            form.countryCode.data,
            form.isActive.data,
        ])
    except Exception as e:
        return failed("create country", e)
    return created("Country created successfully")


@bp.put("/<int:id>")
def update(id):
    form = CountryForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    gateway = get_gateway()
    try:
        currency_id = _currency_id(gateway, form.currencyCode.data)
        if currency_id is None:
            return _invalid_currency()

        rows = gateway.query(
            """
            UPDATE public."Country"
            SET "Name" = $1, "IsoCode" = $2, "CurrencyId" = $3, "CountryCode" = $4, "IsActive" = $5, "UpdatedAt" = NOW()
            WHERE "Id" = $6
            RETURNING "Id"
            """,
            [form.name.data, form.isoCode.data, currency_id, form.countryCode.data, form.isActive.data, id],
        )
    except Exception as e:
        return failed("update country", e)

    if not rows:
        return not_found("Country not found")
    return ok(message="Country updated successfully")


@bp.delete("/<int:id>")
def delete(id):
    try:
        rows = get_gateway().query('DELETE FROM public."Country" WHERE "Id" = $1 RETURNING "Id"', [id])
    except Exception as e:
        return failed("delete country", e)

    if not rows:
        return not_found("Country not found")
    return ok(message="Country deleted successfully")
