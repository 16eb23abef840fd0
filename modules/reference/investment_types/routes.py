# modules/reference/investment_types/routes.py
from flask import Blueprint

from extensions import get_gateway
from modules.reference.forms import json_formdata
from modules.reference.responses import created, failed, invalid_form, not_found, ok
from .forms import InvestmentTypeForm

bp = Blueprint("investment_types", __name__, url_prefix="/api/investment/type")

FETCH_FUNCTION = "public.FetchInvestmentTypes"
INSERT_PROCEDURE = "public.InsertInvestmentType"
REQUIRED_MESSAGE = "Short code and investment segment are required"


@bp.get("")
def index():
    try:
        types = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch investment types", e)
    return ok(types)


@bp.get("/<int:id>")
def detail(id):
    try:
        types = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch investment type", e)

    investment_type = next((t for t in types if t.get("Id") == id), None)
    if investment_type is None:
        return not_found("Investment type not found")
    return ok(investment_type)


@bp.post("")
def create():
    form = InvestmentTypeForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        get_gateway().call_procedure(INSERT_PROCEDURE, [
            form.shortCode.data,
            form.description.data,
            form.investmentSegmentId.data,
            None,  # p_category: сегмент передаємо через id
            form.isActive.data,
        ])
    except Exception as e:
        return failed("create investment type", e)
    return created("Investment type created successfully")


@bp.put("/<int:id>")
def update(id):
    form = InvestmentTypeForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        rows = get_gateway().query(
            """
            UPDATE public."InvestmentTypes"
            SET "InvestmentId" = $1, "ShortCode" = $2, "Description" = $3, "IsActive" = $4, "UpdatedAt" = NOW()
            WHERE "Id" = $5
            RETURNING "Id"
            """,
            [form.investmentSegmentId.data, form.shortCode.data, form.description.data, form.isActive.data, id],
        )
    except Exception as e:
        return failed("update investment type", e)

    if not rows:
        return not_found("Investment type not found")
    return ok(message="Investment type updated successfully")


@bp.delete("/<int:id>")
def delete(id):
    try:
        rows = get_gateway().query('DELETE FROM public."InvestmentTypes" WHERE "Id" = $1 RETURNING "Id"', [id])
    except Exception as e:
        return failed("delete investment type", e)

    if not rows:
        return not_found("Investment type not found")
    return ok(message="Investment type deleted successfully")
