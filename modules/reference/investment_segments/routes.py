from flask import Blueprint

from extensions import get_gateway
from modules.reference.forms import json_formdata
from modules.reference.responses import created, failed, invalid_form, not_found, ok
from .forms import InvestmentSegmentForm

bp = Blueprint("investment_segments", __name__, url_prefix="/api/investment/segment")

FETCH_FUNCTION = "public.FetchInvestmentSegments"
INSERT_PROCEDURE = "public.InsertInvestmentSegment"
REQUIRED_MESSAGE = "Category is required"


@bp.get("")
def index():
    try:
        segments = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch investment segments", e)
    return ok(segments)


@bp.get("/<int:id>")
def detail(id):
    try:
        segments = get_gateway().call_function(FETCH_FUNCTION)
    except Exception as e:
        return failed("fetch investment segment", e)

    segment = next((s for s in segments if s.get("Id") == id), None)
    if segment is None:
        return not_found("Investment segment not found")
    return ok(segment)


@bp.post("")
def create():
    form = InvestmentSegmentForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        get_gateway().call_procedure(INSERT_PROCEDURE, [
            form.category.data,
            form.description.data,
            form.isActive.data,
        ])
    except Exception as e:
        return failed("create investment segment", e)
    return created("Investment segment created successfully")


@bp.put("/<int:id>")
def update(id):
    form = InvestmentSegmentForm(formdata=json_formdata())
    if not form.validate():
        return invalid_form(form, REQUIRED_MESSAGE)

    try:
        rows = get_gateway().query(
            """
            UPDATE public."InvestmentSegments"
            SET "Category" = $1, "Description" = $2, "IsActive" = $3, "UpdatedAt" = NOW()
            WHERE "Id" = $4
            RETURNING "Id"
            """,
            [form.category.data, form.description.data, form.isActive.data, id],
        )
    except Exception as e:
        return failed("update investment segment", e)

    if not rows:
        return not_found("Investment segment not found")
    return ok(message="Investment segment updated successfully")


@bp.delete("/<int:id>")
def delete(id):
    try:
        rows = get_gateway().query('DELETE FROM public."InvestmentSegments" WHERE "Id" = $1 RETURNING "Id"', [id])
    except Exception as e:
        return failed("delete investment segment", e)

    if not rows:
        return not_found("Investment segment not found")
    return ok(message="Investment segment deleted successfully")
