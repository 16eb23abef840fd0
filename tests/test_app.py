"""Application factory: config wiring and framework errors under /api."""

from __future__ import annotations

from app import create_app
from extensions import EXTENSION_KEY


def test_factory_attaches_injected_gateway(app, gateway) -> None:
    assert app.extensions[EXTENSION_KEY] is gateway


def test_config_overrides_reach_gateway(gateway) -> None:
    create_app(config_overrides={"PG_DEFAULT_DB": "refdata", "PG_POOL_SIZE": 3}, gateway=gateway)

    assert gateway.default_database == "refdata"
    assert gateway.pool_size == 3


def test_index_lists_api_routes(client) -> None:
    routes = client.get("/").get_json()["data"]

    assert "/api/country" in routes
    assert "/api/investment/type/<int:id>" in routes


def test_unknown_api_route_uses_envelope(client) -> None:
    resp = client.get("/api/planet")

    assert resp.status_code == 404
    body = resp.get_json()
    assert body["success"] is False
    assert body["error"] == "Not Found"


def test_wrong_method_uses_envelope(client) -> None:
    resp = client.patch("/api/currency/1", json={})

    assert resp.status_code == 405
    assert resp.get_json()["error"] == "Method Not Allowed"


def test_malformed_json_is_400(client, gateway) -> None:
    resp = client.post("/api/currency", data="{not json", content_type="application/json")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert gateway.calls == []


def test_non_object_body_is_400(client, gateway) -> None:
    resp = client.post("/api/currency", json=["UAH"])

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Request body must be a JSON object"


def test_non_integer_id_is_404(client) -> None:
    assert client.get("/api/country/abc").status_code == 404


def test_routine_outside_allow_list_surfaces_as_500(client, gateway) -> None:
    gateway.routines.functions = frozenset()

    resp = client.get("/api/exchange")

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "Failed to fetch exchanges"
