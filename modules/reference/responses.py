# -*- coding: utf-8 -*-
"""JSON-конверт відповідей API: {success, data|message, error?, message?}."""

from flask import current_app, jsonify, request


def ok(data=None, message=None, status=200):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return jsonify(body), status


def created(message):
    return ok(message=message, status=201)


def fail(error, message=None, status=400):
    body = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    return jsonify(body), status


def not_found(error):
    return fail(error, status=404)


def invalid_form(form, required_message):
    """
    400 для форми, що не пройшла валідацію.
    Порожні обов'язкові поля -> "Missing required fields" з текстом як у старій панелі,
    інші помилки (діапазони, формати) -> "Invalid <field>".
    """
    errors = {name: list(msgs) for name, msgs in (form.errors or {}).items() if name}
    current_app.logger.warning("%s %s errors=%s payload=%s",
                               request.method, request.path, errors, request.get_json(silent=True))

    missing = [name for name in errors if getattr(form, name).flags.required and _is_blank(getattr(form, name))]
    if missing:
        return fail("Missing required fields", required_message)

    if not errors:
        return fail("Invalid request", "; ".join(form.form_errors))
    name = next(iter(errors))
    return fail(f"Invalid {name}", "; ".join(errors[name]))


def failed(action, exc):
    current_app.logger.exception("Failed to %s", action)
    return fail(f"Failed to {action}", str(exc) or "Unknown error", status=500)


def _is_blank(field):
    if field.raw_data is None or not field.raw_data:
        return True
    value = field.raw_data[0]
    return value is None or (isinstance(value, str) and not value.strip())
