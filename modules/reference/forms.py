# -*- coding: utf-8 -*-
"""
Спільні шматки для JSON-форм довідників.
Тіло запиту (JSON-об'єкт) подається у FlaskForm як formdata, CSRF для API вимкнений.
"""

from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import ImmutableMultiDict
from werkzeug.exceptions import BadRequest
from wtforms import BooleanField, IntegerField
from wtforms.validators import StopValidation


class InvalidField(BadRequest):
    """Значення поля у JSON не скалярне (список/об'єкт)."""

    def __init__(self, field, description):
        super().__init__(description)
        self.field = field


def json_formdata():
    payload = request.get_json()
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object")
    # MultiDict розгорнув би список у кілька значень, а поле взяло б тільки перше
    for key, value in payload.items():
        if isinstance(value, (list, dict)):
            raise InvalidField(key, f"Expected a single value, got {type(value).__name__}")
    return ImmutableMultiDict(payload)


class ApiForm(FlaskForm):
    class Meta:
        csrf = False


class Present:
    """Ключ є і не null/"". На відміну від InputRequired, 0 пропускає далі (до NumberRange)."""

    field_flags = {"required": True}

    def __call__(self, form, field):
        if field.raw_data and field.raw_data[0] is not None and field.raw_data[0] != "":
            return
        field.errors[:] = []
        raise StopValidation(field.gettext("This field is required."))


# ───────────────────────────── Фільтри ─────────────────────────────

def strip(value):
    if value is None:
        return None
    return str(value).strip()


def upper(value):
    return value.upper() if value else value


def none_if_empty(value):
    return value or None


# ───────────────────────────── Поля ─────────────────────────────

class JsonIntegerField(IntegerField):
    """IntegerField, що приймає число з JSON; null/"" -> None (а не TypeError)."""

    def process_formdata(self, valuelist):
        if not valuelist or valuelist[0] is None or valuelist[0] == "":
            self.data = None
            return
        value = valuelist[0]
        # int(True) == 1, int(2.9) == 2: такі значення не обрізаємо, а відхиляємо
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            self.data = None
            raise ValueError(self.gettext("Not a valid integer value."))
        super().process_formdata(valuelist)


class ActiveFlagField(BooleanField):
    """isActive: відсутнє значення лишає default, JSON false/"false"/0 -> False."""

    false_values = (False, "false", "False", "0", 0, "")

    def process_formdata(self, valuelist):
        if not valuelist or valuelist[0] is None:
            return
        self.data = valuelist[0] not in self.false_values
