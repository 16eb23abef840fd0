from wtforms import StringField
from wtforms.validators import DataRequired, Length, NumberRange, Regexp

from modules.reference.forms import ApiForm, ActiveFlagField, JsonIntegerField, Present, strip, upper


class CountryForm(ApiForm):
    name = StringField("Name", validators=[DataRequired(), Length(max=100)], filters=[strip])
    isoCode = StringField(
        "ISO code",
        validators=[DataRequired(), Regexp(r"^[A-Z]{2,3}$", message="ISO code must be 2 or 3 letters")],
        filters=[strip, upper],
    )
    currencyCode = StringField(
        "Currency code",
        validators=[DataRequired(), Regexp(r"^[A-Z]{3}$", message="Currency code must be 3 letters")],
        filters=[strip, upper],
    )
    # ISO 3166-1 numeric: 001..999
    countryCode = JsonIntegerField("Country code", validators=[Present(), NumberRange(min=1, max=999)])
    isActive = ActiveFlagField("Active", default=True)
