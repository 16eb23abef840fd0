from wtforms import StringField
from wtforms.validators import DataRequired, Length, Regexp

from modules.reference.forms import ApiForm, ActiveFlagField, strip, upper


class CurrencyForm(ApiForm):
    name = StringField("Name", validators=[DataRequired(), Length(max=100)], filters=[strip])
    # ISO 4217
    currencyCode = StringField(
        "Currency code",
        validators=[DataRequired(), Regexp(r"^[A-Z]{3}$", message="Currency code must be 3 letters")],
        filters=[strip, upper],
    )
    currencySymbol = StringField("Symbol", validators=[DataRequired(), Length(max=10)], filters=[strip])
    isActive = ActiveFlagField("Active", default=True)
