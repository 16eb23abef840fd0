from wtforms import StringField
from wtforms.validators import DataRequired, Length, NumberRange, Optional, Regexp

from modules.reference.forms import ApiForm, ActiveFlagField, JsonIntegerField, Present, none_if_empty, strip, upper


class ExchangeForm(ApiForm):
    countryId = JsonIntegerField("Country", validators=[Present(), NumberRange(min=1)])
    exchangeCode = StringField("Exchange code", validators=[DataRequired(), Length(max=20)], filters=[strip, upper])
    name = StringField("Name", validators=[DataRequired(), Length(max=200)], filters=[strip])
    # ISO 10383 market identifier code
    isoMic = StringField(
        "ISO MIC",
        validators=[DataRequired(), Regexp(r"^[A-Z0-9]{4}$", message="ISO MIC must be 4 letters or digits")],
        filters=[strip, upper],
    )
    description = StringField("Description", validators=[Optional(), Length(max=500)], filters=[strip, none_if_empty])
    bloombergCode = StringField("Bloomberg code", validators=[Optional(), Length(max=20)], filters=[strip, none_if_empty])
    eodCode = StringField("EOD code", validators=[Optional(), Length(max=20)], filters=[strip, none_if_empty])
    isActive = ActiveFlagField("Active", default=True)
