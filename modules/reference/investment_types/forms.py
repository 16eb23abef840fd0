from wtforms import StringField
from wtforms.validators import DataRequired, Length, NumberRange, Optional

from modules.reference.forms import ApiForm, ActiveFlagField, JsonIntegerField, Present, none_if_empty, strip, upper


class InvestmentTypeForm(ApiForm):
    shortCode = StringField("Short code", validators=[DataRequired(), Length(max=20)], filters=[strip, upper])
    description = StringField("Description", validators=[Optional(), Length(max=500)], filters=[strip, none_if_empty])
    investmentSegmentId = JsonIntegerField("Investment segment", validators=[Present(), NumberRange(min=1)])
    isActive = ActiveFlagField("Active", default=True)
