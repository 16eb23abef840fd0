from wtforms import StringField
from wtforms.validators import DataRequired, Length, Optional

from modules.reference.forms import ApiForm, ActiveFlagField, none_if_empty, strip


class InvestmentSegmentForm(ApiForm):
    category = StringField("Category", validators=[DataRequired(), Length(max=100)], filters=[strip])
    description = StringField("Description", validators=[Optional(), Length(max=500)], filters=[strip, none_if_empty])
    isActive = ActiveFlagField("Active", default=True)
