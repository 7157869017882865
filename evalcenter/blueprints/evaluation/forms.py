from wtforms import Form, StringField, SelectField
from wtforms.validators import Length
from ...models.job import JOB_STATUSES

class JobFilterForm(Form):
    q = StringField("Search", default="", validators=[Length(max=200)])
    status = SelectField("Status", choices=[("all", "All Status")] + [(s, s) for s in JOB_STATUSES], default="all")

class ApplicantFilterForm(Form):
    q = StringField("Search", default="", validators=[Length(max=200)])
    department = StringField("Department", default="all")
    tab = SelectField("Tab", choices=[("all", "All"), ("pending", "Pending"), ("completed", "Completed")], default="all")
