from ..extensions import db
from .base import TimestampMixin

class Applicant(db.Model, TimestampMixin):
    """Application record. Owned by the applications service, read-only here."""
    __tablename__ = "applicants"

    id = db.Column(db.Integer, primary_key=True)
    job_id = db.Column(db.Integer, db.ForeignKey("jobs.id"), nullable=False, index=True)
    full_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(254), index=True)
    # empty means "use the job's department"
    department = db.Column(db.String(120))

    status = db.Column(db.String(30), default="applied", index=True)  # applied/screening/hired/rejected
    applied_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    has_resume = db.Column(db.Boolean, default=False, nullable=False)
    has_cover_letter = db.Column(db.Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Applicant id={self.id} name={self.full_name!r}>"
