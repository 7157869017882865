from ..extensions import db
from .base import TimestampMixin

JOB_STATUSES = ("Active", "Inactive", "Closed")

class Job(db.Model, TimestampMixin):
    """Job opening. Owned by the job-posting service, read-only here."""
    __tablename__ = "jobs"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    department = db.Column(db.String(120))
    employment_type = db.Column(db.String(50))  # Full-time/Part-time/Contract
    status = db.Column(db.String(20), default="Active", index=True)  # Active/Inactive/Closed

    def __repr__(self) -> str:
        return f"<Job id={self.id} title={self.title!r}>"
