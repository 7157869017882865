from ..extensions import db
from .base import TimestampMixin

class Question(db.Model, TimestampMixin):
    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    job_id = db.Column(db.Integer, db.ForeignKey("jobs.id"), nullable=False, index=True)
    question = db.Column(db.Text, nullable=False)
    options = db.Column(db.JSON, nullable=False)  # ["A", "B", "C"]
    correct_answer = db.Column(db.String(500), nullable=False)
    # soft delete: inactive questions stay for audit
    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Question id={self.id} job_id={self.job_id} active={self.is_active}>"
