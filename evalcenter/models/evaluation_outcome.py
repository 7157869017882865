from sqlalchemy import event

from ..errors import ConflictError
from ..extensions import db

class EvaluationOutcome(db.Model):
    __tablename__ = "evaluation_outcomes"

    id = db.Column(db.Integer, primary_key=True)
    applicant_id = db.Column(db.Integer, db.ForeignKey("applicants.id"), nullable=False)
    job_id = db.Column(db.Integer, db.ForeignKey("jobs.id"), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)
    total = db.Column(db.Integer, nullable=False)
    answers = db.Column(db.JSON)  # {"<question id>": "<selected option>"} as submitted
    submitted_at = db.Column(db.DateTime, nullable=False)

    __table_args__ = (
        db.UniqueConstraint('applicant_id', name='uq_evaluation_outcomes_applicant'),
        db.CheckConstraint('score >= 0 AND score <= total', name='ck_evaluation_outcomes_score_range'),
    )

    def __repr__(self) -> str:
        return f"<EvaluationOutcome applicant_id={self.applicant_id} score={self.score}/{self.total}>"


@event.listens_for(EvaluationOutcome, "before_update")
def _refuse_update(mapper, connection, target):
    raise ConflictError("evaluation outcome is immutable; withdraw it before re-scoring")
