"""Score an applicant's answers and record the immutable outcome."""
from datetime import datetime, timezone
from collections.abc import Mapping
from typing import Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, NotFoundError, ValidationError
from ..extensions import db
from ..models.evaluation_outcome import EvaluationOutcome
from . import directory, question_store
from .persistence import storage_guard


def compute_score(questions, answers: Mapping) -> int:
    """One point per question whose selected option equals its correct answer.

    ``answers`` keys may be ints or numeric strings (JSON object keys).
    Unanswered questions score 0 but still count toward the total.
    """
    selected = {str(k): v for k, v in answers.items()}
    return sum(1 for q in questions if selected.get(str(q.id)) == q.correct_answer)


def get_outcome(applicant_id: int) -> Optional[EvaluationOutcome]:
    with storage_guard("load evaluation outcome"):
        return EvaluationOutcome.query.filter_by(applicant_id=applicant_id).first()


def submit(job_id: int, applicant_id: int, answers: Optional[Mapping]) -> EvaluationOutcome:
    if answers is None:
        answers = {}
    if not isinstance(answers, Mapping):
        raise ValidationError("answers must map question ids to options")

    job = directory.get_job(job_id)
    if job is None:
        raise NotFoundError("job not found", {"job_id": job_id})
    applicant = directory.get_applicant(applicant_id)
    if applicant is None or applicant.job_id != job.id:
        raise NotFoundError("applicant not found for job", {"job_id": job_id, "applicant_id": applicant_id})

    if get_outcome(applicant.id) is not None:
        current_app.logger.warning('duplicate evaluation submission for applicant %s', applicant.id)
        raise ConflictError("evaluation already submitted")

    # denominator is the active set right now, not a snapshot from test start
    questions = question_store.list_active(job.id)
    score = compute_score(questions, answers)

    outcome = EvaluationOutcome(
        applicant_id=applicant.id,
        job_id=job.id,
        score=score,
        total=len(questions),
        answers={str(k): v for k, v in answers.items()},
        submitted_at=datetime.now(timezone.utc),
    )
    with storage_guard("record evaluation outcome"):
        db.session.add(outcome)
        try:
            db.session.commit()
        except IntegrityError as e:
            # a concurrent submission won the unique key on applicant_id
            db.session.rollback()
            current_app.logger.warning('concurrent evaluation submission for applicant %s', applicant.id)
            raise ConflictError("evaluation already submitted") from e
    current_app.logger.info('evaluation recorded for applicant %s: %s/%s', applicant.id, outcome.score, outcome.total)
    return outcome


def withdraw(applicant_id: int) -> None:
    """Delete an applicant's outcome so the evaluation can be taken again."""
    outcome = get_outcome(applicant_id)
    if outcome is None:
        raise NotFoundError("no evaluation for applicant", {"applicant_id": applicant_id})
    with storage_guard("withdraw evaluation outcome"):
        db.session.delete(outcome)
        db.session.commit()
    current_app.logger.info('evaluation withdrawn for applicant %s', applicant_id)
