"""Question bank per job opening.

Questions are never hard-deleted: ``deactivate`` clears the active flag so
the question drops out of listings and future scoring but stays on record.
"""
from typing import Iterable, List, Optional

from flask import current_app

from ..errors import NotFoundError, ValidationError
from ..extensions import db
from ..models.job import Job
from ..models.question import Question
from .persistence import storage_guard


def clean_options(raw_options: Optional[Iterable]) -> List[str]:
    """Trim every option and drop the blank ones. Duplicates are kept.

    Anything but a list or tuple counts as no options at all; a bare string
    must not be split into characters.
    """
    if not isinstance(raw_options, (list, tuple)):
        return []
    cleaned = []
    for opt in raw_options:
        if opt is None:
            continue
        s = str(opt).strip()
        if s:
            cleaned.append(s)
    return cleaned


def validate_question(question_text, raw_options, raw_correct_answer):
    """Run the authoring checks in order; the first failure wins.

    Returns the normalized ``(question, options, correct_answer)`` triple.
    """
    question = question_text.strip() if isinstance(question_text, str) else ""
    if not question:
        raise ValidationError("question required")

    options = clean_options(raw_options)
    if len(options) < 2:
        raise ValidationError("at least 2 options required")

    # options are stringified above, so a numeric answer compares the same way
    correct = "" if raw_correct_answer is None else str(raw_correct_answer).strip()
    if correct not in options:
        raise ValidationError("correct answer must match an option")
    return question, options, correct


def list_active(job_id: Optional[int] = None) -> List[Question]:
    with storage_guard("list questions"):
        query = Question.query.filter_by(is_active=True)
        if job_id is not None:
            query = query.filter_by(job_id=job_id)
        return query.order_by(Question.id.asc()).all()


def get(question_id: int) -> Question:
    """Fetch a question whether active or not."""
    with storage_guard("load question"):
        q = Question.query.filter_by(id=question_id).first()
    if q is None:
        raise NotFoundError("question not found", {"question_id": question_id})
    return q


def create(job_id: int, question_text, raw_options, raw_correct_answer) -> Question:
    with storage_guard("create question"):
        job = Job.query.filter_by(id=job_id).first()
    if job is None:
        raise NotFoundError("job not found", {"job_id": job_id})

    question, options, correct = validate_question(question_text, raw_options, raw_correct_answer)

    with storage_guard("create question"):
        q = Question(job_id=job.id, question=question, options=options,
                     correct_answer=correct, is_active=True)
        db.session.add(q)
        db.session.commit()
    current_app.logger.info('question %s created for job %s (%d options)', q.id, job.id, len(options))
    return q


def deactivate(question_id: int) -> Question:
    q = get(question_id)
    if not q.is_active:
        return q
    with storage_guard("deactivate question"):
        q.is_active = False
        db.session.commit()
    current_app.logger.info('question %s deactivated', q.id)
    return q
