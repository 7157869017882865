"""Read-only view of the job and applicant records owned by other services."""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func

from ..extensions import db
from ..models.applicant import Applicant
from ..models.evaluation_outcome import EvaluationOutcome
from ..models.job import Job
from .persistence import storage_guard


@dataclass(frozen=True)
class JobSummary:
    id: int
    title: str
    department: str
    employment_type: str
    status: str
    applicants: int = 0


@dataclass(frozen=True)
class ApplicantView:
    id: int
    name: str
    email: str
    job_id: int
    job_title: str
    department: str
    status: str
    applied_at: Optional[datetime] = None
    has_resume: bool = False
    has_cover_letter: bool = False


def list_jobs() -> List[JobSummary]:
    with storage_guard("list jobs"):
        counts = dict(
            db.session.query(Applicant.job_id, func.count(Applicant.id))
            .group_by(Applicant.job_id)
            .all()
        )
        jobs = Job.query.order_by(Job.id.asc()).all()
    return [
        JobSummary(
            id=j.id,
            title=j.title,
            department=j.department or "",
            employment_type=j.employment_type or "",
            status=j.status or "Inactive",
            applicants=int(counts.get(j.id, 0)),
        )
        for j in jobs
    ]


def get_job(job_id) -> Optional[Job]:
    with storage_guard("load job"):
        return Job.query.filter_by(id=job_id).first()


def get_applicant(applicant_id) -> Optional[Applicant]:
    with storage_guard("load applicant"):
        return Applicant.query.filter_by(id=applicant_id).first()


def _to_view(a: Applicant, job: Optional[Job]) -> ApplicantView:
    return ApplicantView(
        id=a.id,
        name=a.full_name or "Unknown",
        email=a.email or "",
        job_id=a.job_id,
        job_title=job.title if job else "",
        # applicant override first, job department as fallback
        department=a.department or (job.department if job else "") or "",
        status=a.status or "applied",
        applied_at=a.applied_at,
        has_resume=bool(a.has_resume),
        has_cover_letter=bool(a.has_cover_letter),
    )


def list_applicants(job_id: Optional[int] = None) -> List[ApplicantView]:
    """Applicants newest first, optionally restricted to one job."""
    with storage_guard("list applicants"):
        query = Applicant.query
        if job_id is not None:
            query = query.filter_by(job_id=job_id)
        rows = query.order_by(Applicant.applied_at.desc(), Applicant.id.desc()).all()
        job_ids = {a.job_id for a in rows}
        jobs = {j.id: j for j in Job.query.filter(Job.id.in_(job_ids)).all()} if job_ids else {}
    return [_to_view(a, jobs.get(a.job_id)) for a in rows]


def load_outcomes(applicant_ids: Iterable[int]) -> Dict[int, EvaluationOutcome]:
    ids = list(applicant_ids)
    if not ids:
        return {}
    with storage_guard("load evaluation outcomes"):
        rows = EvaluationOutcome.query.filter(EvaluationOutcome.applicant_id.in_(ids)).all()
    return {o.applicant_id: o for o in rows}


def count_pending_evaluations() -> int:
    """Applicants that have not submitted an evaluation yet."""
    with storage_guard("count pending evaluations"):
        return (
            db.session.query(func.count(Applicant.id))
            .outerjoin(EvaluationOutcome, EvaluationOutcome.applicant_id == Applicant.id)
            .filter(EvaluationOutcome.id.is_(None))
            .scalar()
        ) or 0
