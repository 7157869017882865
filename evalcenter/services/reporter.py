"""Dashboard aggregates over (applicant, classification) pairs and job summaries.

All functions are pure; the blueprint feeds them whatever the directory
returned and applies its own paging/ordering on top.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .classifier import Completed, Pending

UNASSIGNED = "Unassigned"
ALL = "all"
TAB_PENDING = "pending"
TAB_COMPLETED = "completed"


@dataclass(frozen=True)
class Summary:
    total: int
    pending_count: int
    completed_count: int
    departments: FrozenSet[str]
    tiers: Dict[str, int] = field(default_factory=dict)
    average_percentage: Optional[float] = None


@dataclass(frozen=True)
class JobStats:
    total_jobs: int
    total_applicants: int
    active_jobs: int
    pending_evaluations: int


def _department(applicant) -> str:
    return (getattr(applicant, "department", None) or "").strip()


def summarize(pairs: Sequence[Tuple]) -> Summary:
    pending = 0
    completed = []
    departments = set()
    for applicant, classification in pairs:
        if isinstance(classification, Completed):
            completed.append(classification)
        else:
            pending += 1
        dept = _department(applicant)
        if dept:
            departments.add(dept)

    tiers = {"high": 0, "medium": 0, "low": 0}
    for c in completed:
        tiers[c.tier] += 1
    avg = round(sum(c.percentage for c in completed) / len(completed), 1) if completed else None

    return Summary(
        total=pending + len(completed),
        pending_count=pending,
        completed_count=len(completed),
        departments=frozenset(departments),
        tiers=tiers,
        average_percentage=avg,
    )


def group_by_department(pairs: Sequence[Tuple]) -> Dict[str, List]:
    """Department name -> applicants in input order; blank departments go to "Unassigned"."""
    groups: Dict[str, List] = {}
    for applicant, _ in pairs:
        key = _department(applicant) or UNASSIGNED
        groups.setdefault(key, []).append(applicant)
    return groups


def _matches_text(applicant, query: str) -> bool:
    fields = (
        getattr(applicant, "name", None),
        getattr(applicant, "email", None),
        getattr(applicant, "job_title", None),
        getattr(applicant, "department", None),
    )
    return any(query in (f or "").lower() for f in fields)


def filter_pairs(pairs: Sequence[Tuple], search_text: str = "", department: str = ALL, tab: str = ALL) -> List[Tuple]:
    """Tab, then department, then free-text search. All three must match.

    ``department`` is compared against the same key ``group_by_department``
    uses, so "Unassigned" selects applicants with no department.
    """
    query = (search_text or "").strip().lower()
    out = []
    for applicant, classification in pairs:
        if tab == TAB_PENDING and not isinstance(classification, Pending):
            continue
        if tab == TAB_COMPLETED and not isinstance(classification, Completed):
            continue
        if department and department != ALL and (_department(applicant) or UNASSIGNED) != department:
            continue
        if query and not _matches_text(applicant, query):
            continue
        out.append((applicant, classification))
    return out


def summarize_jobs(jobs: Sequence, pending_evaluations: int) -> JobStats:
    return JobStats(
        total_jobs=len(jobs),
        total_applicants=sum(j.applicants or 0 for j in jobs),
        active_jobs=sum(1 for j in jobs if j.status == "Active"),
        pending_evaluations=pending_evaluations,
    )


def filter_jobs(jobs: Sequence, search_text: str = "", status: str = ALL) -> List:
    query = (search_text or "").strip().lower()
    out = []
    for j in jobs:
        if query and not any(query in (f or "").lower() for f in (j.title, j.department, j.employment_type)):
            continue
        if status and status != ALL and j.status != status:
            continue
        out.append(j)
    return out
