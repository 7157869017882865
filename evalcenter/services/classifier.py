"""Derive an applicant's evaluation state. Pure, computed on every read."""
from dataclasses import dataclass
from typing import Union

HIGH_TIER_MIN = 70
MEDIUM_TIER_MIN = 50


@dataclass(frozen=True)
class Pending:
    status = "pending"


@dataclass(frozen=True)
class Completed:
    score: int
    total: int
    percentage: int
    status = "completed"

    @property
    def tier(self) -> str:
        return tier(self.percentage)


Classification = Union[Pending, Completed]


def percentage(score: int, total: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when there is nothing to score."""
    if total == 0:
        return 0
    return (200 * score + total) // (2 * total)


def tier(pct: int) -> str:
    if pct >= HIGH_TIER_MIN:
        return "high"
    if pct >= MEDIUM_TIER_MIN:
        return "medium"
    return "low"


def classify(applicant, outcome=None) -> Classification:
    if outcome is None:
        return Pending()
    if outcome.applicant_id != applicant.id:
        raise ValueError(f"outcome belongs to applicant {outcome.applicant_id}, not {applicant.id}")
    return Completed(score=outcome.score, total=outcome.total,
                     percentage=percentage(outcome.score, outcome.total))
