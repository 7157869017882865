from types import SimpleNamespace

import pytest

from evalcenter.services.classifier import Completed, Pending, classify, percentage, tier


def _applicant(id=1):
    return SimpleNamespace(id=id)


def _outcome(score, total, applicant_id=1):
    return SimpleNamespace(applicant_id=applicant_id, score=score, total=total)


def test_no_outcome_is_pending():
    assert classify(_applicant()) == Pending()
    assert classify(_applicant(), None).status == "pending"


def test_outcome_is_completed():
    c = classify(_applicant(), _outcome(3, 5))
    assert c == Completed(score=3, total=5, percentage=60)
    assert c.status == "completed"


@pytest.mark.parametrize("score,total,pct,expected_tier", [
    (3, 5, 60, "medium"),
    (7, 10, 70, "high"),
    (4, 10, 40, "low"),
    (5, 10, 50, "medium"),
    (10, 10, 100, "high"),
    (0, 0, 0, "low"),
])
def test_percentage_and_tier(score, total, pct, expected_tier):
    c = classify(_applicant(), _outcome(score, total))
    assert c.percentage == pct
    assert c.tier == expected_tier


def test_percentage_rounds_halves_up():
    assert percentage(1, 8) == 13   # 12.5
    assert percentage(2, 3) == 67   # 66.67
    assert percentage(1, 3) == 33   # 33.33
    assert percentage(0, 4) == 0


def test_tier_boundaries():
    assert tier(69) == "medium"
    assert tier(70) == "high"
    assert tier(49) == "low"
    assert tier(50) == "medium"


def test_outcome_for_someone_else_is_rejected():
    with pytest.raises(ValueError):
        classify(_applicant(1), _outcome(1, 2, applicant_id=2))
