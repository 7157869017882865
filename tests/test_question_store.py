import pytest

from evalcenter.errors import NotFoundError, ValidationError
from evalcenter.models import Question
from evalcenter.services import question_store


def test_create_drops_blank_options(ctx):
    q = question_store.create(ctx.office, "Which tool files expenses?", ["A", "", "B", "C"], "B")
    assert q.id is not None
    assert q.options == ["A", "B", "C"]
    assert q.correct_answer == "B"
    assert q.is_active is True
    assert q.correct_answer in q.options and len(q.options) >= 2


def test_create_trims_text_options_and_answer(ctx):
    q = question_store.create(ctx.office, "  Pick one  ", ["  yes ", "no  "], " yes")
    assert q.question == "Pick one"
    assert q.options == ["yes", "no"]
    assert q.correct_answer == "yes"


def test_create_keeps_duplicate_options(ctx):
    q = question_store.create(ctx.office, "Same twice?", ["A", "A"], "A")
    assert q.options == ["A", "A"]


def test_create_rejects_answer_not_in_options(ctx):
    with pytest.raises(ValidationError) as exc:
        question_store.create(ctx.office, "Which tool files expenses?", ["A", "", "B", "C"], "Z")
    assert exc.value.message == "correct answer must match an option"
    assert question_store.list_active(ctx.office) == []


def test_create_rejects_blank_question_first(ctx):
    # options and answer are also invalid, the question check runs first
    with pytest.raises(ValidationError) as exc:
        question_store.create(ctx.office, "   ", [""], "Z")
    assert exc.value.message == "question required"


def test_create_requires_two_non_blank_options(ctx):
    with pytest.raises(ValidationError) as exc:
        question_store.create(ctx.office, "Only one?", ["A", "   ", ""], "A")
    assert exc.value.message == "at least 2 options required"


def test_create_handles_missing_fields(ctx):
    with pytest.raises(ValidationError) as exc:
        question_store.create(ctx.office, "No options", None, None)
    assert exc.value.message == "at least 2 options required"


def test_create_unknown_job(ctx):
    with pytest.raises(NotFoundError):
        question_store.create(9999, "Q?", ["A", "B"], "A")
    assert Question.query.count() == 2


def test_list_active_orders_by_creation_and_scopes_by_job(ctx):
    third = question_store.create(ctx.backend, "Third?", ["x", "y"], "y")
    question_store.create(ctx.office, "Other job", ["x", "y"], "x")

    ids = [q.id for q in question_store.list_active(ctx.backend)]
    assert ids == [ctx.q1, ctx.q2, third.id]


def test_list_active_unknown_job_is_empty(ctx):
    assert question_store.list_active(424242) == []


def test_list_active_without_job_returns_everything_active(ctx):
    other = question_store.create(ctx.office, "Other job", ["x", "y"], "x")
    question_store.deactivate(ctx.q1)
    ids = [q.id for q in question_store.list_active()]
    assert ids == [ctx.q2, other.id]


def test_deactivate_hides_question_but_keeps_it(ctx):
    question_store.deactivate(ctx.q1)
    assert [q.id for q in question_store.list_active(ctx.backend)] == [ctx.q2]
    kept = question_store.get(ctx.q1)
    assert kept.is_active is False
    assert kept.options == ["3", "4"]


def test_deactivate_is_idempotent(ctx):
    once = question_store.deactivate(ctx.q2)
    snapshot = (once.id, once.is_active, once.question, list(once.options), once.correct_answer)
    twice = question_store.deactivate(ctx.q2)
    assert (twice.id, twice.is_active, twice.question, list(twice.options), twice.correct_answer) == snapshot
    assert Question.query.count() == 2


def test_deactivate_unknown_question(ctx):
    with pytest.raises(NotFoundError):
        question_store.deactivate(31337)


@pytest.mark.parametrize("raw_options", ["AB", {"A": 1, "B": 2}, 42])
def test_create_rejects_options_that_are_not_a_list(ctx, raw_options):
    with pytest.raises(ValidationError) as exc:
        question_store.create(ctx.office, "Pick", raw_options, "A")
    assert exc.value.message == "at least 2 options required"
    assert question_store.list_active(ctx.office) == []


def test_create_rejects_non_string_question(ctx):
    with pytest.raises(ValidationError) as exc:
        question_store.create(ctx.office, 123, ["A", "B"], "A")
    assert exc.value.message == "question required"


def test_create_compares_numeric_answer_as_text(ctx):
    q = question_store.create(ctx.office, "Pick a number", [1, 2], 2)
    assert (q.options, q.correct_answer) == (["1", "2"], "2")
