from flask import jsonify, request, current_app
from flask_login import login_required
from . import bp
from .forms import JobFilterForm, ApplicantFilterForm
from ...errors import NotFoundError, ValidationError
from ...services import directory, question_store, scorer
from ...services.classifier import Completed, classify
from ...services.reporter import filter_jobs, filter_pairs, group_by_department, summarize, summarize_jobs
from ...utils.decorators import author_required


def _iso(dt):
    return dt.isoformat() if dt else None


def _job_json(j):
    return {
        "_id": j.id,
        "title": j.title,
        "department": j.department,
        "employmentType": j.employment_type,
        "status": j.status,
        "applicants": j.applicants,
    }


def _question_json(q):
    return {
        "_id": q.id,
        "jobId": q.job_id,
        "question": q.question,
        "options": list(q.options or []),
        "correctAnswer": q.correct_answer,
        "isActive": bool(q.is_active),
        "createdAt": _iso(q.created_at),
    }


def _outcome_json(o):
    return {
        "_id": o.id,
        "applicantId": o.applicant_id,
        "jobId": o.job_id,
        "score": o.score,
        "total": o.total,
        "submittedAt": _iso(o.submitted_at),
    }


def _evaluation_json(classification):
    if isinstance(classification, Completed):
        return {
            "status": classification.status,
            "score": classification.score,
            "total": classification.total,
            "percentage": classification.percentage,
            "tier": classification.tier,
        }
    return {"status": classification.status}


def _applicant_json(a, classification):
    return {
        "_id": a.id,
        "fullName": a.name,
        "email": a.email,
        "jobId": a.job_id,
        "jobTitle": a.job_title,
        "department": a.department,
        "status": a.status,
        "appliedAt": _iso(a.applied_at),
        "hasResume": a.has_resume,
        "hasCoverLetter": a.has_cover_letter,
        "evaluation": _evaluation_json(classification),
    }


def _validated(form):
    if not form.validate():
        field, messages = next(iter(form.errors.items()))
        raise ValidationError(f"{field}: {messages[0]}", {"fields": form.errors})
    return form


def _json_body():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("JSON object body required")
    return payload


def _require_int(payload, key):
    # ints or digit strings only; int(1.9) would quietly pick id 1
    val = payload.get(key)
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    if isinstance(val, str) and val.strip().isdecimal():
        return int(val.strip())
    raise ValidationError(f"{key} required")


@bp.get("/jobs")
@login_required
def list_jobs():
    form = _validated(JobFilterForm(request.args))
    jobs = directory.list_jobs()
    stats = summarize_jobs(jobs, directory.count_pending_evaluations())
    visible = filter_jobs(jobs, form.q.data, form.status.data)
    return jsonify({
        "jobs": [_job_json(j) for j in visible],
        "stats": {
            "totalJobs": stats.total_jobs,
            "totalApplicants": stats.total_applicants,
            "activeJobs": stats.active_jobs,
            "pendingEvaluations": stats.pending_evaluations,
        },
    })


@bp.get("/questions")
@login_required
def list_questions():
    # an absent or malformed jobId lists every active question
    job_id = request.args.get("jobId", type=int)
    questions = question_store.list_active(job_id)
    return jsonify({"questions": [_question_json(q) for q in questions]})


@bp.post("/jobs/<int:job_id>/questions")
@author_required
def create_question(job_id):
    data = _json_body()
    q = question_store.create(job_id, data.get("question"), data.get("options"), data.get("correctAnswer"))
    return jsonify(_question_json(q)), 201


@bp.delete("/questions/<int:question_id>")
@author_required
def deactivate_question(question_id):
    q = question_store.deactivate(question_id)
    return jsonify(_question_json(q))


@bp.get("/applicants")
@login_required
def list_applicants():
    form = _validated(ApplicantFilterForm(request.args))
    job_id = request.args.get("jobId", type=int)

    applicants = directory.list_applicants(job_id)
    outcomes = directory.load_outcomes(a.id for a in applicants)
    pairs = [(a, classify(a, outcomes.get(a.id))) for a in applicants]

    # stats cover every applicant; the list below honours the filters
    summary = summarize(pairs)
    visible = filter_pairs(pairs, form.q.data, form.department.data, form.tab.data)
    groups = group_by_department(visible)

    return jsonify({
        "applicants": [_applicant_json(a, c) for a, c in visible],
        "stats": {
            "total": summary.total,
            "pendingEvaluation": summary.pending_count,
            "completedEvaluation": summary.completed_count,
            "tiers": summary.tiers,
            "averagePercentage": summary.average_percentage,
        },
        "departments": sorted(summary.departments),
        "groups": {dept: [a.id for a in members] for dept, members in groups.items()},
    })


@bp.post("/submissions")
@login_required
def submit_evaluation():
    data = _json_body()
    job_id = _require_int(data, "jobId")
    applicant_id = _require_int(data, "applicantId")
    try:
        outcome = scorer.submit(job_id, applicant_id, data.get("answers"))
    except NotFoundError as e:
        # ids came from the request body, so an unresolved one is a bad request
        current_app.logger.info('submission rejected: %s', e.message)
        raise ValidationError(e.message, e.details) from e
    return jsonify(_outcome_json(outcome)), 201


@bp.delete("/submissions/<int:applicant_id>")
@author_required
def withdraw_evaluation(applicant_id):
    scorer.withdraw(applicant_id)
    return jsonify({"applicantId": applicant_id, "withdrawn": True})
