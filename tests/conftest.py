import os
import sys
from datetime import datetime
from types import SimpleNamespace

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from evalcenter import create_app
from evalcenter.extensions import db
from evalcenter.models import Applicant, Job, Question


@pytest.fixture
def app():
    app = create_app('config.TestConfig')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seeded(app):
    """Two jobs, three applicants and two active questions on the backend job.

    Returns plain ids so tests can use them outside an app context.
    """
    with app.app_context():
        backend = Job(title="Backend Engineer", department="Engineering", employment_type="Full-time", status="Active")
        office = Job(title="Office Assistant", department=None, employment_type="Part-time", status="Closed")
        db.session.add_all([backend, office])
        db.session.flush()

        ann = Applicant(job_id=backend.id, full_name="Ann Lee", email="ann@example.com",
                        applied_at=datetime(2026, 1, 3, 9, 0), has_resume=True)
        bo = Applicant(job_id=office.id, full_name="Bo Chen", email="bo@example.com",
                       applied_at=datetime(2026, 1, 2, 9, 0))
        cy = Applicant(job_id=backend.id, full_name="Cy Park", email="cy@sample.org", department="CS",
                       applied_at=datetime(2026, 1, 1, 9, 0), has_cover_letter=True)
        db.session.add_all([ann, bo, cy])

        q1 = Question(job_id=backend.id, question="2 + 2 = ?", options=["3", "4"], correct_answer="4")
        q2 = Question(job_id=backend.id, question="Capital of France?", options=["Paris", "Rome", "Berlin"],
                      correct_answer="Paris")
        db.session.add_all([q1, q2])
        db.session.commit()

        return SimpleNamespace(
            backend=backend.id, office=office.id,
            ann=ann.id, bo=bo.id, cy=cy.id,
            q1=q1.id, q2=q2.id,
        )


@pytest.fixture
def ctx(app, seeded):
    """Service-level tests run inside an app context with the seed data."""
    with app.app_context():
        yield seeded


@pytest.fixture
def client(app, seeded):
    return app.test_client()


@pytest.fixture
def recruiter_headers():
    return {"X-User-Id": "7", "X-User-Role": "recruiter"}


@pytest.fixture
def applicant_headers():
    return {"X-User-Id": "42", "X-User-Role": "applicant"}
