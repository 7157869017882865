"""add questions and evaluation_outcomes tables

evaluation_outcomes.applicant_id is unique: at most one outcome per applicant,
enforced by the database so concurrent submissions cannot both succeed.

Revision ID: 20260302_add_questions_and_evaluation_outcomes
Revises: 20260301_create_jobs_and_applicants
Create Date: 2026-03-02 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '20260302_add_questions_and_evaluation_outcomes'
down_revision = '20260301_create_jobs_and_applicants'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if not insp.has_table('questions'):
        op.create_table(
            'questions',
            sa.Column('id', sa.Integer, primary_key=True),
            sa.Column('job_id', sa.Integer, sa.ForeignKey('jobs.id'), nullable=False, index=True),
            sa.Column('question', sa.Text, nullable=False),
            sa.Column('options', sa.JSON, nullable=False),
            sa.Column('correct_answer', sa.String(500), nullable=False),
            sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.true(), index=True),
            sa.Column('created_at', sa.DateTime, server_default=sa.func.current_timestamp()),
            sa.Column('updated_at', sa.DateTime, server_default=sa.func.current_timestamp()),
        )
    if not insp.has_table('evaluation_outcomes'):
        op.create_table(
            'evaluation_outcomes',
            sa.Column('id', sa.Integer, primary_key=True),
            sa.Column('applicant_id', sa.Integer, sa.ForeignKey('applicants.id'), nullable=False),
            sa.Column('job_id', sa.Integer, sa.ForeignKey('jobs.id'), nullable=False, index=True),
            sa.Column('score', sa.Integer, nullable=False),
            sa.Column('total', sa.Integer, nullable=False),
            sa.Column('answers', sa.JSON, nullable=True),
            sa.Column('submitted_at', sa.DateTime, nullable=False),
            sa.UniqueConstraint('applicant_id', name='uq_evaluation_outcomes_applicant'),
            sa.CheckConstraint('score >= 0 AND score <= total', name='ck_evaluation_outcomes_score_range'),
        )


def downgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if insp.has_table('evaluation_outcomes'):
        op.drop_table('evaluation_outcomes')
    if insp.has_table('questions'):
        op.drop_table('questions')
