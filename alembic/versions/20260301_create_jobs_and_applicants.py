"""create jobs and applicants tables

Mirrors of the job-posting and applications records this service reads.

Revision ID: 20260301_create_jobs_and_applicants
Revises: None
Create Date: 2026-03-01 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '20260301_create_jobs_and_applicants'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if not insp.has_table('jobs'):
        op.create_table(
            'jobs',
            sa.Column('id', sa.Integer, primary_key=True),
            sa.Column('title', sa.String(200), nullable=False),
            sa.Column('department', sa.String(120), nullable=True),
            sa.Column('employment_type', sa.String(50), nullable=True),
            sa.Column('status', sa.String(20), nullable=True, index=True),
            sa.Column('created_at', sa.DateTime, server_default=sa.func.current_timestamp()),
            sa.Column('updated_at', sa.DateTime, server_default=sa.func.current_timestamp()),
        )
    if not insp.has_table('applicants'):
        op.create_table(
            'applicants',
            sa.Column('id', sa.Integer, primary_key=True),
            sa.Column('job_id', sa.Integer, sa.ForeignKey('jobs.id'), nullable=False, index=True),
            sa.Column('full_name', sa.String(120), nullable=False),
            sa.Column('email', sa.String(254), nullable=True, index=True),
            sa.Column('department', sa.String(120), nullable=True),
            sa.Column('status', sa.String(30), nullable=True, index=True),
            sa.Column('applied_at', sa.DateTime, server_default=sa.func.current_timestamp(), nullable=False),
            sa.Column('has_resume', sa.Boolean, nullable=False, server_default=sa.false()),
            sa.Column('has_cover_letter', sa.Boolean, nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime, server_default=sa.func.current_timestamp()),
            sa.Column('updated_at', sa.DateTime, server_default=sa.func.current_timestamp()),
        )


def downgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if insp.has_table('applicants'):
        op.drop_table('applicants')
    if insp.has_table('jobs'):
        op.drop_table('jobs')
