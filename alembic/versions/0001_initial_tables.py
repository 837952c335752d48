"""Create hello_world and applications tables

Revision ID: 0001
Revises:
Create Date: 2025-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Single-row greeting table
    hello_world = op.create_table(
        'hello_world',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('message', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.bulk_insert(
        hello_world,
        [{'id': 1, 'message': 'Hello World from DevFest PTA 2025!'}],
    )

    # Create applications table
    op.create_table(
        'applications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('candidate_name', sa.String(length=255), nullable=False),
        sa.Column('candidate_email', sa.String(length=255), nullable=False),
        sa.Column('candidate_full_name', sa.String(length=255), nullable=False),
        sa.Column('position', sa.String(length=255), nullable=False),
        sa.Column('cv_filename', sa.String(length=255), nullable=True),
        sa.Column('cover_letter', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='submitted'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "status IN ('submitted', 'under_review', 'interview', 'rejected', 'accepted')",
            name='application_status'
        )
    )
    op.create_index('ix_applications_candidate_email', 'applications', ['candidate_email'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_applications_candidate_email', table_name='applications')
    op.drop_table('applications')
    op.drop_table('hello_world')
