"""create monthly_reports

Revision ID: 4b2e9a7c1d05
Revises:
Create Date: 2026-10-19 09:12:41.318204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b2e9a7c1d05'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'monthly_reports',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('employee_name', sa.String(length=50), nullable=False),
        sa.Column('department', sa.String(length=50), nullable=False),
        # YYYY-MM, straight from the month picker
        sa.Column('report_month', sa.String(length=7), nullable=False),
        sa.Column('report_summary', sa.Text(), nullable=False),
    )
    op.create_index('ix_monthly_reports_id', 'monthly_reports', ['id'])


def downgrade() -> None:
    op.drop_index('ix_monthly_reports_id', table_name='monthly_reports')
    op.drop_table('monthly_reports')
