"""create expenses table

Revision ID: expenses_001
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'expenses_001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_expenses_id', 'expenses', ['id'])


def downgrade() -> None:
    op.drop_index('ix_expenses_id', table_name='expenses')
    op.drop_table('expenses')
