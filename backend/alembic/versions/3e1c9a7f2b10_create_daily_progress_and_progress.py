"""create daily_progress and progress tables

Revision ID: 3e1c9a7f2b10
Revises:
Create Date: 2025-11-30 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e1c9a7f2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()
    if 'daily_progress' not in tables:
        op.create_table(
            'daily_progress',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('date', sa.DateTime(timezone=True), nullable=False),
            sa.Column('flashcards_done', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('hours_studied', sa.Float(), nullable=False, server_default='0'),
            sa.Column('percent_complete', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_daily_progress_id', 'daily_progress', ['id'])
        op.create_index('ix_daily_progress_date', 'daily_progress', ['date'], unique=True)
    if 'progress' not in tables:
        op.create_table(
            'progress',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('value', sa.Float(), nullable=False, server_default='0'),
            sa.Column('target', sa.Float(), nullable=True),
            sa.Column('unit', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_progress_id', 'progress', ['id'])
        op.create_index('ix_progress_name', 'progress', ['name'], unique=True)


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS progress')
    op.execute('DROP TABLE IF EXISTS daily_progress')
