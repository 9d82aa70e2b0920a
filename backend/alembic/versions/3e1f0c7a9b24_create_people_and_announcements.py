"""create people and announcements tables

Revision ID: 3e1f0c7a9b24
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3e1f0c7a9b24'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ALL_DAYS = '["monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]'
EMPTY_WEEK = (
    '{"monday": false, "tuesday": false, "wednesday": false, '
    '"thursday": false, "friday": false, "saturday": false}'
)


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'people' not in tables:
        op.create_table(
            'people',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('goal', sa.String(), nullable=False),
            sa.Column('emoji', sa.String(), nullable=False, server_default='🔥'),
            sa.Column('target_type', sa.String(length=20), nullable=False, server_default='specific_days'),
            sa.Column('target_days', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text(f"'{ALL_DAYS}'::jsonb")),
            sa.Column('target_count', sa.Integer(), nullable=True, server_default='6'),
            sa.Column('weekly_progress', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text(f"'{EMPTY_WEEK}'::jsonb")),
            sa.Column('current_streak', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        )
        op.create_index('ix_people_id', 'people', ['id'])

    if 'announcements' not in tables:
        op.create_table(
            'announcements',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('author', sa.String(), nullable=False),
            sa.Column('is_important', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        )
        op.create_index('ix_announcements_id', 'announcements', ['id'])
        op.create_index('ix_announcements_created_at', 'announcements', ['created_at'])


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS announcements')
    op.execute('DROP TABLE IF EXISTS people')
