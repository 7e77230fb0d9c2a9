"""create room schema

Revision ID: 3f9a1c2d7b10
Revises:
Create Date: 2026-10-19 09:12:44.102391

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('code', sa.String(length=6), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('host_id', sa.Integer(), nullable=False),
        sa.Column('max_participants', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint('max_participants BETWEEN 2 AND 8', name='ck_rooms_max_participants'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )

    op.create_table(
        'participants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('guest_name', sa.String(length=50), nullable=False),
        sa.Column('is_ready', sa.Boolean(), nullable=False),
        sa.Column('is_host', sa.Boolean(), nullable=False),
        sa.Column('current_platform', sa.String(length=50), nullable=True),
        sa.Column('joined_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('last_active_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['room_id'], ['rooms.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_participants_room_id', 'participants', ['room_id'])

    # History and messages keep plain participant ids: they outlive participants
    op.create_table(
        'swap_history',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('from_participant_id', sa.Integer(), nullable=False),
        sa.Column('to_participant_id', sa.Integer(), nullable=False),
        sa.Column('from_label', sa.String(length=50), nullable=True),
        sa.Column('to_label', sa.String(length=50), nullable=True),
        sa.Column('swap_type', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("swap_type IN ('manual', 'random')", name='ck_swap_history_swap_type'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_swap_history_room_id', 'swap_history', ['room_id'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('participant_id', sa.Integer(), nullable=False),
        sa.Column('sender_name', sa.String(length=50), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_messages_room_id', 'messages', ['room_id'])

    op.create_table(
        'session_summaries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('host_name', sa.String(length=50), nullable=False),
        sa.Column('participant_count', sa.Integer(), nullable=False),
        sa.Column('total_swaps', sa.Integer(), nullable=False),
        sa.Column('total_messages', sa.Integer(), nullable=False),
        sa.Column('session_duration', sa.Integer(), nullable=False),
        sa.Column('platforms_used', sa.JSON(), nullable=True),
        sa.Column('started_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('ended_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_session_summaries_room_id', 'session_summaries', ['room_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_session_summaries_room_id', table_name='session_summaries')
    op.drop_table('session_summaries')
    op.drop_index('ix_messages_room_id', table_name='messages')
    op.drop_table('messages')
    op.drop_index('ix_swap_history_room_id', table_name='swap_history')
    op.drop_table('swap_history')
    op.drop_index('ix_participants_room_id', table_name='participants')
    op.drop_table('participants')
    op.drop_table('rooms')
