"""create workout_sessions

Revision ID: 4b1f0c9e2a71
Revises:
Create Date: 2026-01-02 19:12:40.118204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1f0c9e2a71'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('performed_on', sa.Date(), nullable=False),
        sa.Column('workout_slug', sa.String(length=64), nullable=False),
        sa.Column('workout_name', sa.String(length=120), nullable=True),
        sa.Column('weight', sa.Integer(), nullable=True),
        # six fixed rep slots regardless of exercise
        sa.Column('set1_reps', sa.Integer(), nullable=True),
        sa.Column('set2_reps', sa.Integer(), nullable=True),
        sa.Column('set3_reps', sa.Integer(), nullable=True),
        sa.Column('set4_reps', sa.Integer(), nullable=True),
        sa.Column('set5_reps', sa.Integer(), nullable=True),
        sa.Column('set6_reps', sa.Integer(), nullable=True),
        sa.Column('compact', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_workout_sessions_performed_on', 'workout_sessions', ['performed_on'])
    op.create_index('ix_workout_sessions_workout_slug', 'workout_sessions', ['workout_slug'])


def downgrade() -> None:
    op.drop_index('ix_workout_sessions_workout_slug', table_name='workout_sessions')
    op.drop_index('ix_workout_sessions_performed_on', table_name='workout_sessions')
    op.drop_table('workout_sessions')
