"""Create events, users and bookings tables

Revision ID: b001_create_booking_tables
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'b001_create_booking_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'events',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('start', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end', sa.DateTime(timezone=True), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('created_by', sa.String(), nullable=True),
        sa.Column('min_tier', sa.String(20), nullable=False, server_default=sa.text("'BRONZE'")),
    )
    op.create_index('ix_events_start', 'events', ['start'])

    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('tier', sa.String(20), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'bookings',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('event_id', sa.String(), sa.ForeignKey('events.id'), nullable=False),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('role_at_booking', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_bookings_event_id', 'bookings', ['event_id'])
    op.create_index('ix_bookings_user_id', 'bookings', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_bookings_user_id', table_name='bookings')
    op.drop_index('ix_bookings_event_id', table_name='bookings')
    op.drop_table('bookings')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_events_start', table_name='events')
    op.drop_table('events')
