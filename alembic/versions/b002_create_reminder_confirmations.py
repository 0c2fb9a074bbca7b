"""Create reminder_confirmations table

Revision ID: b002_create_reminder_confirmations
Revises: b001_create_booking_tables
Create Date: 2026-10-19

One row per reminder sent with a confirmation link. The token is the
public lookup key for the RSVP page and must stay unique.
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'b002_create_reminder_confirmations'
down_revision = 'b001_create_booking_tables'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'reminder_confirmations',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('token', sa.String(64), nullable=False),
        sa.Column('booking_id', sa.String(), sa.ForeignKey('bookings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default=sa.text("'PENDING'")),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('responded_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_reminder_confirmations_token', 'reminder_confirmations', ['token'], unique=True)
    op.create_index('ix_reminder_confirmations_booking_id', 'reminder_confirmations', ['booking_id'])
    # Latest confirmation per booking
    op.create_index('idx_reminder_confirmations_latest', 'reminder_confirmations', ['booking_id', 'sent_at'])


def downgrade() -> None:
    op.drop_index('idx_reminder_confirmations_latest', table_name='reminder_confirmations')
    op.drop_index('ix_reminder_confirmations_booking_id', table_name='reminder_confirmations')
    op.drop_index('ix_reminder_confirmations_token', table_name='reminder_confirmations')
    op.drop_table('reminder_confirmations')
