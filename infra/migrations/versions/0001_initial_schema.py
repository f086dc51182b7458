"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "appointment_options",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("name", name="uq_appointment_options_name"),
    )
    op.create_table(
        "appointment_slots",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "option_id",
            sa.Uuid(),
            sa.ForeignKey("appointment_options.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("label", sa.String(64), nullable=False),
        sa.UniqueConstraint("option_id", "position", name="uq_appointment_slots_position"),
    )
    op.create_index("ix_appointment_slots_option", "appointment_slots", ["option_id", "position"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("appointment_date", sa.String(64), nullable=False),
        sa.Column("treatment", sa.String(120), nullable=False),
        sa.Column("slot", sa.String(64), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("patient", sa.String(120), nullable=True),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("paid", sa.Boolean(), nullable=False),
        sa.Column("transaction_id", sa.String(255), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint(
            "appointment_date", "treatment", "email",
            name="uq_bookings_date_treatment_email",
        ),
    )
    op.create_index("ix_bookings_date_treatment", "bookings", ["appointment_date", "treatment"])
    op.create_index("ix_bookings_email", "bookings", ["email"])

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("name", sa.String(120), nullable=True),
        sa.Column("role", sa.String(20), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_role", "users", ["role"])

    op.create_table(
        "doctors",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("specialty", sa.String(120), nullable=False),
        sa.Column("image", sa.String(512), nullable=True),
        sa.Column("slots", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_doctors_specialty", "doctors", ["specialty"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("booking_id", sa.Uuid(), nullable=False),
        sa.Column("transaction_id", sa.String(255), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("metadata", sa.JSON(none_as_null=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_payments_booking", "payments", ["booking_id"])

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("action", sa.String(255), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("timestamp", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("audit_logs")
    op.drop_index("ix_payments_booking", table_name="payments")
    op.drop_table("payments")
    op.drop_index("ix_doctors_specialty", table_name="doctors")
    op.drop_table("doctors")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_bookings_email", table_name="bookings")
    op.drop_index("ix_bookings_date_treatment", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_appointment_slots_option", table_name="appointment_slots")
    op.drop_table("appointment_slots")
    op.drop_table("appointment_options")
