"""Create shelter tables

Revision ID: 001
Revises: None
Create Date: 2025-01-20 00:00:00.000000+00:00

What:  Creates all nine tables of the shelter admin schema with their indexes.
How:   Mirrors app/models/*; see the model modules for column docs.

Rollback: downgrade() drops every table (destructive, all data lost).
"""

from typing import List, Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def _timestamps() -> List[sa.Column]:
    return [
        sa.Column(
            "create_time",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "update_time",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    ]


def _status(default: str, length: int = 20) -> sa.Column:
    return sa.Column(
        "status", sa.String(length), nullable=False, server_default=sa.text(f"'{default}'")
    )


def _counter(name: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), nullable=False, server_default=sa.text("0"))


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("real_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default=sa.text("'staff'")),
        sa.Column("avatar", sa.String(255)),
        sa.Column("phone", sa.String(20)),
        sa.Column("email", sa.String(100)),
        _status("active"),
        *_timestamps(),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index("idx_users_create_time", "users", ["create_time"])

    op.create_table(
        "pets",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("breed", sa.String(50), nullable=False),
        sa.Column("age", sa.Numeric(3, 1), nullable=False),
        sa.Column("gender", sa.String(10), nullable=False),
        sa.Column("weight", sa.Numeric(5, 2)),
        sa.Column("color", sa.String(50)),
        sa.Column(
            "health_status", sa.String(20), nullable=False, server_default=sa.text("'healthy'")
        ),
        sa.Column(
            "adoption_status", sa.String(20), nullable=False, server_default=sa.text("'available'")
        ),
        sa.Column("description", sa.Text()),
        sa.Column("images", sa.JSON()),
        sa.Column("location", sa.String(255)),
        sa.Column("rescue_date", sa.Date()),
        sa.Column("rescuer", sa.String(50)),
        sa.Column("tags", sa.JSON()),
        _counter("view_count"),
        _counter("favorite_count"),
        sa.Column("adopted_by", sa.String(100)),
        sa.Column("adopted_date", sa.Date()),
        *_timestamps(),
    )
    op.create_index("idx_pets_create_time", "pets", ["create_time"])
    op.create_index("idx_pets_adoption_status", "pets", ["adoption_status"])

    op.create_table(
        "adoptions",
        _id(),
        sa.Column("pet_id", sa.Integer(), nullable=False),
        sa.Column("pet_name", sa.String(100), nullable=False),
        sa.Column("applicant_name", sa.String(100), nullable=False),
        sa.Column("applicant_phone", sa.String(20), nullable=False),
        sa.Column("applicant_email", sa.String(100), nullable=False),
        sa.Column("applicant_id_card", sa.String(20), nullable=False),
        sa.Column("applicant_address", sa.Text(), nullable=False),
        sa.Column(
            "application_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        _status("pending"),
        sa.Column("approval_date", sa.DateTime(timezone=True)),
        sa.Column("approver", sa.String(50)),
        sa.Column("rejection_date", sa.DateTime(timezone=True)),
        sa.Column("rejecter", sa.String(50)),
        sa.Column("reject_reason", sa.Text()),
        sa.Column("remarks", sa.Text()),
        sa.Column("experience", sa.String(100)),
        sa.Column("housing_type", sa.String(50)),
        sa.Column("has_yard", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("family_members", sa.Integer()),
        sa.Column("work_hours", sa.String(50)),
        sa.Column("review_notes", sa.JSON()),
        *_timestamps(),
    )
    op.create_index("idx_adoptions_application_date", "adoptions", ["application_date"])
    op.create_index("idx_adoptions_status", "adoptions", ["status"])

    op.create_table(
        "adoption_records",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("adoption_application_id", sa.Integer()),
        sa.Column("record_number", sa.String(50), nullable=False),
        sa.Column("pet_id", sa.Integer(), nullable=False),
        sa.Column("pet_name", sa.String(100), nullable=False),
        sa.Column("pet_breed", sa.String(100)),
        sa.Column("pet_image", sa.Text()),
        sa.Column("adopter_id", sa.Integer(), nullable=False),
        sa.Column("adopter_name", sa.String(100), nullable=False),
        sa.Column("adopter_phone", sa.String(20)),
        sa.Column("adopter_email", sa.String(100)),
        sa.Column("adopter_address", sa.Text()),
        sa.Column("adoption_date", sa.Date(), nullable=False),
        sa.Column("agreement_number", sa.String(100)),
        _status("active"),
        sa.Column("follow_ups", sa.JSON()),
        sa.Column("last_follow_up_date", sa.Date()),
        sa.Column("next_follow_up_date", sa.Date()),
        sa.Column("remarks", sa.Text()),
        sa.Column("created_by", sa.String(50)),
        sa.Column("updated_by", sa.String(50)),
        *_timestamps(),
        sa.UniqueConstraint("record_number", name="uq_adoption_records_record_number"),
    )
    op.create_index("idx_adoption_records_adoption_date", "adoption_records", ["adoption_date"])
    op.create_index("idx_adoption_records_status", "adoption_records", ["status"])

    op.create_table(
        "rescues",
        _id(),
        sa.Column("pet_id", sa.Integer(), nullable=False),
        sa.Column("pet_name", sa.String(100), nullable=False),
        sa.Column("rescue_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("rescue_location", sa.String(255), nullable=False),
        sa.Column("rescuer", sa.String(50), nullable=False),
        sa.Column("rescue_type", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("health_condition", sa.String(50), nullable=False),
        sa.Column("immediate_action", sa.String(255), nullable=False),
        sa.Column("images", sa.JSON()),
        sa.Column("video_url", sa.String(255)),
        sa.Column("cost", sa.Numeric(10, 2)),
        sa.Column("notes", sa.Text()),
        *_timestamps(),
    )
    op.create_index("idx_rescues_rescue_date", "rescues", ["rescue_date"])

    op.create_table(
        "activities",
        _id(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("participant_limit", sa.Integer()),
        _counter("participant_count"),
        _status("upcoming"),
        sa.Column("organizer", sa.String(50), nullable=False),
        sa.Column("requirements", sa.Text()),
        sa.Column("images", sa.JSON()),
        sa.Column("tags", sa.JSON()),
        *_timestamps(),
    )
    op.create_index("idx_activities_start_date", "activities", ["start_date"])

    op.create_table(
        "volunteers",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("age", sa.Integer()),
        sa.Column("occupation", sa.String(100)),
        sa.Column("experience", sa.String(255)),
        sa.Column("available_time", sa.String(100)),
        _status("active"),
        sa.Column("join_date", sa.Date(), nullable=False),
        _counter("activities_participated"),
        _counter("total_hours"),
        sa.Column("skills", sa.JSON()),
        sa.Column("avatar", sa.String(255)),
        sa.Column("address", sa.String(255)),
        *_timestamps(),
    )
    op.create_index("idx_volunteers_join_date", "volunteers", ["join_date"])

    op.create_table(
        "donations",
        _id(),
        sa.Column("donor_name", sa.String(100), nullable=False),
        sa.Column(
            "donor_type", sa.String(20), nullable=False, server_default=sa.text("'individual'")
        ),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "donation_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "donation_type", sa.String(20), nullable=False, server_default=sa.text("'money'")
        ),
        sa.Column("purpose", sa.String(100)),
        _status("pending"),
        sa.Column("payment_method", sa.String(50)),
        sa.Column("transaction_id", sa.String(100)),
        sa.Column("remarks", sa.Text()),
        sa.Column("receipt_issued", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("items", sa.JSON()),
        sa.Column("total_value", sa.Numeric(10, 2)),
        *_timestamps(),
    )
    op.create_index("idx_donations_donation_date", "donations", ["donation_date"])
    op.create_index("idx_donations_status", "donations", ["status"])

    op.create_table(
        "notifications",
        _id(),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("target_id", sa.Integer()),
        sa.Column("target_type", sa.String(50)),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("idx_notifications_create_time", "notifications", ["create_time"])
    op.create_index("idx_notifications_is_read", "notifications", ["is_read"])


def downgrade() -> None:
    for table in (
        "notifications",
        "donations",
        "volunteers",
        "activities",
        "rescues",
        "adoption_records",
        "adoptions",
        "pets",
        "users",
    ):
        op.drop_table(table)
