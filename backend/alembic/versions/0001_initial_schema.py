"""Users, roster, bookings and calendar overrides.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    user_role_enum = sa.Enum("ADMIN", "COACH", "PARENT", name="userrole")
    user_status_enum = sa.Enum("INVITED", "ACTIVE", "SUSPENDED", name="userstatus")
    sport_enum = sa.Enum("BASEBALL", "SOFTBALL", name="sport")
    lesson_type_enum = sa.Enum(
        "HITTING", "FIELDING", "PITCHING", "SMALL_GROUP", name="lessontype"
    )
    lesson_category_enum = sa.Enum("PRIVATE", "GROUP", name="lessoncategory")
    booking_status_enum = sa.Enum("PENDING", "CONFIRMED", name="bookingstatus")

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=False, unique=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("phone_number", sa.String(length=32)),
        sa.Column("role", user_role_enum, nullable=False),
        sa.Column("status", user_status_enum, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "athletes",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("age", sa.Integer()),
        sa.Column("sport", sport_enum),
        sa.Column("parent_name", sa.String(length=255)),
        sa.Column("parent_email", sa.String(length=320), nullable=False),
        sa.Column("parent_phone", sa.String(length=32)),
        sa.Column("notes", sa.String(length=1024)),
        sa.Column(
            "parent_user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
        ),
        *_timestamps(),
    )
    op.create_index("ix_athletes_parent_email", "athletes", ["parent_email"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "athlete_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("athletes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("slot_date", sa.Date(), nullable=False),
        sa.Column("slot_time", sa.String(length=8), nullable=False),
        sa.Column("sport", sport_enum, nullable=False),
        sa.Column("lesson_type", lesson_type_enum, nullable=False),
        sa.Column("lesson_label", sa.String(length=120), nullable=False),
        sa.Column("category", lesson_category_enum, nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", booking_status_enum, nullable=False),
        sa.Column("notes", sa.String(length=1024)),
        sa.Column(
            "created_by_user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
        ),
        *_timestamps(),
    )
    op.create_index("ix_bookings_slot_date", "bookings", ["slot_date"])

    op.create_table(
        "day_closures",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("closed_date", sa.Date(), nullable=False, unique=True),
        sa.Column("reason", sa.String(length=255)),
        *_timestamps(),
    )

    for table in ("slot_blocks", "custom_shifts"):
        op.create_table(
            table,
            sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
            sa.Column("slot_date", sa.Date(), nullable=False),
            sa.Column("slot_time", sa.String(length=8), nullable=False),
            *_timestamps(),
            sa.UniqueConstraint("slot_date", "slot_time"),
        )
        op.create_index(f"ix_{table}_slot_date", table, ["slot_date"])


def downgrade() -> None:
    for table in ("custom_shifts", "slot_blocks"):
        op.drop_index(f"ix_{table}_slot_date", table_name=table)
        op.drop_table(table)
    op.drop_table("day_closures")
    op.drop_index("ix_bookings_slot_date", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_athletes_parent_email", table_name="athletes")
    op.drop_table("athletes")
    op.drop_table("users")

    bind = op.get_bind()
    for name in (
        "bookingstatus",
        "lessoncategory",
        "lessontype",
        "sport",
        "userstatus",
        "userrole",
    ):
        sa.Enum(name=name).drop(bind, checkfirst=True)
