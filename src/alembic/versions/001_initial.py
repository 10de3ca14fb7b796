"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # 1. Users: customers, hotel partners and admins
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("phone", sqlmodel.sql.sqltypes.AutoString(length=30), nullable=True),
        sa.Column("hashed_password", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column(
            "role",
            sqlmodel.sql.sqltypes.AutoString(length=20),
            nullable=False,
            server_default="Customer",
        ),
        sa.Column(
            "status",
            sqlmodel.sql.sqltypes.AutoString(length=20),
            nullable=False,
            server_default="active",
        ),
        sa.Column("status_updated_at", sa.DateTime(), nullable=True),
        sa.Column("last_login_at", sa.DateTime(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "role IN ('Customer', 'HotelPartner', 'Admin')", name="ck_users_role"
        ),
        sa.CheckConstraint(
            "status IN ('active', 'suspended', 'inactive')", name="ck_users_status"
        ),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"], unique=False)
    op.create_index("ix_users_status", "users", ["status"], unique=False)
    op.create_index("ix_users_deleted_at", "users", ["deleted_at"], unique=False)

    # 2. Partner application, 1:1 with a HotelPartner user
    op.create_table(
        "partner_info",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column(
            "verification_status",
            sqlmodel.sql.sqltypes.AutoString(length=20),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("rejection_reason", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column(
            "suspension_reason", sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True
        ),
        sa.Column("business_name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("business_type", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column("tax_id", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column(
            "business_address", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True
        ),
        sa.Column("bank_account", sa.JSON(), nullable=True),
        sa.Column("documents", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("onboarding_step", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "onboarding_completed", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column("verified_at", sa.DateTime(), nullable=True),
        sa.Column("verified_by", sa.Uuid(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["verified_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("user_id"),
        sa.CheckConstraint(
            "verification_status IN ('pending', 'verified', 'rejected', 'suspended')",
            name="ck_partner_info_verification_status",
        ),
    )
    op.create_index(
        "ix_partner_info_verification_status",
        "partner_info",
        ["verification_status"],
        unique=False,
    )
    op.create_index(
        "ix_partner_info_business_name", "partner_info", ["business_name"], unique=False
    )

    # 3. Refresh tokens (hash only)
    op.create_table(
        "refresh_tokens",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("token_hash", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("revoked", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_refresh_tokens_user_id", "refresh_tokens", ["user_id"], unique=False)
    op.create_index("ix_refresh_tokens_token_hash", "refresh_tokens", ["token_hash"], unique=True)
    op.create_index(
        "ix_refresh_tokens_expires_at", "refresh_tokens", ["expires_at"], unique=False
    )

    # 4. Hotels
    op.create_table(
        "hotels",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(length=5000), nullable=True),
        sa.Column("address", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column("city", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("star_rating", sa.Integer(), nullable=True),
        sa.Column(
            "status",
            sqlmodel.sql.sqltypes.AutoString(length=20),
            nullable=False,
            server_default="active",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "star_rating IS NULL OR star_rating BETWEEN 1 AND 5", name="ck_hotels_star_rating"
        ),
    )
    op.create_index("ix_hotels_owner_id", "hotels", ["owner_id"], unique=False)
    op.create_index("ix_hotels_name", "hotels", ["name"], unique=False)
    op.create_index("ix_hotels_city", "hotels", ["city"], unique=False)
    op.create_index("ix_hotels_status", "hotels", ["status"], unique=False)


def downgrade() -> None:
    op.drop_table("hotels")
    op.drop_table("refresh_tokens")
    op.drop_table("partner_info")
    op.drop_table("users")
