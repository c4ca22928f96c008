"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("pin_hash", sa.String(255), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        *timestamps(),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "cats",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        *timestamps(),
    )

    op.create_table(
        "recipes",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "created_by",
            sa.String(36),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("coffee_weight", sa.Float(), nullable=False),
        sa.Column("water_weight", sa.Float(), nullable=False),
        sa.Column("water_temperature", sa.Integer(), nullable=False),
        sa.Column("grind_size", sa.String(50), nullable=True),
        sa.Column("brew_time", sa.Integer(), nullable=False),
        *timestamps(),
    )

    op.create_table(
        "recipe_steps",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "recipe_id",
            sa.String(36),
            sa.ForeignKey("recipes.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("step_order", sa.Integer(), nullable=False),
        sa.Column("duration_sec", sa.Integer(), nullable=True),
        sa.Column("command_type", sa.String(20), nullable=False),
        sa.Column("command_parameter", sa.Integer(), nullable=True),
        *timestamps(),
    )

    op.create_table(
        "tags",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("slug", sa.String(100), nullable=False),
        *timestamps(),
    )
    op.create_index("ix_tags_slug", "tags", ["slug"], unique=True)

    op.create_table(
        "recipe_tags",
        sa.Column(
            "recipe_id",
            sa.String(36),
            sa.ForeignKey("recipes.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
            index=True,
        ),
        sa.Column(
            "tag_id",
            sa.String(36),
            sa.ForeignKey("tags.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
            index=True,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_table(
        "user_preferences",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("strength_preference", sa.String(10), nullable=False, server_default="medium"),
        sa.Column("default_cup_size", sa.Integer(), nullable=False, server_default="300"),
        sa.Column("notifications_brewed", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "notifications_maintenance", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column("notifications_errors", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("notification_method", sa.String(10), nullable=False, server_default="email"),
        sa.Column("sms_phone_number", sa.String(20), nullable=True),
        sa.Column("allow_integrations", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("cloud_control_access", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("theme", sa.String(20), nullable=False, server_default="auto"),
        sa.Column("auto_brew_schedule", sa.Text(), nullable=True),
        sa.Column("units", sa.String(10), nullable=False, server_default="metric"),
        sa.Column("share_recipes", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("language", sa.String(5), nullable=False, server_default="en"),
        sa.Column("timezone", sa.String(50), nullable=False, server_default="UTC"),
        *timestamps(),
    )


def downgrade() -> None:
    op.drop_table("user_preferences")
    op.drop_table("recipe_tags")
    op.drop_index("ix_tags_slug", table_name="tags")
    op.drop_table("tags")
    op.drop_table("recipe_steps")
    op.drop_table("recipes")
    op.drop_table("cats")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
