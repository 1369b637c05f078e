"""create nutrition tables

Revision ID: 3f9a1c2b7d40
Revises:
Create Date: 2026-10-16 10:12:03.418220

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("nickname", sa.String(length=50), nullable=True),
        sa.Column("gender", sa.String(length=10), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("height_cm", sa.Float(), nullable=True),
        sa.Column("weight_kg", sa.Float(), nullable=True),
        sa.Column("activity_level", sa.Integer(), nullable=False, server_default="3"),
        *_timestamps(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "foods",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("calories", sa.Float(), nullable=False, server_default="0"),
        sa.Column("protein", sa.Float(), nullable=False, server_default="0"),
        sa.Column("carbohydrates", sa.Float(), nullable=False, server_default="0"),
        sa.Column("fat", sa.Float(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_foods_id", "foods", ["id"])
    op.create_index("ix_foods_name", "foods", ["name"])

    op.create_table(
        "meal_records",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("meal_type", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "date", "meal_type", name="uq_meal_records_user_date_type"),
    )
    op.create_index("ix_meal_records_id", "meal_records", ["id"])
    op.create_index("ix_meal_records_user_id", "meal_records", ["user_id"])
    op.create_index("ix_meal_records_date", "meal_records", ["date"])

    op.create_table(
        "food_records",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column(
            "meal_record_id",
            sa.Integer(),
            sa.ForeignKey("meal_records.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("food_id", sa.Integer(), sa.ForeignKey("foods.id"), nullable=False),
        sa.Column("food_name", sa.String(length=100), nullable=False),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(length=20), nullable=False),
        sa.Column("calories", sa.Float(), nullable=False, server_default="0"),
        sa.Column("protein", sa.Float(), nullable=False, server_default="0"),
        sa.Column("carbohydrates", sa.Float(), nullable=False, server_default="0"),
        sa.Column("fat", sa.Float(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_food_records_id", "food_records", ["id"])
    op.create_index("ix_food_records_meal_record_id", "food_records", ["meal_record_id"])
    op.create_index("ix_food_records_food_id", "food_records", ["food_id"])

    op.create_table(
        "nutrition_goals",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("calories", sa.Float(), nullable=False),
        sa.Column("protein", sa.Float(), nullable=False),
        sa.Column("carbohydrates", sa.Float(), nullable=False),
        sa.Column("fat", sa.Float(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_nutrition_goals_id", "nutrition_goals", ["id"])
    op.create_index("ix_nutrition_goals_user_id", "nutrition_goals", ["user_id"], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    # children first so foreign keys never dangle
    op.drop_table("nutrition_goals")
    op.drop_table("food_records")
    op.drop_table("meal_records")
    op.drop_table("foods")
    op.drop_table("users")
