"""hr core tables: employees, promotion history, salary adjustments, promotion schedule

Revision ID: 5a1d2e3f4b60
Revises:
Create Date: 2026-10-17 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5a1d2e3f4b60"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ADJUSTMENT_TYPE = sa.Enum(
    "annual_increase", "promotion", "performance", "other", name="adjustment_type"
)
PROMOTION_STATUS = sa.Enum(
    "pending", "approved", "completed", "cancelled", name="promotion_status"
)


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("employee_id", sa.String(length=64), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("department", sa.Text(), nullable=False),
        sa.Column("position", sa.Text(), nullable=False),
        sa.Column("hire_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.UniqueConstraint("employee_id", name="uq_employees_employee_id"),
        sa.UniqueConstraint("email", name="uq_employees_email"),
    )

    # Append-only ledger of completed promotions
    op.create_table(
        "promotion_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id"), nullable=False),
        sa.Column("previous_position", sa.Text(), nullable=True),
        sa.Column("new_position", sa.Text(), nullable=False),
        sa.Column("previous_salary", sa.Numeric(12, 2), nullable=True),
        sa.Column("new_salary", sa.Numeric(12, 2), nullable=False),
        sa.Column("promotion_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("effective_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    )
    op.create_index("ix_promotion_history_employee_id", "promotion_history", ["employee_id"])
    op.create_index("ix_promotion_history_promotion_date", "promotion_history", ["promotion_date"])

    op.create_table(
        "salary_adjustments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id"), nullable=False),
        sa.Column("previous_salary", sa.Numeric(12, 2), nullable=False),
        sa.Column("new_salary", sa.Numeric(12, 2), nullable=False),
        sa.Column("adjustment_type", ADJUSTMENT_TYPE, nullable=False),
        sa.Column("adjustment_percentage", sa.Numeric(18, 2), nullable=True),
        sa.Column("effective_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    )
    op.create_index("ix_salary_adjustments_employee_id", "salary_adjustments", ["employee_id"])
    op.create_index("ix_salary_adjustments_effective_date", "salary_adjustments", ["effective_date"])

    op.create_table(
        "promotion_schedule",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id"), nullable=False),
        sa.Column("current_position", sa.Text(), nullable=False),
        sa.Column("target_position", sa.Text(), nullable=False),
        sa.Column("current_salary", sa.Numeric(12, 2), nullable=False),
        sa.Column("target_salary", sa.Numeric(12, 2), nullable=False),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", PROMOTION_STATUS, server_default="pending", nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    )
    op.create_index("ix_promotion_schedule_employee_id", "promotion_schedule", ["employee_id"])
    op.create_index("ix_promotion_schedule_scheduled_date", "promotion_schedule", ["scheduled_date"])
    op.create_index("ix_promotion_schedule_status", "promotion_schedule", ["status"])


def downgrade() -> None:
    op.drop_index("ix_promotion_schedule_status", table_name="promotion_schedule")
    op.drop_index("ix_promotion_schedule_scheduled_date", table_name="promotion_schedule")
    op.drop_index("ix_promotion_schedule_employee_id", table_name="promotion_schedule")
    op.drop_table("promotion_schedule")

    op.drop_index("ix_salary_adjustments_effective_date", table_name="salary_adjustments")
    op.drop_index("ix_salary_adjustments_employee_id", table_name="salary_adjustments")
    op.drop_table("salary_adjustments")

    op.drop_index("ix_promotion_history_promotion_date", table_name="promotion_history")
    op.drop_index("ix_promotion_history_employee_id", table_name="promotion_history")
    op.drop_table("promotion_history")

    op.drop_table("employees")

    bind = op.get_bind()
    PROMOTION_STATUS.drop(bind, checkfirst=True)
    ADJUSTMENT_TYPE.drop(bind, checkfirst=True)
