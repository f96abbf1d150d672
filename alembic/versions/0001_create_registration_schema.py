"""create course registration schema

Revision ID: 0001_registration
Revises:
Create Date: 2021-03-14 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_registration'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "account_types",
        sa.Column("name", sa.String(50), primary_key=True),
    )
    op.create_table(
        "departments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_table(
        "grades",
        sa.Column("name", sa.String(5), primary_key=True),
    )
    op.create_table(
        "semesters",
        sa.Column("name", sa.String(20), primary_key=True),
    )
    for log_table in ("current_semesters", "next_semesters"):
        op.create_table(
            log_table,
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("name", sa.String(20), sa.ForeignKey("semesters.name"), nullable=False),
            sa.Column("year", sa.Integer(), nullable=False),
            sa.Column("date_added", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        )
        op.create_index(f"ix_{log_table}_date_added", log_table, ["date_added"])
    op.create_table(
        "instructors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("email", sa.String(100), nullable=True, unique=True),
    )
    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("dept", sa.Integer(), sa.ForeignKey("departments.id"), nullable=False),
        sa.Column("credits", sa.Integer(), nullable=False),
        sa.Column("cost", sa.Numeric(10, 2), nullable=False),
    )
    op.create_table(
        "classes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("instructor", sa.Integer(), sa.ForeignKey("instructors.id"), nullable=True),
        sa.Column("semester", sa.String(20), sa.ForeignKey("semesters.name"), nullable=False),
        sa.Column("section", sa.String(10), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.UniqueConstraint("course_id", "section", "year", "semester", name="uq_class_identity"),
    )
    op.create_index("ix_classes_course_id", "classes", ["course_id"])
    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("credits", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("registered", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("probation", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("ssn", sa.BigInteger(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table("students")
    op.drop_index("ix_classes_course_id", table_name="classes")
    op.drop_table("classes")
    op.drop_table("courses")
    op.drop_table("instructors")
    for log_table in ("next_semesters", "current_semesters"):
        op.drop_index(f"ix_{log_table}_date_added", table_name=log_table)
        op.drop_table(log_table)
    op.drop_table("semesters")
    op.drop_table("grades")
    op.drop_table("departments")
    op.drop_table("account_types")
