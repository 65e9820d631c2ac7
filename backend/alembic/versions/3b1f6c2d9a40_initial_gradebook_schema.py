"""initial gradebook schema

Revision ID: 3b1f6c2d9a40
Revises:
Create Date: 2026-10-19 09:12:41.208113

"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision: str = "3b1f6c2d9a40"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None


def _scope_columns(table: str) -> list:
    return [
        sa.Column("grade_id", sa.Integer(), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("academic_year_id", sa.Integer(), nullable=False),
        sa.Column("semester_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["grade_id"], ["grades.id"], name=f"{table}_grade_id_fkey"),
        sa.ForeignKeyConstraint(
            ["subject_id"], ["subjects.id"], name=f"{table}_subject_id_fkey"
        ),
        sa.ForeignKeyConstraint(
            ["academic_year_id"],
            ["academic_years.id"],
            name=f"{table}_academic_year_id_fkey",
        ),
        sa.ForeignKeyConstraint(
            ["semester_id"], ["semesters.id"], name=f"{table}_semester_id_fkey"
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "academic_years",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("year"),
    )
    lookups = (("semesters", 50), ("grades", 50), ("subjects", 255), ("score_types", 100))
    for table, length in lookups:
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("name", sa.String(length=length), nullable=False),
            sa.PrimaryKeyConstraint("id"),
        )

    op.create_table(
        "rooms",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("grade_id", sa.Integer(), nullable=False),
        sa.Column("room_no", sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(["grade_id"], ["grades.id"], name="rooms_grade_id_fkey"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("grade_id", "room_no", name="rooms_grade_room_no_key"),
    )

    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("grade_id", sa.Integer(), nullable=False),
        sa.Column("room_id", sa.Integer(), nullable=False),
        sa.Column("academic_year_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["grade_id"], ["grades.id"], name="students_grade_id_fkey"),
        sa.ForeignKeyConstraint(["room_id"], ["rooms.id"], name="students_room_id_fkey"),
        sa.ForeignKeyConstraint(
            ["academic_year_id"],
            ["academic_years.id"],
            name="students_academic_year_id_fkey",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_students_roster", "students", ["grade_id", "room_id", "academic_year_id"]
    )

    op.create_table(
        "score_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("max_score", sa.Numeric(6, 2), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        *_scope_columns("score_items"),
        sa.ForeignKeyConstraint(
            ["type_id"], ["score_types.id"], name="score_items_type_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_score_items_scope",
        "score_items",
        ["grade_id", "subject_id", "academic_year_id", "semester_id"],
    )

    op.create_table(
        "scores",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("score_item_id", sa.Integer(), nullable=False),
        sa.Column("score", sa.Numeric(6, 2), nullable=False),
        sa.ForeignKeyConstraint(
            ["student_id"],
            ["students.id"],
            name="scores_student_id_fkey",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["score_item_id"],
            ["score_items.id"],
            name="scores_score_item_id_fkey",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("student_id", "score_item_id", name="scores_student_item_key"),
    )
    op.create_index("idx_scores_student", "scores", ["student_id"])

    op.create_table(
        "grade_ranges",
        sa.Column("id", sa.Integer(), nullable=False),
        *_scope_columns("grade_ranges"),
        sa.Column("grade_label", sa.String(length=5), nullable=False),
        sa.Column("min_score", sa.Numeric(5, 2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "grade_id",
            "subject_id",
            "academic_year_id",
            "semester_id",
            "grade_label",
            name="grade_ranges_scope_label_key",
        ),
    )

    op.create_table(
        "grading_policies",
        sa.Column("id", sa.Integer(), nullable=False),
        *_scope_columns("grading_policies"),
        sa.Column("policy", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "grade_id",
            "subject_id",
            "academic_year_id",
            "semester_id",
            name="grading_policies_scope_key",
        ),
    )


def downgrade() -> None:
    op.drop_table("grading_policies")
    op.drop_table("grade_ranges")
    op.drop_index("idx_scores_student", table_name="scores")
    op.drop_table("scores")
    op.drop_index("idx_score_items_scope", table_name="score_items")
    op.drop_table("score_items")
    op.drop_index("idx_students_roster", table_name="students")
    op.drop_table("students")
    op.drop_table("rooms")
    for table in ("score_types", "subjects", "grades", "semesters", "academic_years"):
        op.drop_table(table)
