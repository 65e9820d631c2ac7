from sqlalchemy import ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gradebook.core.db import Base

SCOPE_COLUMNS = ("grade_id", "subject_id", "academic_year_id", "semester_id")


class GradeRange(Base):
    """One labelled lower bound of a scope's range table."""

    __tablename__ = "grade_ranges"
    __table_args__ = (
        UniqueConstraint(*SCOPE_COLUMNS, "grade_label", name="grade_ranges_scope_label_key"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    grade_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("grades.id", name="grade_ranges_grade_id_fkey"), nullable=False
    )
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id", name="grade_ranges_subject_id_fkey"), nullable=False
    )
    academic_year_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("academic_years.id", name="grade_ranges_academic_year_id_fkey"),
        nullable=False,
    )
    semester_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("semesters.id", name="grade_ranges_semester_id_fkey"), nullable=False
    )
    grade_label: Mapped[str] = mapped_column(String(5), nullable=False)
    min_score: Mapped[float] = mapped_column(Numeric(5, 2), nullable=False)


class GradingPolicy(Base):
    """Which grading strategy applies to a scope; absent rows fall back to the default."""

    __tablename__ = "grading_policies"
    __table_args__ = (UniqueConstraint(*SCOPE_COLUMNS, name="grading_policies_scope_key"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    grade_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("grades.id", name="grading_policies_grade_id_fkey"), nullable=False
    )
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id", name="grading_policies_subject_id_fkey"), nullable=False
    )
    academic_year_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("academic_years.id", name="grading_policies_academic_year_id_fkey"),
        nullable=False,
    )
    semester_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("semesters.id", name="grading_policies_semester_id_fkey"),
        nullable=False,
    )
    policy: Mapped[str] = mapped_column(String(20), nullable=False)
