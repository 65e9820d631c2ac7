from sqlalchemy import ForeignKey, Index, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gradebook.core.db import Base


class ScoreItem(Base):
    __tablename__ = "score_items"
    __table_args__ = (
        Index(
            "idx_score_items_scope", "grade_id", "subject_id", "academic_year_id", "semester_id"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    max_score: Mapped[float] = mapped_column(Numeric(6, 2), nullable=False)
    type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("score_types.id", name="score_items_type_id_fkey"), nullable=False
    )
    grade_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("grades.id", name="score_items_grade_id_fkey"), nullable=False
    )
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id", name="score_items_subject_id_fkey"), nullable=False
    )
    academic_year_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("academic_years.id", name="score_items_academic_year_id_fkey"),
        nullable=False,
    )
    semester_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("semesters.id", name="score_items_semester_id_fkey"), nullable=False
    )

    score_type: Mapped["ScoreType"] = relationship("ScoreType")  # noqa: F821
    scores: Mapped[list["Score"]] = relationship(
        "Score",
        back_populates="score_item",
        cascade="all, delete-orphan",
    )

    @property
    def type_name(self) -> str | None:
        return self.score_type.name if self.score_type else None


class Score(Base):
    __tablename__ = "scores"
    __table_args__ = (
        UniqueConstraint("student_id", "score_item_id", name="scores_student_item_key"),
        Index("idx_scores_student", "student_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id", name="scores_student_id_fkey", ondelete="CASCADE"),
        nullable=False,
    )
    score_item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("score_items.id", name="scores_score_item_id_fkey", ondelete="CASCADE"),
        nullable=False,
    )
    score: Mapped[float] = mapped_column(Numeric(6, 2), nullable=False)

    student: Mapped["Student"] = relationship("Student", back_populates="scores")  # noqa: F821
    score_item: Mapped["ScoreItem"] = relationship("ScoreItem", back_populates="scores")
