from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gradebook.core.db import Base


class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        Index("idx_students_roster", "grade_id", "room_id", "academic_year_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    grade_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("grades.id", name="students_grade_id_fkey"), nullable=False
    )
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rooms.id", name="students_room_id_fkey"), nullable=False
    )
    academic_year_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("academic_years.id", name="students_academic_year_id_fkey"),
        nullable=False,
    )

    scores: Mapped[list["Score"]] = relationship(  # noqa: F821
        "Score",
        back_populates="student",
        cascade="all, delete-orphan",
    )
