from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gradebook.core.db import Base


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (UniqueConstraint("grade_id", "room_no", name="rooms_grade_room_no_key"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    grade_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("grades.id", name="rooms_grade_id_fkey"), nullable=False
    )
    room_no: Mapped[str] = mapped_column(String(20), nullable=False)
