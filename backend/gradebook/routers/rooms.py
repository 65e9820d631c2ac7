from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gradebook.core.db import get_db
from gradebook.core.deps import require_row
from gradebook.models.catalog import GradeLevel
from gradebook.models.room import Room
from gradebook.schemas.room import RoomCreate, RoomResponse

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("", response_model=list[RoomResponse])
def list_rooms(grade_id: int | None = None, db: Session = Depends(get_db)):
    if grade_id is None:
        return []
    return db.query(Room).filter(Room.grade_id == grade_id).order_by(Room.room_no).all()


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(payload: RoomCreate, db: Session = Depends(get_db)):
    require_row(db, GradeLevel, payload.grade_id, "Grade")

    room = Room(grade_id=payload.grade_id, room_no=payload.room_no)
    db.add(room)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Room already exists")
    db.refresh(room)
    return room
