from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from gradebook.core.db import get_db
from gradebook.models.score import ScoreItem
from gradebook.models.student import Student
from gradebook.schemas.score import ScoreResponse, ScoreUpsert
from gradebook.services.grade_service import grade_service

router = APIRouter(prefix="/scores", tags=["scores"])


@router.put("", response_model=ScoreResponse)
def upsert_score(payload: ScoreUpsert, db: Session = Depends(get_db)):
    if not db.get(Student, payload.student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    if not db.get(ScoreItem, payload.score_item_id):
        raise HTTPException(status_code=404, detail="Score item not found")

    return grade_service.upsert_score(
        db, payload.student_id, payload.score_item_id, payload.score
    )
