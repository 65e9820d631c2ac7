from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gradebook.core.db import get_db
from gradebook.core.deps import require_row, require_scope
from gradebook.models.catalog import ScoreType
from gradebook.models.score import ScoreItem
from gradebook.schemas.score import ScoreItemCreate, ScoreItemResponse, ScoreItemUpdate
from gradebook.services.grade_service import Scope, grade_service

router = APIRouter(prefix="/score-items", tags=["score-items"])


def _require_score_item(db: Session, item_id: int) -> ScoreItem:
    item = db.get(ScoreItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Score item not found")
    return item


@router.get("", response_model=list[ScoreItemResponse])
def list_score_items(
    grade_id: int | None = None,
    subject_id: int | None = None,
    academic_year_id: int | None = None,
    semester_id: int | None = None,
    db: Session = Depends(get_db),
):
    if None in (grade_id, subject_id, academic_year_id, semester_id):
        return []
    scope = Scope(grade_id, subject_id, academic_year_id, semester_id)
    return grade_service.list_applicable_items(db, scope)


@router.post("", response_model=ScoreItemResponse, status_code=status.HTTP_201_CREATED)
def create_score_item(payload: ScoreItemCreate, db: Session = Depends(get_db)):
    require_row(db, ScoreType, payload.type_id, "Score type")
    require_scope(
        db, payload.grade_id, payload.subject_id, payload.academic_year_id, payload.semester_id
    )

    item = ScoreItem(**payload.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.put("/{item_id}", response_model=ScoreItemResponse)
def update_score_item(item_id: int, payload: ScoreItemUpdate, db: Session = Depends(get_db)):
    item = _require_score_item(db, item_id)
    require_row(db, ScoreType, payload.type_id, "Score type")

    item.name = payload.name
    item.max_score = payload.max_score
    item.type_id = payload.type_id
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_score_item(item_id: int, db: Session = Depends(get_db)):
    item = _require_score_item(db, item_id)
    grade_service.delete_score_item(db, item)
    return None
