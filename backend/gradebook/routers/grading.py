from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gradebook.core.db import get_db
from gradebook.core.deps import require_scope
from gradebook.schemas.grading import (
    GradeRangeEntry,
    GradeRangeReplace,
    GradingPolicyResponse,
    GradingPolicyUpdate,
)
from gradebook.services.grade_service import Scope, grade_service

router = APIRouter(tags=["grading"])


@router.get("/grade-ranges", response_model=list[GradeRangeEntry])
def list_grade_ranges(
    grade_id: int | None = None,
    subject_id: int | None = None,
    academic_year_id: int | None = None,
    semester_id: int | None = None,
    db: Session = Depends(get_db),
):
    if None in (grade_id, subject_id, academic_year_id, semester_id):
        return []
    scope = Scope(grade_id, subject_id, academic_year_id, semester_id)
    return grade_service.list_grade_ranges(db, scope)


@router.put("/grade-ranges", response_model=list[GradeRangeEntry])
def replace_grade_ranges(payload: GradeRangeReplace, db: Session = Depends(get_db)):
    require_scope(
        db, payload.grade_id, payload.subject_id, payload.academic_year_id, payload.semester_id
    )
    scope = Scope(
        payload.grade_id, payload.subject_id, payload.academic_year_id, payload.semester_id
    )
    try:
        return grade_service.replace_grade_ranges(
            db, scope, [r.model_dump() for r in payload.ranges]
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get("/grading-policy", response_model=GradingPolicyResponse)
def get_grading_policy(
    grade_id: int,
    subject_id: int,
    academic_year_id: int,
    semester_id: int,
    db: Session = Depends(get_db),
):
    scope = Scope(grade_id, subject_id, academic_year_id, semester_id)
    return {
        "grade_id": grade_id,
        "subject_id": subject_id,
        "academic_year_id": academic_year_id,
        "semester_id": semester_id,
        "policy": grade_service.get_policy_name(db, scope),
    }


@router.put("/grading-policy", response_model=GradingPolicyResponse)
def set_grading_policy(payload: GradingPolicyUpdate, db: Session = Depends(get_db)):
    require_scope(
        db, payload.grade_id, payload.subject_id, payload.academic_year_id, payload.semester_id
    )
    scope = Scope(
        payload.grade_id, payload.subject_id, payload.academic_year_id, payload.semester_id
    )
    try:
        row = grade_service.set_grading_policy(db, scope, payload.policy)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return {**payload.model_dump(), "policy": row.policy}
