from typing import Any

from fastapi import HTTPException
from sqlalchemy.orm import Session

from gradebook.models.catalog import AcademicYear, GradeLevel, Semester, Subject


def require_row(db: Session, model: Any, row_id: int, label: str) -> Any:
    row = db.get(model, row_id)
    if not row:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row


def require_scope(
    db: Session,
    grade_id: int,
    subject_id: int,
    academic_year_id: int,
    semester_id: int,
) -> None:
    """404 for the first scope column that points at no lookup row"""
    require_row(db, GradeLevel, grade_id, "Grade")
    require_row(db, Subject, subject_id, "Subject")
    require_row(db, AcademicYear, academic_year_id, "Academic year")
    require_row(db, Semester, semester_id, "Semester")
