from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gradebook.core.db import get_db
from gradebook.models.catalog import AcademicYear, GradeLevel, ScoreType, Semester, Subject
from gradebook.schemas.catalog import MetaResponse

router = APIRouter(tags=["meta"])


@router.get("/meta", response_model=MetaResponse)
def get_meta(db: Session = Depends(get_db)):
    """Lookup tables the client needs to build its scope pickers"""
    return {
        "years": db.query(AcademicYear).order_by(AcademicYear.year.desc()).all(),
        "semesters": db.query(Semester).order_by(Semester.id).all(),
        "grades": db.query(GradeLevel).order_by(GradeLevel.id).all(),
        "subjects": db.query(Subject).order_by(Subject.id).all(),
        "score_types": db.query(ScoreType).order_by(ScoreType.id).all(),
    }
