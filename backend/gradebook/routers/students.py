from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gradebook.core.db import get_db
from gradebook.core.deps import require_row
from gradebook.models.catalog import AcademicYear, GradeLevel
from gradebook.models.room import Room
from gradebook.models.student import Student
from gradebook.schemas.student import (
    GradedStudentResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)
from gradebook.services.grade_service import Scope, grade_service

router = APIRouter(prefix="/students", tags=["students"])


def _require_student(db: Session, student_id: int) -> Student:
    student = db.get(Student, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.get("", response_model=list[GradedStudentResponse])
def list_students(
    grade_id: int | None = None,
    room_id: int | None = None,
    academic_year_id: int | None = None,
    subject_id: int | None = None,
    semester_id: int | None = None,
    db: Session = Depends(get_db),
):
    """Room roster with each student's totals and grade for one subject/semester"""
    if None in (grade_id, room_id, academic_year_id, subject_id, semester_id):
        return []
    scope = Scope(grade_id, subject_id, academic_year_id, semester_id)
    return grade_service.grade_students(db, scope, room_id)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(payload: StudentCreate, db: Session = Depends(get_db)):
    require_row(db, GradeLevel, payload.grade_id, "Grade")
    require_row(db, AcademicYear, payload.academic_year_id, "Academic year")
    room = require_row(db, Room, payload.room_id, "Room")
    if room.grade_id != payload.grade_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Room does not belong to grade",
        )

    student = Student(**payload.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(student_id: int, payload: StudentUpdate, db: Session = Depends(get_db)):
    student = _require_student(db, student_id)
    student.code = payload.code
    student.name = payload.name
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student = _require_student(db, student_id)
    grade_service.delete_student(db, student)
    return None
