import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from gradebook.core.db import Base, get_db  # noqa: E402
from gradebook.main import app  # noqa: E402
from gradebook.models.catalog import (  # noqa: E402
    AcademicYear,
    GradeLevel,
    ScoreType,
    Semester,
    Subject,
)
from gradebook.models.room import Room  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Session:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def catalog(db_session: Session) -> dict[str, int]:
    """Two of each lookup row plus one room per grade; ids keyed by role."""
    year = AcademicYear(year=2025)
    other_year = AcademicYear(year=2024)
    semester = Semester(name="Semester 1")
    other_semester = Semester(name="Semester 2")
    grade = GradeLevel(name="Grade 4")
    other_grade = GradeLevel(name="Grade 5")
    subject = Subject(name="Mathematics")
    other_subject = Subject(name="Science")
    homework = ScoreType(name="Homework")
    exam = ScoreType(name="Exam")
    db_session.add_all(
        [
            year,
            other_year,
            semester,
            other_semester,
            grade,
            other_grade,
            subject,
            other_subject,
            homework,
            exam,
        ]
    )
    db_session.flush()

    room = Room(grade_id=grade.id, room_no="1")
    other_room = Room(grade_id=grade.id, room_no="2")
    db_session.add_all([room, other_room])
    db_session.commit()

    return {
        "year_id": year.id,
        "other_year_id": other_year.id,
        "semester_id": semester.id,
        "other_semester_id": other_semester.id,
        "grade_id": grade.id,
        "other_grade_id": other_grade.id,
        "subject_id": subject.id,
        "other_subject_id": other_subject.id,
        "homework_type_id": homework.id,
        "exam_type_id": exam.id,
        "room_id": room.id,
        "other_room_id": other_room.id,
    }


@pytest.fixture
def scope_params(catalog: dict[str, int]) -> dict[str, int]:
    return {
        "grade_id": catalog["grade_id"],
        "subject_id": catalog["subject_id"],
        "academic_year_id": catalog["year_id"],
        "semester_id": catalog["semester_id"],
    }
