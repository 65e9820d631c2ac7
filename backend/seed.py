import logging
import sys

# Add current directory to sys.path to resolve 'gradebook' modules
sys.path.append(".")

from gradebook.core.db import SessionLocal
from gradebook.models.catalog import AcademicYear, GradeLevel, ScoreType, Semester, Subject
from gradebook.models.room import Room
from gradebook.services.grade_service import Scope, grade_service

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

YEARS = (2025, 2026)
SEMESTERS = ("Semester 1", "Semester 2")
GRADE_LEVELS = ("Grade 1", "Grade 2", "Grade 3", "Grade 4", "Grade 5", "Grade 6")
SUBJECTS = ("Mathematics", "Science", "English", "Social Studies")
SCORE_TYPES = ("Assignment", "Quiz", "Midterm", "Final")

DEFAULT_GRADE_RANGES = (
    ("A", 80),
    ("B+", 75),
    ("B", 70),
    ("C+", 65),
    ("C", 60),
    ("D+", 55),
    ("D", 50),
    ("F", 0),
)


def _ensure_named(db, model, names) -> list:
    rows = []
    for name in names:
        row = db.query(model).filter_by(name=name).first()
        if not row:
            row = model(name=name)
            db.add(row)
            logger.info(f"Created {model.__name__}: {name}")
        rows.append(row)
    db.flush()
    return rows


def seed_db():
    db = SessionLocal()
    try:
        logger.info("Seeding database...")

        # 1. Lookup tables
        years = []
        for year in YEARS:
            row = db.query(AcademicYear).filter_by(year=year).first()
            if not row:
                row = AcademicYear(year=year)
                db.add(row)
                logger.info(f"Created AcademicYear: {year}")
            years.append(row)
        db.flush()

        semesters = _ensure_named(db, Semester, SEMESTERS)
        grade_levels = _ensure_named(db, GradeLevel, GRADE_LEVELS)
        subjects = _ensure_named(db, Subject, SUBJECTS)
        _ensure_named(db, ScoreType, SCORE_TYPES)
        db.commit()

        # 2. Rooms
        for grade_level in grade_levels:
            for room_no in ("1", "2"):
                exists = db.query(Room).filter_by(grade_id=grade_level.id, room_no=room_no).first()
                if not exists:
                    db.add(Room(grade_id=grade_level.id, room_no=room_no))
                    logger.info(f"Created Room: {grade_level.name}/{room_no}")
        db.commit()

        # 3. Default range table for every subject of the latest year
        ranges = [
            {"grade_label": label, "min_score": min_score}
            for label, min_score in DEFAULT_GRADE_RANGES
        ]
        for grade_level in grade_levels:
            for subject in subjects:
                for semester in semesters:
                    scope = Scope(grade_level.id, subject.id, years[-1].id, semester.id)
                    if not grade_service.list_grade_ranges(db, scope):
                        grade_service.replace_grade_ranges(db, scope, ranges)

        logger.info("Seeding complete")
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_db()
