from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, selectinload

from gradebook.core.config import settings
from gradebook.models.grading import GradeRange, GradingPolicy
from gradebook.models.score import Score, ScoreItem
from gradebook.models.student import Student
from gradebook.services.grading import (
    GRADE_LABELS,
    POLICIES,
    RANGE_TABLE,
    FixedThresholdPolicy,
    GradingStrategy,
    RangeTablePolicy,
    aggregate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scope:
    grade_id: int
    subject_id: int
    academic_year_id: int
    semester_id: int

    def filter(self, model: Any) -> list[Any]:
        return [getattr(model, column) == value for column, value in asdict(self).items()]


def _upsert_statement(db: Session, model: Any):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise ValueError(f"Upsert not supported for dialect {dialect!r}")


class GradeService:
    """Reads score data for a scope and attaches derived grades to students"""

    def list_applicable_items(self, db: Session, scope: Scope) -> list[ScoreItem]:
        return (
            db.query(ScoreItem)
            .options(selectinload(ScoreItem.score_type))
            .filter(*scope.filter(ScoreItem))
            .order_by(ScoreItem.type_id, ScoreItem.id)
            .all()
        )

    def list_scores(self, db: Session, student_id: int) -> list[Score]:
        return db.query(Score).filter(Score.student_id == student_id).all()

    def list_scores_for_students(
        self, db: Session, student_ids: Sequence[int]
    ) -> dict[int, list[Score]]:
        """One query for a whole roster instead of one per student."""
        by_student: dict[int, list[Score]] = {student_id: [] for student_id in student_ids}
        if not student_ids:
            return by_student

        rows = db.query(Score).filter(Score.student_id.in_(student_ids)).all()
        for row in rows:
            by_student[row.student_id].append(row)
        return by_student

    def list_grade_ranges(self, db: Session, scope: Scope) -> list[GradeRange]:
        return (
            db.query(GradeRange)
            .filter(*scope.filter(GradeRange))
            .order_by(GradeRange.min_score.desc())
            .all()
        )

    def get_policy_name(self, db: Session, scope: Scope) -> str:
        row = db.query(GradingPolicy).filter(*scope.filter(GradingPolicy)).first()
        return row.policy if row else settings.DEFAULT_GRADING_POLICY

    def resolve_policy(self, db: Session, scope: Scope) -> GradingStrategy:
        if self.get_policy_name(db, scope) == RANGE_TABLE:
            # An unconfigured table grades everyone with the fallback label
            return RangeTablePolicy(self.list_grade_ranges(db, scope))
        return FixedThresholdPolicy()

    def grade_students(
        self,
        db: Session,
        scope: Scope,
        room_id: int,
    ) -> list[dict[str, Any]]:
        """
        Graded roster for a room.

        Each record carries the student columns plus ``scores`` (item id to
        recorded score), ``total``, ``max``, ``percent`` and ``grade``.
        """
        students = (
            db.query(Student)
            .filter(
                Student.grade_id == scope.grade_id,
                Student.room_id == room_id,
                Student.academic_year_id == scope.academic_year_id,
            )
            .order_by(Student.code)
            .all()
        )
        items = self.list_applicable_items(db, scope)
        strategy = self.resolve_policy(db, scope)
        scores_by_student = self.list_scores_for_students(db, [s.id for s in students])

        result = []
        for student in students:
            summary = aggregate(
                items,
                scores_by_student[student.id],
                strategy,
                decimals=settings.PERCENT_DECIMALS,
            )
            result.append(
                {
                    "id": student.id,
                    "code": student.code,
                    "name": student.name,
                    "grade_id": student.grade_id,
                    "room_id": student.room_id,
                    "academic_year_id": student.academic_year_id,
                    **summary.as_dict(),
                }
            )
        return result

    def upsert_score(
        self,
        db: Session,
        student_id: int,
        score_item_id: int,
        score: float,
    ) -> Score:
        stmt = _upsert_statement(db, Score).values(
            student_id=student_id,
            score_item_id=score_item_id,
            score=score,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["student_id", "score_item_id"],
            set_={"score": stmt.excluded.score},
        )
        try:
            db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise

        return (
            db.query(Score)
            .filter(Score.student_id == student_id, Score.score_item_id == score_item_id)
            .populate_existing()
            .one()
        )

    def validate_grade_ranges(self, ranges: Sequence[dict[str, Any]]) -> None:
        if len(ranges) != len(GRADE_LABELS):
            raise ValueError(
                f"A grade range table needs exactly {len(GRADE_LABELS)} entries, "
                f"got {len(ranges)}"
            )

        labels = [r["grade_label"] for r in ranges]
        if sorted(labels) != sorted(GRADE_LABELS):
            raise ValueError(f"Grade labels must be exactly {', '.join(GRADE_LABELS)}")

        for r in ranges:
            if not 0 <= r["min_score"] <= 100:
                raise ValueError(
                    f"min_score for {r['grade_label']} must be between 0 and 100"
                )

    def replace_grade_ranges(
        self,
        db: Session,
        scope: Scope,
        ranges: Sequence[dict[str, Any]],
    ) -> list[GradeRange]:
        """
        Swap a scope's whole range table.

        Input is validated before any write; the delete and inserts share one
        transaction so a failure leaves the previous table in place.
        """
        self.validate_grade_ranges(ranges)

        try:
            db.execute(delete(GradeRange).where(*scope.filter(GradeRange)))
            db.add_all(
                [
                    GradeRange(
                        **asdict(scope),
                        grade_label=r["grade_label"],
                        min_score=r["min_score"],
                    )
                    for r in ranges
                ]
            )
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Failed to replace grade ranges for %s", scope)
            raise

        logger.info("Replaced grade ranges for %s", scope)
        return self.list_grade_ranges(db, scope)

    def set_grading_policy(self, db: Session, scope: Scope, policy: str) -> GradingPolicy:
        if policy not in POLICIES:
            raise ValueError(f"Unknown grading policy {policy!r}")

        row = db.query(GradingPolicy).filter(*scope.filter(GradingPolicy)).first()
        if row is None:
            row = GradingPolicy(**asdict(scope), policy=policy)
        else:
            row.policy = policy
        db.add(row)
        db.commit()
        db.refresh(row)

        logger.info("Grading policy for %s set to %s", scope, policy)
        return row

    def delete_score_item(self, db: Session, item: ScoreItem) -> None:
        item_id = item.id
        db.delete(item)
        db.commit()
        logger.info("Deleted score item %s and its scores", item_id)

    def delete_student(self, db: Session, student: Student) -> None:
        student_id = student.id
        db.delete(student)
        db.commit()
        logger.info("Deleted student %s and their scores", student_id)


# Singleton instance
grade_service = GradeService()
