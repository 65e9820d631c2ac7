from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScopeParams(BaseModel):
    grade_id: int
    subject_id: int
    academic_year_id: int
    semester_id: int


class GradeRangeEntry(BaseModel):
    grade_label: str
    min_score: float = Field(..., ge=0, le=100)

    model_config = ConfigDict(from_attributes=True)


class GradeRangeReplace(ScopeParams):
    ranges: list[GradeRangeEntry]


class GradingPolicyUpdate(ScopeParams):
    policy: Literal["fixed", "range_table"]


class GradingPolicyResponse(ScopeParams):
    policy: Literal["fixed", "range_table"]
