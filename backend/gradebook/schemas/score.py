from pydantic import BaseModel, ConfigDict, Field, constr

# Numeric(6, 2) columns
MAX_STORED_SCORE = 9999.99


class ScoreItemBase(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=255)
    max_score: float = Field(..., ge=0, le=MAX_STORED_SCORE)
    type_id: int


class ScoreItemCreate(ScoreItemBase):
    grade_id: int
    subject_id: int
    academic_year_id: int
    semester_id: int


class ScoreItemUpdate(ScoreItemBase):
    pass


class ScoreItemResponse(ScoreItemCreate):
    id: int
    type_name: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ScoreUpsert(BaseModel):
    student_id: int
    score_item_id: int
    score: float = Field(..., ge=0, le=MAX_STORED_SCORE)


class ScoreResponse(ScoreUpsert):
    id: int

    model_config = ConfigDict(from_attributes=True)
