from pydantic import BaseModel, ConfigDict, constr


class StudentBase(BaseModel):
    code: constr(strip_whitespace=True, min_length=1, max_length=50)
    name: constr(strip_whitespace=True, min_length=1, max_length=255)


class StudentCreate(StudentBase):
    grade_id: int
    room_id: int
    academic_year_id: int


class StudentUpdate(StudentBase):
    pass


class StudentResponse(StudentCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)


class GradedStudentResponse(StudentResponse):
    scores: dict[int, float] = {}
    total: float
    max: float
    percent: float
    grade: str
