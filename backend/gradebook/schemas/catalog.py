from pydantic import BaseModel, ConfigDict


class AcademicYearSummary(BaseModel):
    id: int
    year: int

    model_config = ConfigDict(from_attributes=True)


class NamedSummary(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class MetaResponse(BaseModel):
    years: list[AcademicYearSummary]
    semesters: list[NamedSummary]
    grades: list[NamedSummary]
    subjects: list[NamedSummary]
    score_types: list[NamedSummary]
