from pydantic import BaseModel, ConfigDict, constr


class RoomCreate(BaseModel):
    grade_id: int
    room_no: constr(strip_whitespace=True, min_length=1, max_length=20)


class RoomResponse(BaseModel):
    id: int
    grade_id: int
    room_no: str

    model_config = ConfigDict(from_attributes=True)
