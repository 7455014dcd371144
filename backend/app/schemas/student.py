from typing import Optional

from pydantic import StrictStr

from app.schemas.base import RecordBase, RecordPatch


class StudentCreate(RecordBase):
    name: StrictStr
    email: StrictStr


class StudentUpdate(RecordPatch):
    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None


class StudentResponse(StudentCreate):
    id: StrictStr
