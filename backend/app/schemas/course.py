from typing import Optional

from pydantic import StrictStr

from app.schemas.base import RecordBase, RecordPatch


class CourseCreate(RecordBase):
    title: StrictStr
    description: StrictStr
    teacher: StrictStr


class CourseUpdate(RecordPatch):
    title: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    teacher: Optional[StrictStr] = None


class CourseResponse(CourseCreate):
    id: StrictStr
