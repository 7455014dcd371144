import re
from datetime import date as date_type
from typing import Optional

from pydantic import StrictStr, field_validator

from app.schemas.base import RecordBase, RecordPatch

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def _check_iso_date(value: Optional[str]) -> Optional[str]:
    # Kept as the original string; only the format is checked
    if value is not None:
        if not ISO_DATE.fullmatch(value):
            raise ValueError("must be an ISO date (YYYY-MM-DD)")
        try:
            date_type.fromisoformat(value)
        except ValueError:
            raise ValueError("must be an ISO date (YYYY-MM-DD)")
    return value


class EnrollmentCreate(RecordBase):
    studentId: StrictStr
    courseId: StrictStr
    date: StrictStr

    check_date = field_validator("date")(_check_iso_date)


class EnrollmentUpdate(RecordPatch):
    studentId: Optional[StrictStr] = None
    courseId: Optional[StrictStr] = None
    date: Optional[StrictStr] = None

    check_date = field_validator("date")(_check_iso_date)


class EnrollmentResponse(EnrollmentCreate):
    id: StrictStr
