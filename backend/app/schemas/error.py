from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    status: int
    field: Optional[str] = None
