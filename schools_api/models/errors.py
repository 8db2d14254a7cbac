# schools_api/models/errors.py

from typing import Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str
    status_code: int = Field(alias="statusCode")
    request_id: Optional[str] = Field(default=None, alias="requestId")

    class Config:
        populate_by_name = True


class ErrorOut(BaseModel):
    error: ErrorDetail
