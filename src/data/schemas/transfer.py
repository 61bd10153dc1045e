from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from src.data.schemas.problem import ProblemResponse
from src.data.schemas.study_session import StudySessionResponse
from src.utils.dates import utcnow

EXPORT_VERSION = "1.0"


class ExportBundle(BaseModel):
    problems: List[ProblemResponse]
    sessions: List[StudySessionResponse]
    export_date: datetime = Field(default_factory=utcnow)
    version: str = EXPORT_VERSION


class ImportResult(BaseModel):
    success: bool
    message: str
    imported_problems: int = 0
    imported_sessions: int = 0
    valid_problems: int = 0
    invalid_problems: int = 0
