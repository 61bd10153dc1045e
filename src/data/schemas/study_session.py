import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel as PydanticModel
from pydantic import Field as PydanticField
from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field

from src.data.schemas.base import BaseModel, UTCDateTime
from src.utils.dates import utcnow


class StudySession(BaseModel, table=True):
    """
    A dated record of practice activity.

    ``problems_solved`` holds problem ids by value; ids of deleted problems
    are kept as they are.
    """

    __tablename__ = "study_sessions"

    date: datetime = Field(sa_column=Column(DateTime, nullable=False, index=True))
    problems_solved: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    time_spent: int = Field(default=0, nullable=False)
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))


class StudySessionCreate(PydanticModel):
    date: UTCDateTime = PydanticField(default_factory=utcnow)
    problems_solved: List[str] = PydanticField(default_factory=list)
    time_spent: int = PydanticField(default=0, ge=0, description="Minutes spent")
    notes: Optional[str] = None


class StudySessionResponse(StudySessionCreate):
    id: uuid.UUID

    model_config = {"from_attributes": True}
