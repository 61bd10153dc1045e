import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel as PydanticModel
from pydantic import Field as PydanticField
from sqlalchemy import JSON, Column, DateTime, Text
from sqlalchemy import Enum as SQLEnum
from sqlmodel import Field, Relationship, SQLModel

from src.data.schemas.base import BaseModel, UTCDateTime
from src.data.schemas.enums import Difficulty
from src.utils.dates import utcnow

REQUIRED_FIELDS = {"title", "difficulty", "category", "tags"}


class Problem(BaseModel, table=True):
    """
    A tracked coding exercise.

    ``solved``, ``attempts`` and the solved timestamps are only changed by
    recording a solution; partial updates never touch them.
    """

    __tablename__ = "problems"

    title: str = Field(nullable=False)
    difficulty: Difficulty = Field(
        sa_column=Column(SQLEnum(Difficulty), nullable=False)
    )
    category: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    url: Optional[str] = Field(default=None, nullable=True)
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    time_complexity: Optional[str] = Field(default=None, nullable=True)
    space_complexity: Optional[str] = Field(default=None, nullable=True)
    attempts: int = Field(default=0, nullable=False)
    solved: bool = Field(default=False, nullable=False)
    first_solved_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    last_solved_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    solutions: List["Solution"] = Relationship(
        back_populates="problem",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "cascade": "all, delete-orphan",
            "order_by": "Solution.created_at",
        },
    )


class Solution(SQLModel, table=True):
    """One recorded implementation of a problem. Never updated once stored."""

    __tablename__ = "solutions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    problem_id: uuid.UUID = Field(foreign_key="problems.id", nullable=False, index=True)
    language: str = Field(nullable=False)
    code: str = Field(sa_column=Column(Text, nullable=False))
    approach: str = Field(nullable=False)
    time_complexity: str = Field(nullable=False)
    space_complexity: str = Field(nullable=False)
    runtime: Optional[float] = Field(default=None, nullable=True)
    memory: Optional[float] = Field(default=None, nullable=True)
    beats: Optional[float] = Field(default=None, nullable=True)
    explanation: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    github_url: Optional[str] = Field(default=None, nullable=True)
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    problem: Optional[Problem] = Relationship(back_populates="solutions")


class ProblemBase(PydanticModel):
    title: str = PydanticField(..., min_length=1, max_length=255, examples=["Two Sum"])
    difficulty: Difficulty = PydanticField(..., examples=["Easy"])
    category: List[str] = PydanticField(default_factory=list, examples=[["Array"]])
    tags: List[str] = PydanticField(default_factory=list, examples=[["Hash Table"]])
    url: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None


class ProblemCreate(ProblemBase):
    pass


class ProblemUpdate(PydanticModel):
    """
    Partial update. Optional text fields can be cleared with null; nulls for
    title, difficulty and the label lists are ignored.
    """

    title: Optional[str] = PydanticField(default=None, min_length=1, max_length=255)
    difficulty: Optional[Difficulty] = None
    category: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    url: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_FIELDS
        }


class SolutionCreate(PydanticModel):
    language: str = PydanticField(..., examples=["python"])
    code: str
    approach: str = PydanticField(..., examples=["Hash map"])
    time_complexity: str = PydanticField(..., examples=["O(n)"])
    space_complexity: str = PydanticField(..., examples=["O(n)"])
    runtime: Optional[float] = PydanticField(default=None, description="Runtime in ms")
    memory: Optional[float] = PydanticField(default=None, description="Memory in MB")
    beats: Optional[float] = PydanticField(default=None, description="Percentile beaten")
    explanation: Optional[str] = None
    github_url: Optional[str] = None


class SolutionResponse(SolutionCreate):
    id: uuid.UUID
    problem_id: uuid.UUID
    created_at: UTCDateTime = PydanticField(default_factory=utcnow)

    model_config = {"from_attributes": True}


class ProblemResponse(ProblemBase):
    """
    Full problem record as returned by the API and carried in exports.

    Everything beyond id, title, difficulty and category has a default so
    that exported records from older versions can still be read back.
    """

    id: uuid.UUID
    solutions: List[SolutionResponse] = PydanticField(default_factory=list)
    attempts: int = PydanticField(default=0, ge=0)
    solved: bool = False
    first_solved_at: Optional[UTCDateTime] = None
    last_solved_at: Optional[UTCDateTime] = None
    created_at: UTCDateTime = PydanticField(default_factory=utcnow)
    updated_at: UTCDateTime = PydanticField(default_factory=utcnow)

    model_config = {"from_attributes": True}
