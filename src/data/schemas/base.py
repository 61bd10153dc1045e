import uuid
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from src.utils.dates import as_naive_utc, utcnow

# Datetimes are stored and compared as naive UTC.
UTCDateTime = Annotated[datetime, AfterValidator(as_naive_utc)]


class BaseModel(SQLModel, table=False):
    """Abstract base model for database entities with common fields."""

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        description="Unique identifier of the entity.",
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime,
        nullable=False,
        description="Timestamp when the entity was created.",
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime,
        nullable=False,
        description="Timestamp when the entity was last updated.",
    )
