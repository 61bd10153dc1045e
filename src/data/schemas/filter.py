from typing import List, Optional

from pydantic import BaseModel

from src.data.schemas.base import UTCDateTime
from src.data.schemas.enums import Difficulty, SortField, SortOrder


class DateRange(BaseModel):
    """Inclusive range; a missing bound leaves that side open."""

    start: Optional[UTCDateTime] = None
    end: Optional[UTCDateTime] = None


class FilterCriteria(BaseModel):
    """Optional predicates over problems, combined with AND when present."""

    difficulty: Optional[List[Difficulty]] = None
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    solved: Optional[bool] = None
    search: Optional[str] = None
    date_range: Optional[DateRange] = None


class SortParams(BaseModel):
    sort_by: SortField = SortField.DATE
    order: SortOrder = SortOrder.DESC
