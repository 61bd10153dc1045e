from typing import Dict, List

from pydantic import BaseModel, Field

from src.data.schemas.study_session import StudySessionResponse


class ProgressStats(BaseModel):
    """Aggregate practice statistics derived from problems and study sessions."""

    total_problems: int
    solved_problems: int
    easy_problems: int
    medium_problems: int
    hard_problems: int
    current_streak: int
    longest_streak: int
    weekly_progress: List[int] = Field(
        ..., min_length=7, max_length=7, description="Six days ago first, today last"
    )
    category_progress: Dict[str, int]
    average_time: float
    recent_activity: List[StudySessionResponse]
