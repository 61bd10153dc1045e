from datetime import datetime
from typing import Optional

from src.business.services.progress import compute_stats
from src.config import Config, logger
from src.data.repositories.store import RecordStore
from src.data.schemas import ProgressStats

stats_logger = logger.getChild("stats")


async def get_progress_stats_service(
    store: RecordStore, now: Optional[datetime] = None
) -> ProgressStats:
    """
    Recompute progress statistics from everything in the store.

    Args:
        store: Record store to read problems and study sessions from
        now: Reference time for streaks and the weekly histogram

    Returns:
        Progress statistics
    """
    problems = await store.get_all_problems()
    sessions = await store.get_all_study_sessions()
    stats = compute_stats(
        problems, sessions, now=now, recent_limit=Config.RECENT_ACTIVITY_LIMIT
    )
    stats_logger.info(
        f"Computed stats over {len(problems)} problems and {len(sessions)} sessions "
        f"(current streak: {stats.current_streak}, longest: {stats.longest_streak})"
    )
    return stats
