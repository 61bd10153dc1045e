from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence

from src.data.schemas import (
    Difficulty,
    ProblemResponse,
    ProgressStats,
    StudySessionResponse,
)
from src.utils.dates import as_naive_utc, days_between, utcnow

WEEK_DAYS = 7
RECENT_ACTIVITY_LIMIT = 10


def sort_sessions_newest_first(
    sessions: Sequence[StudySessionResponse],
) -> List[StudySessionResponse]:
    return sorted(sessions, key=lambda s: as_naive_utc(s.date), reverse=True)


def current_streak(
    sorted_sessions: Sequence[StudySessionResponse], now: datetime
) -> int:
    """
    Number of sessions in the unbroken run leading up to ``now``.

    Each session counts on its own, so two sessions on the same day both
    extend the streak.
    """
    streak = 0
    reference = now
    for session in sorted_sessions:
        if days_between(reference, session.date) > 1:
            break
        streak += 1
        reference = session.date
    return streak


def longest_streak(sorted_sessions: Sequence[StudySessionResponse]) -> int:
    """
    Longest run of sessions where each one is exactly one whole day older
    than the previous one.
    """
    longest = 0
    for start in range(len(sorted_sessions)):
        run = 1
        run_date = sorted_sessions[start].date
        for session in sorted_sessions[start + 1:]:
            if days_between(run_date, session.date) != 1:
                break
            run += 1
            run_date = session.date
        longest = max(longest, run)
    return longest


def weekly_progress(
    sessions: Sequence[StudySessionResponse], now: datetime
) -> List[int]:
    """
    Solved problem counts for the last seven days, oldest first.

    A session exactly seven days old passes the window check but has no
    bucket and is dropped. Sessions dated after ``now`` are ignored.
    """
    buckets = [0] * WEEK_DAYS
    window_start = now - timedelta(days=WEEK_DAYS)
    for session in sessions:
        if as_naive_utc(session.date) < window_start:
            continue
        day_index = days_between(now, session.date)
        if 0 <= day_index < WEEK_DAYS:
            buckets[WEEK_DAYS - 1 - day_index] += len(session.problems_solved)
    return buckets


def category_progress(problems: Sequence[ProblemResponse]) -> Dict[str, int]:
    """Solved problem count per category, including categories with none solved."""
    progress: Dict[str, int] = {}
    for problem in problems:
        for category in problem.category:
            progress[category] = progress.get(category, 0) + (1 if problem.solved else 0)
    return progress


def average_time(sessions: Sequence[StudySessionResponse]) -> float:
    if not sessions:
        return 0
    return sum(session.time_spent for session in sessions) / len(sessions)


def compute_stats(
    problems: Sequence[ProblemResponse],
    sessions: Sequence[StudySessionResponse],
    now: Optional[datetime] = None,
    recent_limit: int = RECENT_ACTIVITY_LIMIT,
) -> ProgressStats:
    """
    Derives progress statistics from the full problem and session collections.

    Pure: nothing is cached between calls and the inputs are not modified.
    ``now`` defaults to the current UTC time.
    """
    now = as_naive_utc(now) if now is not None else utcnow()
    sorted_sessions = sort_sessions_newest_first(sessions)

    return ProgressStats(
        total_problems=len(problems),
        solved_problems=sum(1 for p in problems if p.solved),
        easy_problems=sum(1 for p in problems if p.difficulty == Difficulty.EASY),
        medium_problems=sum(1 for p in problems if p.difficulty == Difficulty.MEDIUM),
        hard_problems=sum(1 for p in problems if p.difficulty == Difficulty.HARD),
        current_streak=current_streak(sorted_sessions, now),
        longest_streak=longest_streak(sorted_sessions),
        weekly_progress=weekly_progress(sessions, now),
        category_progress=category_progress(problems),
        average_time=average_time(sessions),
        recent_activity=sorted_sessions[:recent_limit],
    )
