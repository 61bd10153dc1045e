from typing import Iterable, List, Optional, Sequence, TypeVar

from src.data.schemas import (
    DateRange,
    Difficulty,
    FilterCriteria,
    ProblemResponse,
    SortField,
    SortOrder,
)
from src.utils.dates import as_naive_utc

P = TypeVar("P", bound=ProblemResponse)

DIFFICULTY_ORDER = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}


def _contains_any(labels: Iterable[str], needles: Iterable[str]) -> bool:
    lowered = [label.lower() for label in labels]
    return any(needle.lower() in label for needle in needles for label in lowered)


def _matches_search(problem: ProblemResponse, search: str) -> bool:
    needle = search.lower()
    fields = (problem.title, problem.description, problem.notes)
    return any(field is not None and needle in field.lower() for field in fields)


def _in_date_range(problem: ProblemResponse, date_range: DateRange) -> bool:
    reference = as_naive_utc(problem.last_solved_at or problem.created_at)
    start = as_naive_utc(date_range.start)
    end = as_naive_utc(date_range.end)
    if start is not None and reference < start:
        return False
    if end is not None and reference > end:
        return False
    return True


def matches(problem: ProblemResponse, criteria: FilterCriteria) -> bool:
    """Whether a single problem satisfies every predicate present in ``criteria``."""
    if criteria.difficulty is not None and problem.difficulty not in criteria.difficulty:
        return False

    # Empty label lists mean "no filter", not "match nothing"
    if criteria.categories and not _contains_any(problem.category, criteria.categories):
        return False

    if criteria.tags and not _contains_any(problem.tags, criteria.tags):
        return False

    if criteria.solved is not None and problem.solved != criteria.solved:
        return False

    if criteria.search and not _matches_search(problem, criteria.search):
        return False

    if criteria.date_range is not None and not _in_date_range(problem, criteria.date_range):
        return False

    return True


def filter_problems(
    problems: Sequence[P], criteria: Optional[FilterCriteria] = None
) -> List[P]:
    """
    Returns the problems satisfying ``criteria``, in their original order.

    Inputs are never modified. An inverted date range simply matches nothing.
    """
    if criteria is None:
        return list(problems)
    return [problem for problem in problems if matches(problem, criteria)]


def _sort_key(sort_by: SortField):
    if sort_by == SortField.TITLE:
        return lambda p: p.title
    if sort_by == SortField.DIFFICULTY:
        return lambda p: DIFFICULTY_ORDER[p.difficulty]
    if sort_by == SortField.CATEGORY:
        return lambda p: p.category[0] if p.category else ""
    return lambda p: as_naive_utc(p.updated_at)


def sort_problems(
    problems: Sequence[P],
    sort_by: SortField = SortField.DATE,
    order: SortOrder = SortOrder.DESC,
) -> List[P]:
    """Stable sort by title, difficulty, last update or first category."""
    return sorted(
        problems, key=_sort_key(sort_by), reverse=order == SortOrder.DESC
    )
