from typing import List, Optional

from src.business.services.filtering import filter_problems, sort_problems
from src.config import logger
from src.data.repositories.store import RecordStore
from src.data.schemas import FilterCriteria, ProblemResponse, SortParams

problem_logger = logger.getChild("problem")


async def list_problems_service(
    store: RecordStore,
    criteria: Optional[FilterCriteria] = None,
    sort: Optional[SortParams] = None,
) -> List[ProblemResponse]:
    """
    Get the problems matching ``criteria``, optionally sorted.

    Args:
        store: Record store to read problems from
        criteria: Filter predicates, all optional
        sort: Sort field and order; store order is kept when omitted

    Returns:
        List of matching problems
    """
    problems = await store.get_all_problems()
    filtered = filter_problems(problems, criteria)
    if sort is not None:
        filtered = sort_problems(filtered, sort.sort_by, sort.order)
    problem_logger.info(f"Filtered {len(problems)} problems down to {len(filtered)}")
    return filtered
