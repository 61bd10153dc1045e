import uuid
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.business.services.problem import list_problems_service
from src.config import logger
from src.data.repositories import (
    RecordStore,
    add_solution_to_problem,
    create_problem_in_db,
    delete_problem_from_db,
    get_problem_by_id,
    get_record_store,
    get_session,
    update_problem_in_db,
)
from src.data.schemas import (
    DateRange,
    Difficulty,
    FilterCriteria,
    ProblemCreate,
    ProblemResponse,
    ProblemUpdate,
    SolutionCreate,
    SolutionResponse,
    SortField,
    SortOrder,
    SortParams,
)

problem_logger = logger.getChild("problem")
problem_router = APIRouter(prefix="/problems", tags=["problems"])


def get_filter_criteria(
    difficulty: Optional[List[Difficulty]] = Query(None),
    categories: Optional[List[str]] = Query(None),
    tags: Optional[List[str]] = Query(None),
    solved: Optional[bool] = None,
    search: Optional[str] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> FilterCriteria:
    date_range = None
    if start is not None or end is not None:
        date_range = DateRange(start=start, end=end)
    return FilterCriteria(
        difficulty=difficulty,
        categories=categories,
        tags=tags,
        solved=solved,
        search=search,
        date_range=date_range,
    )


@problem_router.get(
    "/",
    response_model=List[ProblemResponse],
    summary="List problems",
    description="Lists problems matching the given filters, optionally sorted.",
)
async def list_problems(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    sort_by: Optional[SortField] = None,
    order: SortOrder = SortOrder.DESC,
    store: RecordStore = Depends(get_record_store),
):
    """List problems, filtered by difficulty, labels, solved flag, text and date."""
    sort = SortParams(sort_by=sort_by, order=order) if sort_by is not None else None
    problem_logger.info(f"Listing problems with filters: {criteria.model_dump(exclude_none=True)}")
    return await list_problems_service(store, criteria, sort)


@problem_router.post(
    "/",
    response_model=ProblemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a problem",
    description="Creates a new unsolved problem with no solutions.",
)
async def create_problem(
    problem_data: ProblemCreate,
    db: AsyncSession = Depends(get_session),
):
    """Create a new problem."""
    problem_logger.info(f"Creating problem: {problem_data.title}")
    return await create_problem_in_db(db, problem_data)


@problem_router.get(
    "/{problem_id}",
    response_model=ProblemResponse,
    summary="Get a problem",
    description="Retrieves a problem and its solutions by ID.",
)
async def get_problem(
    problem_id: uuid.UUID,
    db: AsyncSession = Depends(get_session),
):
    """Retrieve a problem by its unique ID."""
    problem_logger.info(f"Fetching problem ID: {problem_id}")
    return await get_problem_by_id(db, problem_id)


@problem_router.put(
    "/{problem_id}",
    response_model=ProblemResponse,
    summary="Update a problem",
    description="Updates the given fields of a problem.",
)
async def update_problem(
    problem_id: uuid.UUID,
    problem_update: ProblemUpdate,
    db: AsyncSession = Depends(get_session),
):
    """Update an existing problem with the fields that were sent."""
    update_data = problem_update.changes()
    problem_logger.info(f"Updating problem ID: {problem_id}")
    return await update_problem_in_db(db, problem_id, update_data)


@problem_router.delete(
    "/{problem_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a problem",
    description="Deletes a problem and all of its solutions.",
)
async def delete_problem(
    problem_id: uuid.UUID,
    db: AsyncSession = Depends(get_session),
):
    """Delete a problem and its solutions."""
    problem_logger.info(f"Deleting problem ID: {problem_id}")
    await delete_problem_from_db(db, problem_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@problem_router.post(
    "/{problem_id}/solutions",
    response_model=SolutionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a solution",
    description="Records a solution, marking the problem solved and counting the attempt.",
)
async def add_solution(
    problem_id: uuid.UUID,
    solution_data: SolutionCreate,
    db: AsyncSession = Depends(get_session),
):
    """Record a solution for a problem."""
    problem_logger.info(f"Adding {solution_data.language} solution to problem ID: {problem_id}")
    return await add_solution_to_problem(db, problem_id, solution_data)
