import uuid
from typing import Any, Dict, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.config import logger
from src.data.schemas import (
    Problem,
    ProblemCreate,
    ProblemResponse,
    Solution,
    SolutionCreate,
    SolutionResponse,
)
from src.errors import DatabaseException, ResourceNotFoundException
from src.utils.dates import utcnow

problem_logger = logger.getChild("problem_repository")


async def _load_problem(db: AsyncSession, problem_id: uuid.UUID) -> Problem:
    result = await db.exec(
        select(Problem)
        .where(Problem.id == problem_id)
        .execution_options(populate_existing=True)
    )
    problem = result.one_or_none()
    if not problem:
        raise ResourceNotFoundException(detail=f"Problem {problem_id} not found")
    return problem


async def create_problem_in_db(db: AsyncSession, problem: ProblemCreate) -> ProblemResponse:
    """Stores a new problem with no solutions and zero attempts."""
    try:
        now = utcnow()
        new_problem = Problem(
            id=uuid.uuid4(),
            created_at=now,
            updated_at=now,
            attempts=0,
            solved=False,
            **problem.model_dump(),
        )
        db.add(new_problem)
        await db.commit()
        new_problem = await _load_problem(db, new_problem.id)
        problem_logger.info(f"Created problem with ID: {new_problem.id}")
        return ProblemResponse.model_validate(new_problem)
    except Exception as e:
        problem_logger.error(f"Error in create_problem_in_db: {str(e)}", exc_info=True)
        await db.rollback()
        raise DatabaseException(detail=f"Failed to create problem: {str(e)}")


async def get_problem_by_id(db: AsyncSession, problem_id: uuid.UUID) -> ProblemResponse:
    """Returns a problem with its solutions."""
    try:
        problem = await _load_problem(db, problem_id)
        problem_logger.info(f"Fetched problem with ID: {problem_id}")
        return ProblemResponse.model_validate(problem)
    except ResourceNotFoundException:
        raise
    except Exception as e:
        problem_logger.error(f"Failed to fetch problem {problem_id}: {str(e)}")
        raise DatabaseException(detail=f"Failed to fetch problem: {str(e)}")


async def update_problem_in_db(
    db: AsyncSession, problem_id: uuid.UUID, update_data: Dict[str, Any]
) -> ProblemResponse:
    """Applies a partial update and refreshes ``updated_at``."""
    try:
        problem = await _load_problem(db, problem_id)
        for key, value in update_data.items():
            setattr(problem, key, value)
        problem.updated_at = utcnow()
        await db.commit()

        problem = await _load_problem(db, problem_id)
        problem_logger.info(
            f"Updated problem with ID: {problem_id}, fields: {sorted(update_data)}"
        )
        return ProblemResponse.model_validate(problem)
    except ResourceNotFoundException:
        raise
    except Exception as e:
        problem_logger.error(f"Failed to update problem {problem_id}: {str(e)}")
        await db.rollback()
        raise DatabaseException(detail=f"Failed to update problem: {str(e)}")


async def delete_problem_from_db(db: AsyncSession, problem_id: uuid.UUID) -> None:
    """Deletes a problem together with its solutions."""
    try:
        problem = await _load_problem(db, problem_id)
        solution_count = len(problem.solutions)
        await db.delete(problem)
        await db.commit()
        problem_logger.info(
            f"Deleted problem with ID: {problem_id} and {solution_count} solutions"
        )
    except ResourceNotFoundException:
        raise
    except Exception as e:
        problem_logger.error(f"Failed to delete problem {problem_id}: {str(e)}")
        await db.rollback()
        raise DatabaseException(detail=f"Failed to delete problem: {str(e)}")


async def list_problems_from_db(db: AsyncSession) -> List[ProblemResponse]:
    """Returns every problem in creation order."""
    try:
        result = await db.exec(
            select(Problem)
            .order_by(Problem.created_at)
            .execution_options(populate_existing=True)
        )
        problems = result.all()
        problem_logger.info(f"Listed {len(problems)} problems")
        return [ProblemResponse.model_validate(problem) for problem in problems]
    except Exception as e:
        problem_logger.error(f"Failed to list problems: {str(e)}")
        raise DatabaseException(detail=f"Failed to list problems: {str(e)}")


async def add_solution_to_problem(
    db: AsyncSession, problem_id: uuid.UUID, solution: SolutionCreate
) -> SolutionResponse:
    """
    Records a solution for a problem.

    The problem becomes solved, its attempt count goes up by one and
    ``first_solved_at`` is set only if it has never been set before.
    """
    try:
        problem = await _load_problem(db, problem_id)
        now = utcnow()
        new_solution = Solution(
            id=uuid.uuid4(),
            problem_id=problem.id,
            created_at=now,
            **solution.model_dump(),
        )
        problem.solutions.append(new_solution)
        problem.solved = True
        problem.attempts += 1
        if problem.first_solved_at is None:
            problem.first_solved_at = now
        problem.last_solved_at = now
        problem.updated_at = now
        await db.commit()

        problem_logger.info(
            f"Added solution {new_solution.id} to problem {problem_id} "
            f"(attempts: {problem.attempts})"
        )
        return SolutionResponse.model_validate(new_solution)
    except ResourceNotFoundException:
        raise
    except Exception as e:
        problem_logger.error(f"Failed to add solution to problem {problem_id}: {str(e)}")
        await db.rollback()
        raise DatabaseException(detail=f"Failed to add solution: {str(e)}")
