from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.config import logger
from src.data.schemas import (
    Problem,
    ProblemResponse,
    Solution,
    StudySession,
    StudySessionResponse,
)
from src.errors import DatabaseException

transfer_logger = logger.getChild("transfer_repository")


def _problem_from_record(record: ProblemResponse) -> Problem:
    data = record.model_dump(exclude={"solutions"})
    problem = Problem(**data)
    problem.solutions = [
        Solution(**solution.model_dump(exclude={"problem_id"}), problem_id=record.id)
        for solution in record.solutions
    ]
    return problem


async def replace_all_records(
    db: AsyncSession,
    problems: List[ProblemResponse],
    sessions: Optional[List[StudySessionResponse]] = None,
) -> None:
    """
    Replaces the stored problem set, and the session set when given, in one
    transaction.
    """
    try:
        existing_problems = (await db.exec(select(Problem))).all()
        for problem in existing_problems:
            await db.delete(problem)
        if sessions is not None:
            existing_sessions = (await db.exec(select(StudySession))).all()
            for study_session in existing_sessions:
                await db.delete(study_session)
        # Imported ids may collide with the ones being removed
        await db.flush()

        db.add_all([_problem_from_record(record) for record in problems])
        if sessions is not None:
            db.add_all(
                [StudySession(**record.model_dump()) for record in sessions]
            )
        await db.commit()
        transfer_logger.info(
            f"Replaced {len(existing_problems)} problems with {len(problems)} imported problems"
        )
    except Exception as e:
        transfer_logger.error(f"Failed to replace records: {str(e)}", exc_info=True)
        await db.rollback()
        raise DatabaseException(detail=f"Failed to import records: {str(e)}")
