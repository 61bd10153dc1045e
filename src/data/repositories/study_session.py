import uuid
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.config import logger
from src.data.schemas import StudySession, StudySessionCreate, StudySessionResponse
from src.errors import DatabaseException, ResourceNotFoundException
from src.utils.dates import utcnow

session_logger = logger.getChild("study_session_repository")


async def create_study_session_in_db(
    db: AsyncSession, study_session: StudySessionCreate
) -> StudySessionResponse:
    """Stores a new study session."""
    try:
        now = utcnow()
        new_session = StudySession(
            id=uuid.uuid4(),
            created_at=now,
            updated_at=now,
            **study_session.model_dump(),
        )
        db.add(new_session)
        await db.commit()
        await db.refresh(new_session)
        session_logger.info(
            f"Created study session {new_session.id} with "
            f"{len(new_session.problems_solved)} solved problems"
        )
        return StudySessionResponse.model_validate(new_session)
    except Exception as e:
        session_logger.error(f"Error in create_study_session_in_db: {str(e)}", exc_info=True)
        await db.rollback()
        raise DatabaseException(detail=f"Failed to create study session: {str(e)}")


async def list_study_sessions_from_db(db: AsyncSession) -> List[StudySessionResponse]:
    """Returns every study session, oldest first."""
    try:
        result = await db.exec(select(StudySession).order_by(StudySession.date))
        sessions = result.all()
        session_logger.info(f"Listed {len(sessions)} study sessions")
        return [StudySessionResponse.model_validate(s) for s in sessions]
    except Exception as e:
        session_logger.error(f"Failed to list study sessions: {str(e)}")
        raise DatabaseException(detail=f"Failed to list study sessions: {str(e)}")


async def delete_study_session_from_db(db: AsyncSession, session_id: uuid.UUID) -> None:
    try:
        study_session = await db.get(StudySession, session_id)
        if not study_session:
            raise ResourceNotFoundException(detail=f"Study session {session_id} not found")
        await db.delete(study_session)
        await db.commit()
        session_logger.info(f"Deleted study session with ID: {session_id}")
    except ResourceNotFoundException:
        raise
    except Exception as e:
        session_logger.error(f"Failed to delete study session {session_id}: {str(e)}")
        await db.rollback()
        raise DatabaseException(detail=f"Failed to delete study session: {str(e)}")
