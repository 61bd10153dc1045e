import uuid
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.config import logger
from src.data.repositories import (
    create_study_session_in_db,
    delete_study_session_from_db,
    get_session,
    list_study_sessions_from_db,
)
from src.data.schemas import StudySessionCreate, StudySessionResponse

session_logger = logger.getChild("study_session")
study_session_router = APIRouter(prefix="/sessions", tags=["sessions"])


@study_session_router.get(
    "/",
    response_model=List[StudySessionResponse],
    summary="List study sessions",
    description="Lists all study sessions, oldest first.",
)
async def list_study_sessions(db: AsyncSession = Depends(get_session)):
    session_logger.info("Listing study sessions")
    return await list_study_sessions_from_db(db)


@study_session_router.post(
    "/",
    response_model=StudySessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a study session",
)
async def create_study_session(
    session_data: StudySessionCreate,
    db: AsyncSession = Depends(get_session),
):
    """Record a study session with the problems solved and time spent."""
    session_logger.info(
        f"Recording study session on {session_data.date} ({session_data.time_spent} min)"
    )
    return await create_study_session_in_db(db, session_data)


@study_session_router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a study session",
)
async def delete_study_session(
    session_id: uuid.UUID,
    db: AsyncSession = Depends(get_session),
):
    session_logger.info(f"Deleting study session ID: {session_id}")
    await delete_study_session_from_db(db, session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
