from typing import List

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.data.repositories.database import get_session
from src.data.repositories.problem import list_problems_from_db
from src.data.repositories.study_session import list_study_sessions_from_db
from src.data.schemas import ProblemResponse, StudySessionResponse


class RecordStore:
    """Read access to the full problem and study session collections."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_problems(self) -> List[ProblemResponse]:
        return await list_problems_from_db(self.db)

    async def get_all_study_sessions(self) -> List[StudySessionResponse]:
        return await list_study_sessions_from_db(self.db)


async def get_record_store(db: AsyncSession = Depends(get_session)) -> RecordStore:
    return RecordStore(db)
