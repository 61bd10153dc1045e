from fastapi import APIRouter, Depends

from src.business.services.stats import get_progress_stats_service
from src.config import logger
from src.data.repositories import RecordStore, get_record_store
from src.data.schemas import ProgressStats

stats_logger = logger.getChild("stats")
stats_router = APIRouter(prefix="/stats", tags=["stats"])


@stats_router.get(
    "/",
    response_model=ProgressStats,
    summary="Progress statistics",
    description="Counts, streaks, weekly activity and per-category progress, recomputed on every call.",
)
async def get_progress_stats(store: RecordStore = Depends(get_record_store)):
    stats_logger.info("Progress stats request")
    return await get_progress_stats_service(store)
