from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.business.services.transfer import export_data_service, import_data_service
from src.config import logger
from src.data.repositories import RecordStore, get_record_store, get_session
from src.data.schemas import ExportBundle, ImportResult

transfer_logger = logger.getChild("transfer")
transfer_router = APIRouter(tags=["transfer"])


@transfer_router.get(
    "/export",
    response_model=ExportBundle,
    summary="Export all records",
)
async def export_data(store: RecordStore = Depends(get_record_store)):
    """Export every problem and study session as a single JSON document."""
    transfer_logger.info("Export request")
    return await export_data_service(store)


@transfer_router.post(
    "/import",
    response_model=ImportResult,
    summary="Import records",
    description="Replaces all problems (and sessions, when present) with an exported document. "
    "Nothing is imported if any record is invalid.",
)
async def import_data(
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_session),
):
    transfer_logger.info("Import request")
    return await import_data_service(db, payload)
