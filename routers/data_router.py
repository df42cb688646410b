import logging

from fastapi import APIRouter, Depends

from crud import data_crud
from schemas import SaveResult, Snapshot
from storage import CsvStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/data", tags=["data"])


@router.get("", response_model=Snapshot, summary="Read resources, date range and orders")
async def read_all(store: CsvStore = Depends(get_store)):
    return await data_crud.load_snapshot(store)


@router.post("", response_model=SaveResult, summary="Overwrite resources, date range and orders")
async def save_all(snapshot: Snapshot, store: CsvStore = Depends(get_store)):
    logger.debug("received data: %s", snapshot.model_dump(by_alias=True))
    await data_crud.save_snapshot(store, snapshot)
    return SaveResult()
