from fastapi import APIRouter, Depends, HTTPException

from crud import dates_crud
from schemas import DateRangeIn, DateRangeModel
from storage import CsvStore, get_store


router = APIRouter(prefix="/api/dates", tags=["dates"])


@router.get("", response_model=DateRangeModel, summary="Get the project period")
async def get_range(store: CsvStore = Depends(get_store)):
    found = await dates_crud.get_date_range(store)
    if found is None:
        raise HTTPException(status_code=404, detail="date range not set")
    start, end, days = found
    return DateRangeModel(start=start, end=end, days=days)


@router.put("", response_model=DateRangeModel, summary="Set the project period")
async def set_range(range_in: DateRangeIn, store: CsvStore = Depends(get_store)):
    start, end, days = await dates_crud.set_date_range(store, range_in)
    return DateRangeModel(start=start, end=end, days=days)
