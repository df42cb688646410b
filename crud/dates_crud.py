from typing import Optional, Tuple

from chart import calendar_of
from crud.data_crud import load_snapshot, save_snapshot
from schemas import DateRangeIn
from storage import CsvStore


async def get_date_range(store: CsvStore) -> Optional[Tuple[str, str, int]]:
    snapshot = await load_snapshot(store)
    calendar = calendar_of(snapshot)
    if not calendar:
        return None
    return calendar[0], calendar[-1], len(calendar)


async def set_date_range(store: CsvStore, range_in: DateRangeIn) -> Tuple[str, str, int]:
    snapshot = await load_snapshot(store)
    snapshot.dates = [range_in.start.isoformat(), range_in.end.isoformat()]
    await save_snapshot(store, snapshot)
    return snapshot.dates[0], snapshot.dates[1], (range_in.end - range_in.start).days + 1
