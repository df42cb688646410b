import logging
from typing import List, Optional

from crud.data_crud import load_snapshot, save_snapshot
from errors import ConflictError
from schemas import OrderRecord
from storage import CsvStore

logger = logging.getLogger(__name__)


async def list_resources(store: CsvStore) -> List[str]:
    snapshot = await load_snapshot(store)
    return snapshot.resources


async def add_resource(store: CsvStore, name: str) -> List[str]:
    snapshot = await load_snapshot(store)
    if name in snapshot.resources:
        raise ConflictError(f"resource '{name}' already exists")
    snapshot.resources.append(name)
    await save_snapshot(store, snapshot)
    return snapshot.resources


async def rename_resource(store: CsvStore, old_name: str, new_name: str) -> Optional[List[str]]:
    """
        Переименование на месте (позиция строки сохраняется).
        Заказы, ссылавшиеся на старое имя, переводятся на новое.
    """
    snapshot = await load_snapshot(store)
    if old_name not in snapshot.resources:
        return None
    if new_name == old_name:
        return snapshot.resources
    if new_name in snapshot.resources:
        raise ConflictError(f"resource '{new_name}' already exists")

    snapshot.resources[snapshot.resources.index(old_name)] = new_name
    for order in snapshot.orders:
        if order.resource == old_name:
            order.resource = new_name
    await save_snapshot(store, snapshot)
    return snapshot.resources


async def delete_resource(store: CsvStore, name: str) -> bool:
    snapshot = await load_snapshot(store)
    if name not in snapshot.resources:
        return False
    snapshot.resources.remove(name)
    # заказы не удаляются каскадно — остаются без ресурса
    orphaned = sum(1 for o in snapshot.orders if o.resource == name)
    if orphaned:
        logger.warning("resource '%s' deleted, %d orders left without a resource", name, orphaned)
    await save_snapshot(store, snapshot)
    return True


async def orders_for_resource(store: CsvStore, name: str) -> Optional[List[OrderRecord]]:
    snapshot = await load_snapshot(store)
    if name not in snapshot.resources:
        return None
    return [o for o in snapshot.orders if o.resource == name]
