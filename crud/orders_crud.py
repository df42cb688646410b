import logging
import time
from typing import List, Optional

from chart import calendar_of, resolve_drop, shift_order, task_color
from crud.data_crud import load_snapshot, save_snapshot
from errors import ConflictError, ValidationFailed
from schemas import DropIn, OrderCreate, OrderRecord, OrderUpdate, Snapshot
from storage import CsvStore

logger = logging.getLogger(__name__)


def _find(snapshot: Snapshot, order_code: str) -> Optional[int]:
    for i, order in enumerate(snapshot.orders):
        if order.order_code == order_code:
            return i
    return None


def _check_resource(snapshot: Snapshot, resource: str) -> None:
    if resource not in snapshot.resources:
        raise ValidationFailed(f"unknown resource '{resource}'")


def new_order_code() -> str:
    # миллисекунды эпохи, как раньше делал браузер
    return str(int(time.time() * 1000))


async def list_orders(store: CsvStore) -> List[OrderRecord]:
    snapshot = await load_snapshot(store)
    return snapshot.orders


async def get_order(store: CsvStore, order_code: str) -> Optional[OrderRecord]:
    snapshot = await load_snapshot(store)
    idx = _find(snapshot, order_code)
    return None if idx is None else snapshot.orders[idx]


async def create_order(store: CsvStore, order_in: OrderCreate) -> OrderRecord:
    snapshot = await load_snapshot(store)
    _check_resource(snapshot, order_in.resource)

    code = order_in.order_code or new_order_code()
    if _find(snapshot, code) is not None:
        raise ConflictError(f"order '{code}' already exists")

    order = OrderRecord(
        order_code=code,
        display_info=order_in.display_info,
        resource=order_in.resource,
        starttime=order_in.starttime.isoformat(),
        endtime=order_in.endtime.isoformat(),
        color=task_color(order_in.display_info, order_in.resource, order_in.color),
    )
    snapshot.orders.append(order)
    await save_snapshot(store, snapshot)
    return order


async def update_order(store: CsvStore, order_code: str, order_in: OrderUpdate) -> Optional[OrderRecord]:
    snapshot = await load_snapshot(store)
    idx = _find(snapshot, order_code)
    if idx is None:
        return None
    _check_resource(snapshot, order_in.resource)

    existing = snapshot.orders[idx]
    # цвет сохраняется, если новый не передан; у заказа без цвета он выводится заново
    color = order_in.color or existing.color or task_color(order_in.display_info, order_in.resource)
    order = existing.model_copy(update={
        "display_info": order_in.display_info,
        "resource": order_in.resource,
        "starttime": order_in.starttime.isoformat(),
        "endtime": order_in.endtime.isoformat(),
        "color": color,
    })
    snapshot.orders[idx] = order
    await save_snapshot(store, snapshot)
    return order


async def delete_order(store: CsvStore, order_code: str) -> bool:
    snapshot = await load_snapshot(store)
    idx = _find(snapshot, order_code)
    if idx is None:
        return False
    del snapshot.orders[idx]
    await save_snapshot(store, snapshot)
    return True


async def move_order(store: CsvStore, order_code: str, drop: DropIn) -> Optional[OrderRecord]:
    """Перетаскивание бруска: пиксели -> (ресурс, дата начала), длительность сохраняется."""
    snapshot = await load_snapshot(store)
    idx = _find(snapshot, order_code)
    if idx is None:
        return None

    calendar = calendar_of(snapshot)
    target = resolve_drop(drop.x, drop.y, snapshot.resources, calendar)
    if target is None:
        raise ValidationFailed("drop target is outside the chart")
    row, col = target

    order = snapshot.orders[idx]
    resource = snapshot.resources[row]
    if resource == order.resource and calendar[col] == order.starttime:
        return order

    moved = shift_order(order, resource, col, calendar)
    snapshot.orders[idx] = moved
    await save_snapshot(store, snapshot)
    logger.info("order %s moved to %s at %s", order_code, moved.resource, moved.starttime)
    return moved
