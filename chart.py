import math
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from schemas import BarModel, ChartModel, OrderRecord, Snapshot, StatsModel

# Геометрия сетки (px)
CELL_WIDTH = 80
ROW_HEIGHT = 50
HEADER_HEIGHT = 50
BAR_MARGIN = 2
BAR_HEIGHT = ROW_HEIGHT - 2 * BAR_MARGIN

PALETTE = [
    "rgb(59, 130, 246)",   # синий
    "rgb(16, 185, 129)",   # зелёный
    "rgb(139, 92, 246)",   # фиолетовый
    "rgb(245, 158, 11)",   # оранжевый
    "rgb(239, 68, 68)",    # красный
    "rgb(6, 182, 212)",    # бирюзовый
    "rgb(132, 204, 22)",   # салатовый
    "rgb(236, 72, 153)",   # розовый
    "rgb(168, 85, 247)",   # лиловый
    "rgb(249, 115, 22)",   # рыжий
    "rgb(34, 197, 94)",    # изумрудный
    "rgb(14, 165, 233)",   # голубой
]


def parse_day(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def generate_date_range(start: str, end: str) -> List[str]:
    """Все дни от start до end включительно в ISO-формате; пусто, если даты некорректны или start > end."""
    first, last = parse_day(start), parse_day(end)
    if first is None or last is None:
        return []
    days = (last - first).days
    return [(first + timedelta(days=i)).isoformat() for i in range(days + 1)]


def calendar_of(snapshot: Snapshot) -> List[str]:
    if len(snapshot.dates) < 2:
        return []
    return generate_date_range(snapshot.dates[0], snapshot.dates[1])


def _string_hash(text: str, h: int = 0) -> int:
    # h = h * 31 + unit по UTF-16 единицам, с переполнением до знакового int32
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def task_color(label: str, resource: str = "", color: Optional[str] = None) -> str:
    """Цвет заказа: заданный явно, иначе детерминированно из палитры по хешу label+resource."""
    if color:
        return color
    h = _string_hash(resource, _string_hash(label))
    return PALETTE[abs(h) % len(PALETTE)]


def layout_bar(order: OrderRecord, resources: List[str], calendar: List[str]) -> Optional[BarModel]:
    """
        Прямое линейное отображение (индекс ресурса, индекс даты) -> пиксели.
        None, если ресурс не найден (заказ-сирота) или даты вне календаря.
    """
    if order.resource not in resources:
        return None
    index: Dict[str, int] = {d: i for i, d in enumerate(calendar)}
    start_idx = index.get(order.starttime)
    end_idx = index.get(order.endtime)
    if start_idx is None or end_idx is None:
        return None

    row_idx = resources.index(order.resource)
    duration = end_idx - start_idx + 1
    return BarModel(
        order_code=order.order_code,
        left=start_idx * CELL_WIDTH + BAR_MARGIN,
        width=max(duration * CELL_WIDTH, CELL_WIDTH) - 2 * BAR_MARGIN,
        top=row_idx * ROW_HEIGHT + HEADER_HEIGHT + BAR_MARGIN,
        height=BAR_HEIGHT,
        color=task_color(order.display_info, order.resource, order.color),
        label=order.display_info,
        resource_tag=order.resource.split("-")[0],
        title=f"{order.display_info} ({order.starttime} - {order.endtime})",
    )


def stats(snapshot: Snapshot) -> StatsModel:
    calendar = calendar_of(snapshot)
    return StatsModel(
        resources=len(snapshot.resources),
        orders=len(snapshot.orders),
        days=len(calendar),
        start=calendar[0] if calendar else None,
        end=calendar[-1] if calendar else None,
    )


def build_layout(snapshot: Snapshot) -> ChartModel:
    calendar = calendar_of(snapshot)
    bars, hidden = [], []
    for order in snapshot.orders:
        bar = layout_bar(order, snapshot.resources, calendar)
        if bar is None:
            hidden.append(order.order_code)
        else:
            bars.append(bar)
    return ChartModel(
        calendar=calendar,
        rows=list(snapshot.resources),
        bars=bars,
        hidden=hidden,
        stats=stats(snapshot),
    )


def resolve_drop(x: float, y: float, resources: List[str], calendar: List[str]) -> Optional[Tuple[int, int]]:
    """Обратное отображение: координаты бруска -> (строка ресурса, колонка даты) или None вне сетки."""
    col = math.floor(x / CELL_WIDTH)
    row = math.floor((y - HEADER_HEIGHT) / ROW_HEIGHT)
    if 0 <= row < len(resources) and 0 <= col < len(calendar):
        return row, col
    return None


def shift_order(order: OrderRecord, resource: str, col: int, calendar: List[str]) -> OrderRecord:
    """Переносит заказ на новый ресурс/дату начала, сохраняя длительность; конец прижимается к последнему дню."""
    first, last = parse_day(order.starttime), parse_day(order.endtime)
    span = (last - first).days if first is not None and last is not None and last >= first else 0
    end_col = min(col + span, len(calendar) - 1)
    return order.model_copy(update={
        "resource": resource,
        "starttime": calendar[col],
        "endtime": calendar[end_col],
    })
