import csv
import io
import logging
import os
from typing import List

import config
from errors import StorageError
from schemas import OrderRecord, Snapshot

logger = logging.getLogger(__name__)

RESOURCES_FILE = "resource.csv"
DATES_FILE = "dates.csv"
ORDERS_FILE = "orders.csv"

RESOURCES_HEADER = ["resource"]
DATES_HEADER = ["start_date", "end_date"]
ORDERS_HEADER = ["OrderCode", "starttime", "endtime", "display_info", "resource", "color"]


# --- Разбор / сборка CSV ---
def parse_rows(text: str) -> List[List[str]]:
    """
        Разбирает CSV-текст в список строк:
        - "" внутри кавычек — это одна кавычка, запятая внутри кавычек не разделяет поля
        - каждое значение обрезается по пробелам
        - пустые строки пропускаются
    """
    rows = []
    for row in csv.reader(io.StringIO(text)):
        values = [v.strip() for v in row]
        if not any(values):
            continue
        rows.append(values)
    return rows


def parse_lines(text: str) -> List[str]:
    """
        Одна колонка — одно значение на строку.
        Старые файлы писались без кавычек ("Smith, John" как есть), поэтому строка
        разбирается как CSV-поле, только если целиком взята в кавычки.
    """
    values = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if len(line) >= 2 and line.startswith('"') and line.endswith('"'):
            line = next(csv.reader([line]))[0].strip()
        values.append(line)
    return values


def format_rows(header: List[str], rows: List[List[str]]) -> str:
    # минимальное экранирование: кавычки только там, где есть запятая, кавычка или перевод строки
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buf.getvalue()


def rows_to_orders(rows: List[List[str]]) -> List[OrderRecord]:
    # первая строка — заголовок; значения сопоставляются по имени колонки
    if not rows:
        return []
    header = rows[0]
    orders = []
    for values in rows[1:]:
        record = {name: (values[i] if i < len(values) else "") for i, name in enumerate(header)}
        orders.append(OrderRecord.model_validate({k: record.get(k, "") for k in ORDERS_HEADER}))
    return orders


def orders_to_rows(orders: List[OrderRecord]) -> List[List[str]]:
    return [
        [o.order_code, o.starttime, o.endtime, o.display_info, o.resource, o.color]
        for o in orders
    ]


# --- Хранилище ---
class CsvStore:
    """Три плоские таблицы в каталоге data_dir; каждое сохранение перезаписывает файлы целиком."""

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def _path(self, name: str) -> str:
        return os.path.join(self.data_dir, name)

    def _read(self, name: str, parse=parse_rows) -> list:
        path = self._path(name)
        if not os.path.exists(path):
            return []
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return parse(f.read())
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.exception("failed to read %s", path)
            raise StorageError(f"failed to read {name}: {e}") from e

    def _write(self, name: str, text: str) -> None:
        path = self._path(name)
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            logger.exception("failed to write %s", path)
            raise StorageError(f"failed to write {name}: {e}") from e

    def init(self) -> None:
        try:
            os.makedirs(self.data_dir, exist_ok=True)
        except OSError as e:
            raise StorageError(f"cannot create data directory {self.data_dir}: {e}") from e

    def load(self) -> Snapshot:
        resources = self._read(RESOURCES_FILE, parse_lines)[1:]

        dates = []
        date_rows = self._read(DATES_FILE)
        if len(date_rows) > 1 and len(date_rows[1]) >= 2:
            dates = [date_rows[1][0], date_rows[1][1]]  # [start_date, end_date]

        orders = rows_to_orders(self._read(ORDERS_FILE))
        return Snapshot(resources=resources, dates=dates, orders=orders)

    def save(self, snapshot: Snapshot) -> None:
        self.init()
        self._write(RESOURCES_FILE, format_rows(RESOURCES_HEADER, [[r] for r in snapshot.resources]))

        date_rows = []
        if len(snapshot.dates) >= 2:
            date_rows.append([snapshot.dates[0], snapshot.dates[1]])
        self._write(DATES_FILE, format_rows(DATES_HEADER, date_rows))

        self._write(ORDERS_FILE, format_rows(ORDERS_HEADER, orders_to_rows(snapshot.orders)))
        logger.info("saved %d resources, %d orders to %s",
                    len(snapshot.resources), len(snapshot.orders), self.data_dir)


_store = CsvStore(config.DATA_DIR)


def init_store() -> None:
    _store.init()


def get_store() -> CsvStore:
    # зависимость FastAPI; в тестах подменяется через app.dependency_overrides
    return _store
