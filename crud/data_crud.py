import asyncio

from schemas import Snapshot
from storage import CsvStore

# один замок на процесс: чтение и запись трёх файлов не перемешиваются между запросами
_files_lock = asyncio.Lock()


async def load_snapshot(store: CsvStore) -> Snapshot:
    # файловый ввод-вывод блокирующий — выносим в поток, чтобы не держать event loop
    async with _files_lock:
        return await asyncio.to_thread(store.load)


async def save_snapshot(store: CsvStore, snapshot: Snapshot) -> Snapshot:
    # полная перезапись всех трёх файлов, побеждает последний записавший
    async with _files_lock:
        await asyncio.to_thread(store.save, snapshot)
    return snapshot
