import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

import config
from errors import GanttError, StorageError
from routers import chart_router, data_router, dates_router, orders_routers, resources_routers
from storage import init_store

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Инициализация каталога с данными ---
    init_store()
    logger.info("gantt server data dir: %s", config.DATA_DIR)
    yield

# --- Создание приложения ---
app = FastAPI(
    title="Gantt board",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    return JSONResponse(status_code=exc.status_code, content={"error": "storage failure", "message": exc.detail})


@app.exception_handler(GanttError)
async def gantt_error_handler(request: Request, exc: GanttError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


app.include_router(data_router.router)
app.include_router(resources_routers.router)
app.include_router(dates_router.router)
app.include_router(orders_routers.router)
app.include_router(chart_router.router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


if __name__ == "__main__":
    uvicorn.run("main:app", host=config.UVICORN_HOST, port=config.UVICORN_PORT)
