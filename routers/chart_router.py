from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from chart import build_layout, stats
from crud import data_crud
from render import render_page
from schemas import ChartModel, StatsModel
from storage import CsvStore, get_store


router = APIRouter(tags=["chart"])


@router.get("/", response_class=HTMLResponse, summary="Gantt chart page")
async def page(store: CsvStore = Depends(get_store)):
    snapshot = await data_crud.load_snapshot(store)
    return HTMLResponse(render_page(build_layout(snapshot)))


@router.get("/api/chart", response_model=ChartModel, summary="Chart layout: calendar, rows and bar geometry")
async def layout(store: CsvStore = Depends(get_store)):
    snapshot = await data_crud.load_snapshot(store)
    return build_layout(snapshot)


@router.get("/api/stats", response_model=StatsModel, summary="Resource, order and day counts")
async def summary(store: CsvStore = Depends(get_store)):
    snapshot = await data_crud.load_snapshot(store)
    return stats(snapshot)
