from typing import List

from fastapi import APIRouter, Depends, HTTPException

from crud import orders_crud
from schemas import DropIn, OrderCreate, OrderRecord, OrderUpdate
from storage import CsvStore, get_store


router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderRecord, status_code=201, summary="Create a new order")
async def create(order_in: OrderCreate, store: CsvStore = Depends(get_store)):
    return await orders_crud.create_order(store, order_in)


@router.get("", response_model=List[OrderRecord], summary="List all orders")
async def list_all(store: CsvStore = Depends(get_store)):
    return await orders_crud.list_orders(store)


@router.get("/{order_code:path}", response_model=OrderRecord, summary="Get an order by OrderCode")
async def get_one(order_code: str, store: CsvStore = Depends(get_store)):
    order = await orders_crud.get_order(store, order_code)
    if not order:
        raise HTTPException(status_code=404, detail="order not found")
    return order


@router.put("/{order_code:path}", response_model=OrderRecord, summary="Update an existing order")
async def update(order_code: str, order_in: OrderUpdate, store: CsvStore = Depends(get_store)):
    order = await orders_crud.update_order(store, order_code, order_in)
    if not order:
        raise HTTPException(status_code=404, detail="order not found")
    return order


@router.delete("/{order_code:path}", status_code=204, summary="Delete an order")
async def remove(order_code: str, store: CsvStore = Depends(get_store)):
    ok = await orders_crud.delete_order(store, order_code)
    if not ok:
        raise HTTPException(status_code=404, detail="order not found")


@router.post("/{order_code:path}/move", response_model=OrderRecord, summary="Move an order to the dropped cell")
async def move(order_code: str, drop: DropIn, store: CsvStore = Depends(get_store)):
    order = await orders_crud.move_order(store, order_code, drop)
    if not order:
        raise HTTPException(status_code=404, detail="order not found")
    return order
