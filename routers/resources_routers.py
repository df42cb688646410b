from typing import List

from fastapi import APIRouter, Depends, HTTPException

from crud import resources_crud
from schemas import OrderRecord, ResourceIn
from storage import CsvStore, get_store


router = APIRouter(prefix="/api/resources", tags=["resources"])


@router.get("", response_model=List[str], summary="List resources in display order")
async def list_all(store: CsvStore = Depends(get_store)):
    return await resources_crud.list_resources(store)


@router.post("", response_model=List[str], status_code=201, summary="Add a resource")
async def create(resource_in: ResourceIn, store: CsvStore = Depends(get_store)):
    return await resources_crud.add_resource(store, resource_in.name)


@router.put("/{name:path}", response_model=List[str], summary="Rename a resource")
async def rename(name: str, resource_in: ResourceIn, store: CsvStore = Depends(get_store)):
    resources = await resources_crud.rename_resource(store, name, resource_in.name)
    if resources is None:
        raise HTTPException(status_code=404, detail="resource not found")
    return resources


@router.delete("/{name:path}", status_code=204, summary="Delete a resource")
async def remove(name: str, store: CsvStore = Depends(get_store)):
    ok = await resources_crud.delete_resource(store, name)
    if not ok:
        raise HTTPException(status_code=404, detail="resource not found")


@router.get("/{name:path}/orders", response_model=List[OrderRecord], summary="Orders assigned to a resource")
async def assigned_orders(name: str, store: CsvStore = Depends(get_store)):
    orders = await resources_crud.orders_for_resource(store, name)
    if orders is None:
        raise HTTPException(status_code=404, detail="resource not found")
    return orders
