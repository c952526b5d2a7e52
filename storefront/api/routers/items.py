# storefront/api/routers/items.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_viewer
from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.domain.schemas import ItemCreate, ItemOut, ItemsConnection, ItemUpdate
from storefront.services.item_service import ItemService

router = APIRouter(prefix="/items", tags=["items"])


@router.get("/", response_model=List[ItemOut])
def list_items(
    skip: int = Query(0, ge=0),
    first: int | None = Query(None, gt=0),
    db: Session = Depends(get_db),
):
    return ItemService(db).list_items(skip=skip, first=first)


@router.get("/count", response_model=ItemsConnection)
def items_connection(db: Session = Depends(get_db)):
    return ItemService(db).count_items()


@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: int, db: Session = Depends(get_db)):
    return ItemService(db).get_item(item_id)


@router.post("/", response_model=ItemOut, status_code=201)
def create_item(
    payload: ItemCreate,
    db: Session = Depends(get_db),
    viewer: UserModel | None = Depends(get_viewer),
):
    return ItemService(db).create_item(viewer, payload.model_dump())


@router.patch("/{item_id}", response_model=ItemOut)
def update_item(
    item_id: int,
    payload: ItemUpdate,
    db: Session = Depends(get_db),
    viewer: UserModel | None = Depends(get_viewer),
):
    return ItemService(db).update_item(viewer, item_id, payload.model_dump(exclude_unset=True))


@router.delete("/{item_id}", response_model=ItemOut)
def delete_item(
    item_id: int,
    db: Session = Depends(get_db),
    viewer: UserModel | None = Depends(get_viewer),
):
    return ItemService(db).delete_item(viewer, item_id)
