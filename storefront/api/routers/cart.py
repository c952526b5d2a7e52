# storefront/api/routers/cart.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_lock_service, get_viewer
from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.domain.schemas import CartItemIn, CartItemOut
from storefront.services.cart_service import CartService
from storefront.services.lock_service import LockService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session, lock_service: LockService):
    return CartService(db=db, lock_service=lock_service)


@router.get("/", response_model=List[CartItemOut])
def get_cart(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
    viewer: UserModel | None = Depends(get_viewer),
):
    return get_service(db, lock_service).get_cart(viewer)


@router.post("/items", response_model=CartItemOut)
def add_to_cart(
    payload: CartItemIn,
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
    viewer: UserModel | None = Depends(get_viewer),
):
    return get_service(db, lock_service).add_to_cart(viewer, payload.item_id)


@router.delete("/items/{cart_item_id}", response_model=CartItemOut)
def remove_from_cart(
    cart_item_id: int,
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
    viewer: UserModel | None = Depends(get_viewer),
):
    return get_service(db, lock_service).remove_from_cart(viewer, cart_item_id)
