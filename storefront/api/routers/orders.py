# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_notification_service, get_payment_client, get_viewer
from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.domain.schemas import OrderCreate, OrderOut
from storefront.services.notification_service import NotificationService
from storefront.services.order_service import OrderService
from storefront.services.payment_client import PaymentClient

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(
    db: Session = Depends(get_db),
    payment_client: PaymentClient = Depends(get_payment_client),
    notification_service: NotificationService = Depends(get_notification_service),
):
    return OrderService(db, payment_client, notification_service)


@router.post("/", response_model=OrderOut, status_code=201)
def create_order(
    payload: OrderCreate,
    svc: OrderService = Depends(get_service),
    viewer: UserModel | None = Depends(get_viewer),
):
    """
    Obciaza karte suma koszyka i zamienia koszyk na zamowienie.
    Potwierdzenie mailem idzie asynchronicznie.
    """
    return svc.create_order(viewer, payload.token)


@router.get("/", response_model=List[OrderOut])
def list_orders(
    svc: OrderService = Depends(get_service),
    viewer: UserModel | None = Depends(get_viewer),
):
    return svc.list_orders(viewer)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    svc: OrderService = Depends(get_service),
    viewer: UserModel | None = Depends(get_viewer),
):
    """
    Zamowienie widzi wlasciciel albo ADMIN.
    """
    return svc.get_order(viewer, order_id)
