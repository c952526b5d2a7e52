from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_viewer
from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.domain.schemas import MeOut, UpdatePermissionsIn, UserRead
from storefront.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=Optional[MeOut])
def me(db: Session = Depends(get_db), viewer: UserModel | None = Depends(get_viewer)):
    return UserService(db).me(viewer)


@router.get("/", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db), viewer: UserModel | None = Depends(get_viewer)):
    return UserService(db).list_users(viewer)


@router.put("/{user_id}/permissions", response_model=UserRead)
def update_permissions(
    user_id: int,
    payload: UpdatePermissionsIn,
    db: Session = Depends(get_db),
    viewer: UserModel | None = Depends(get_viewer),
):
    return UserService(db).update_permissions(viewer, user_id, payload.permissions)
