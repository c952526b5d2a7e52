from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.errors import NotFound
from storefront.domain.permissions import Permission, has_permission, require_viewer
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def me(self, viewer: UserModel | None) -> UserModel | None:
        return viewer

    def list_users(self, viewer: UserModel | None) -> list[UserModel]:
        viewer = require_viewer(viewer)
        has_permission(viewer, [Permission.ADMIN])
        return self.repo.list_users()

    def update_permissions(self, viewer: UserModel | None, user_id: int, permissions: list) -> UserModel:
        viewer = require_viewer(viewer)
        has_permission(viewer, [Permission.ADMIN, Permission.PERMISSIONUPDATE])

        user = self.repo.get_user(user_id)
        if not user:
            raise NotFound(f"No user found for ID {user_id}")

        # lista bez duplikatow, kolejnosc zachowana
        tags = [p.value if isinstance(p, Permission) else str(p) for p in permissions]
        user.permissions = list(dict.fromkeys(tags))
        user = self.repo.save(user)
        logger.info(f"Uzytkownik {viewer.id} zmienil uprawnienia uzytkownika {user.id}: {user.permissions}")
        return user
