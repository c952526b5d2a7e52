"""Tests for me, users and updatePermissions."""

import pytest

from storefront.domain.errors import AuthenticationRequired, AuthorizationDenied, NotFound
from storefront.domain.permissions import Permission
from storefront.services.user_service import UserService


@pytest.fixture
def service(db):
    return UserService(db)


class TestMe:

    def test_anonymous_gets_none(self, service):
        assert service.me(None) is None

    def test_returns_caller(self, service, user):
        assert service.me(user) is user


class TestUsers:

    def test_admin_lists_all_users(self, service, user, admin):
        assert {u.email for u in service.list_users(admin)} == {"wes@example.com", "admin@example.com"}

    def test_non_admin_is_denied(self, service, user):
        with pytest.raises(AuthorizationDenied):
            service.list_users(user)

    def test_requires_session(self, service):
        with pytest.raises(AuthenticationRequired):
            service.list_users(None)


class TestUpdatePermissions:

    def test_admin_replaces_permissions(self, service, user, admin):
        updated = service.update_permissions(admin, user.id, [Permission.USER, Permission.ITEMCREATE])

        assert updated.permissions == ["USER", "ITEMCREATE"]

    def test_permissionupdate_holder_may_update(self, service, user, make_user):
        manager = make_user(email="manager@example.com", permissions=("PERMISSIONUPDATE",))

        updated = service.update_permissions(manager, user.id, ["USER", "ADMIN"])

        assert updated.permissions == ["USER", "ADMIN"]

    def test_duplicates_are_dropped(self, service, user, admin):
        updated = service.update_permissions(admin, user.id, ["USER", "USER", "ADMIN"])

        assert updated.permissions == ["USER", "ADMIN"]

    def test_plain_user_is_denied(self, service, user, other_user):
        with pytest.raises(AuthorizationDenied):
            service.update_permissions(user, other_user.id, ["ADMIN"])
        assert other_user.permissions == ["USER"]

    def test_unknown_target(self, service, admin):
        with pytest.raises(NotFound):
            service.update_permissions(admin, 999, ["USER"])
