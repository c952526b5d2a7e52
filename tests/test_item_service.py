"""Tests for item CRUD and the shared item policy."""

import pytest

from storefront.data.models import ItemModel
from storefront.domain.errors import AuthenticationRequired, AuthorizationDenied, NotFound
from storefront.services.item_service import ItemService


@pytest.fixture
def service(db):
    return ItemService(db)


ITEM = {"title": "Belt", "description": "Leather", "price": 1000, "image": "b.jpg", "large_image": "bl.jpg"}


class TestCreateItem:

    def test_caller_becomes_owner(self, service, user):
        item = service.create_item(user, dict(ITEM))

        assert item.id is not None
        assert item.user_id == user.id
        assert item.price == 1000

    def test_requires_session(self, service, db):
        with pytest.raises(AuthenticationRequired):
            service.create_item(None, dict(ITEM))
        assert db.query(ItemModel).count() == 0


class TestUpdateItem:

    def test_owner_can_update(self, service, user, make_item):
        item = make_item(user)

        updated = service.update_item(user, item.id, {"title": "New title", "price": 1200})

        assert updated.title == "New title"
        assert updated.price == 1200
        assert updated.description == "A nice item"

    def test_id_is_never_updated(self, service, user, make_item):
        item = make_item(user)

        updated = service.update_item(user, item.id, {"id": 999, "title": "Other"})

        assert updated.id == item.id

    def test_non_owner_without_permission_is_denied(self, service, user, other_user, make_item):
        item = make_item(user)

        with pytest.raises(AuthorizationDenied):
            service.update_item(other_user, item.id, {"title": "Hijacked"})
        assert item.title == "Belt"

    def test_itemupdate_permission_allows_non_owner(self, service, user, make_user, make_item):
        editor = make_user(email="editor@example.com", permissions=("USER", "ITEMUPDATE"))
        item = make_item(user)

        assert service.update_item(editor, item.id, {"title": "Edited"}).title == "Edited"

    def test_itemdelete_permission_does_not_allow_update(self, service, user, make_user, make_item):
        deleter = make_user(email="deleter@example.com", permissions=("USER", "ITEMDELETE"))
        item = make_item(user)

        with pytest.raises(AuthorizationDenied):
            service.update_item(deleter, item.id, {"title": "Edited"})

    def test_unknown_item(self, service, user):
        with pytest.raises(NotFound):
            service.update_item(user, 404, {"title": "x"})


class TestDeleteItem:

    def test_owner_can_delete(self, service, db, user, make_item):
        item = make_item(user)

        service.delete_item(user, item.id)

        assert db.get(ItemModel, item.id) is None

    @pytest.mark.parametrize("permissions", [("USER", "ADMIN"), ("USER", "ITEMDELETE")])
    def test_admin_or_itemdelete_can_delete(self, service, db, user, make_user, make_item, permissions):
        moderator = make_user(email="mod@example.com", permissions=permissions)
        item = make_item(user)

        service.delete_item(moderator, item.id)

        assert db.get(ItemModel, item.id) is None

    def test_non_owner_without_permission_is_denied(self, service, db, user, other_user, make_item):
        item = make_item(user)

        with pytest.raises(AuthorizationDenied):
            service.delete_item(other_user, item.id)
        assert db.get(ItemModel, item.id) is not None

    def test_requires_session(self, service, user, make_item):
        item = make_item(user)

        with pytest.raises(AuthenticationRequired):
            service.delete_item(None, item.id)


class TestItemQueries:

    def test_list_is_paginated_newest_first(self, service, user, make_item):
        titles = ["A", "B", "C", "D", "E", "F"]
        for title in titles:
            make_item(user, title=title)

        first_page = service.list_items()
        second_page = service.list_items(skip=4, first=4)

        assert [i.title for i in first_page] == ["F", "E", "D", "C"]
        assert [i.title for i in second_page] == ["B", "A"]

    def test_count(self, service, user, make_item):
        make_item(user, title="A")
        make_item(user, title="B")

        assert service.count_items() == {"count": 2}

    def test_get_item(self, service, user, make_item):
        item = make_item(user)

        assert service.get_item(item.id).title == "Belt"

    def test_get_unknown_item(self, service):
        with pytest.raises(NotFound):
            service.get_item(1)
