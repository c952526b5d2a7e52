"""Tests for background jobs and seed data."""

import time

from storefront.data.models import ItemModel, UserModel
from storefront.data.seed import seed
from storefront.services import notification_service
from storefront.services.auth_service import check_password
from storefront.services.notification_service import format_amount, send_order_confirmation_task
from storefront.tasks.expire import expire_reset_tokens


class TestExpireResetTokens:

    def test_clears_only_expired_tokens(self, db, make_user):
        now = int(time.time() * 1000)
        stale = make_user(email="stale@example.com")
        fresh = make_user(email="fresh@example.com")
        stale.reset_token, stale.reset_token_expiry = "a" * 40, now - 1000
        fresh.reset_token, fresh.reset_token_expiry = "b" * 40, now + 1000
        db.commit()

        assert expire_reset_tokens(db, now_ms=now) == 1

        assert stale.reset_token is None
        assert stale.reset_token_expiry is None
        assert fresh.reset_token == "b" * 40


class TestOrderConfirmation:

    def test_mails_confirmation(self, monkeypatch, mail_client):
        monkeypatch.setattr(notification_service, "MailClient", lambda: mail_client)

        result = send_order_confirmation_task("wes@example.com", 7, 4550)

        assert result == {"order_id": 7, "status": "sent"}
        assert mail_client.sent[0]["to"] == "wes@example.com"
        assert "Order 7 was charged $45.50" in mail_client.sent[0]["html"]

    def test_format_amount(self):
        assert format_amount(123456) == "$1,234.56"
        assert format_amount(5) == "$0.05"


class TestSeed:

    def test_seeds_admin_and_items_once(self, db):
        admin = seed(db)

        assert admin.email == "admin@sickfits.com"
        assert "ADMIN" in admin.permissions
        assert check_password("admin", admin.password)
        assert db.query(ItemModel).count() == 3

        assert seed(db) is None
        assert db.query(UserModel).count() == 1
