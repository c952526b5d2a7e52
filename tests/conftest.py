"""Shared pytest fixtures for storefront tests."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_SECRET", "test-secret")
os.environ.setdefault("FRONTEND_URL", "http://shop.test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api import create_app
from storefront.api.deps import (
    get_lock_service,
    get_mail_client,
    get_notification_service,
    get_payment_client,
)
from storefront.data.database import Base, get_db
from storefront.data.models import CartItemModel, ItemModel, UserModel
from storefront.domain.errors import PaymentDeclined, UpstreamFailure
from storefront.services.auth_service import hash_password
from storefront.services.payment_client import Charge
from storefront.services.session import issue_token


class FakeLockService:
    def __init__(self):
        self.held = {}
        self.acquired = []

    def acquire(self, key, owner, ttl):
        if key in self.held:
            return False
        self.held[key] = owner
        self.acquired.append(key)
        return True

    def release(self, key, owner):
        if self.held.get(key) == owner:
            del self.held[key]
            return True
        return False


class FakePaymentClient:
    """Behaves like Stripe idempotency: a key replays its first result and rejects other params."""

    def __init__(self):
        self.calls = []
        self.decline = False
        self._results = {}
        self._charge_count = 0

    def charge(self, amount, source, idempotency_key, currency=None):
        params = {"amount": amount, "source": source}
        self.calls.append({**params, "idempotency_key": idempotency_key})

        if idempotency_key in self._results:
            stored_params, result = self._results[idempotency_key]
            if stored_params != params:
                raise UpstreamFailure(
                    "Keys for idempotent requests can only be used with the same parameters they were first used with."
                )
        else:
            if self.decline:
                result = PaymentDeclined("Your card was declined.")
            else:
                self._charge_count += 1
                result = Charge(id=f"ch_{self._charge_count}", amount=amount)
            self._results[idempotency_key] = (params, result)

        if isinstance(result, Exception):
            raise result
        return result


class FakeMailClient:
    def __init__(self):
        self.sent = []

    def send(self, to, subject, html):
        self.sent.append({"to": to, "subject": subject, "html": html})


class FakeNotificationService:
    def __init__(self):
        self.sent = []
        self.fail = False

    def send_order_notification(self, email, order_id, total):
        if self.fail:
            raise ConnectionError("broker down")
        self.sent.append((email, order_id, total))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def lock_service():
    return FakeLockService()


@pytest.fixture
def payment_client():
    return FakePaymentClient()


@pytest.fixture
def mail_client():
    return FakeMailClient()


@pytest.fixture
def notifier():
    return FakeNotificationService()


@pytest.fixture
def make_user(db):
    """Factory creating users with a known password."""

    def _make(email="wes@example.com", name="Wes", password="secret", permissions=("USER",)):
        user = UserModel(
            name=name,
            email=email,
            password=hash_password(password),
            permissions=list(permissions),
        )
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def other_user(make_user):
    return make_user(email="other@example.com", name="Other")


@pytest.fixture
def admin(make_user):
    return make_user(email="admin@example.com", name="Admin", permissions=("USER", "ADMIN"))


@pytest.fixture
def make_item(db):
    def _make(owner, title="Belt", price=1000, description="A nice item"):
        item = ItemModel(
            title=title,
            description=description,
            price=price,
            image=f"{title.lower()}.jpg",
            large_image=f"{title.lower()}-large.jpg",
            user_id=owner.id,
        )
        db.add(item)
        db.commit()
        return item

    return _make


@pytest.fixture
def add_cart_line(db):
    def _add(user, item, quantity=1):
        line = CartItemModel(user_id=user.id, item_id=item.id, quantity=quantity)
        db.add(line)
        db.commit()
        return line

    return _add


@pytest.fixture
def client(db, lock_service, payment_client, mail_client, notifier):
    app = create_app()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    app.dependency_overrides[get_payment_client] = lambda: payment_client
    app.dependency_overrides[get_mail_client] = lambda: mail_client
    app.dependency_overrides[get_notification_service] = lambda: notifier

    with TestClient(app) as c:
        yield c


@pytest.fixture
def login(client):
    """Put a session cookie for the given user on the test client."""

    def _login(user):
        client.cookies.set("token", issue_token(user.id))
        return client

    return _login
