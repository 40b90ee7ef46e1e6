from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from busfleet.db.models import User, UserRole
from busfleet.exceptions import PushDeliveryError
from busfleet.main import app
from busfleet.persistence.database import get_session
from busfleet.routers.notifications_router import get_push_sender
from busfleet.utils import create_jwt_token


class FakeSender:
    def __init__(self, fail_status: int = None):
        self.sent: List[Tuple[str, str]] = []
        self.fail_status = fail_status

    def send(self, subscription, payload: str) -> None:
        if self.fail_status is not None:
            raise PushDeliveryError("push service refused", status_code=self.fail_status)
        self.sent.append((subscription.user_id, payload))


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def client(engine, sender):
    def override_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_push_sender] = lambda: sender
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(session):
    user = User(id="admin-1", name="Ada", email="ada@example.com", role=UserRole.ADMIN, profile_picture="/uploads/ada.png")
    session.add(user)
    session.commit()
    return user


def auth_headers(user_id: str, role: str = "Student") -> dict:
    token = create_jwt_token({"userId": user_id, "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return auth_headers
