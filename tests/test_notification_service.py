from datetime import datetime, timezone

import pytest
from fastapi import HTTPException

from busfleet.application.ports.notification_repo import NotificationDto
from busfleet.application.services.notification_service import NotificationService


class FakeNotificationRepo:
    def __init__(self):
        self.rows = []
        self._id = 1

    def create(self, user_id, message, type):
        now = datetime.now(timezone.utc)
        dto = NotificationDto(self._id, user_id, message, type, now, now)
        self.rows.append(dto)
        self._id += 1
        return dto

    def list_visible(self, user_id, limit, offset):
        rows = [r for r in self.rows if r.user_id in (None, user_id)]
        return list(reversed(rows))[offset:offset + limit]

    def get_visible(self, notification_id, user_id):
        return next((r for r in self.rows if r.id == notification_id and r.user_id in (None, user_id)), None)


def test_create_defaults_to_general_broadcast():
    svc = NotificationService(repo=FakeNotificationRepo())
    out = svc.create("Holiday on Monday")
    assert out.type == "general"
    assert out.user_id is None


def test_create_rejects_unknown_type():
    repo = FakeNotificationRepo()
    svc = NotificationService(repo=repo)
    with pytest.raises(HTTPException) as exc:
        svc.create("hello", type="urgent")
    assert exc.value.status_code == 400
    assert repo.rows == []


def test_create_requires_message():
    svc = NotificationService(repo=FakeNotificationRepo())
    with pytest.raises(HTTPException):
        svc.create("   ", type="delay")


def test_targeted_record_hidden_from_other_users():
    svc = NotificationService(repo=FakeNotificationRepo())
    svc.create("for everyone")
    private = svc.create("route moved", type="route-change", user_id="u1")

    assert [n.message for n in svc.list_visible("u1")] == ["route moved", "for everyone"]
    assert [n.message for n in svc.list_visible("u2")] == ["for everyone"]
    with pytest.raises(HTTPException) as exc:
        svc.get_visible("u2", private.id)
    assert exc.value.status_code == 404
