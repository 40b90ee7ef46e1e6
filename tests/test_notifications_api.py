import json

from busfleet.infrastructure.persistence.sqlalchemy.repositories.subscription_repository_sql import SqlSubscriptionRepository

SUBSCRIPTION = {
    "endpoint": "https://push.example.com/abc",
    "expirationTime": None,
    "keys": {"p256dh": "BNcR", "auth": "tBHI"},
}


def test_subscribe_stores_subscription(client, session):
    res = client.post("/api/notifications/subscribe", json={"userId": "u1", "subscription": SUBSCRIPTION})
    assert res.status_code == 201
    assert res.json()["success"] is True

    again = dict(SUBSCRIPTION, endpoint="https://push.example.com/new")
    res = client.post("/api/notifications/subscribe", json={"userId": "u1", "subscription": again})
    assert res.status_code == 201

    subs = SqlSubscriptionRepository(session).list_all()
    assert [s.endpoint for s in subs] == ["https://push.example.com/new"]


def test_subscribe_rejects_missing_user(client):
    res = client.post("/api/notifications/subscribe", json={"subscription": SUBSCRIPTION})
    assert res.status_code == 422


def test_list_requires_token(client):
    res = client.get("/api/notifications")
    assert res.status_code == 401
    assert res.json()["success"] is False


def test_admin_creates_broadcast_and_pushes_to_subscribers(client, sender, admin, headers_for):
    client.post("/api/notifications/subscribe", json={"userId": "u1", "subscription": SUBSCRIPTION})

    res = client.post("/api/notifications", json={"message": "No service on Friday"}, headers=headers_for(admin.id, "Admin"))

    assert res.status_code == 201
    body = res.json()
    assert body["type"] == "general"
    assert body["user"] is None
    assert len(sender.sent) == 1
    payload = json.loads(sender.sent[0][1])
    assert payload["title"] == "Bus Alert"
    assert payload["body"] == "No service on Friday"


def test_targeted_notification_pushes_only_to_that_user(client, sender, admin, headers_for):
    client.post("/api/notifications/subscribe", json={"userId": "u1", "subscription": SUBSCRIPTION})
    other = dict(SUBSCRIPTION, endpoint="https://push.example.com/u2")
    client.post("/api/notifications/subscribe", json={"userId": "u2", "subscription": other})

    res = client.post(
        "/api/notifications",
        json={"message": "Your stop moved", "type": "route-change", "user": "u2", "url": "/routes/5"},
        headers=headers_for(admin.id, "Admin"),
    )

    assert res.status_code == 201
    assert res.json()["user"] == "u2"
    assert [user_id for user_id, _ in sender.sent] == ["u2"]
    payload = json.loads(sender.sent[0][1])
    assert payload["title"] == "Route Change"
    assert payload["data"] == {"url": "/routes/5"}


def test_targeted_record_only_visible_to_target(client, admin, headers_for):
    headers = headers_for(admin.id, "Admin")
    client.post("/api/notifications", json={"message": "Everyone"}, headers=headers)
    client.post("/api/notifications", json={"message": "Only u1", "type": "route-change", "user": "u1"}, headers=headers)

    u1 = client.get("/api/notifications", headers=headers_for("u1")).json()
    u2 = client.get("/api/notifications", headers=headers_for("u2")).json()

    assert {n["message"] for n in u1} == {"Everyone", "Only u1"}
    assert [n["message"] for n in u2] == ["Everyone"]


def test_invalid_type_is_rejected(client, admin, headers_for):
    res = client.post("/api/notifications", json={"message": "x", "type": "urgent"}, headers=headers_for(admin.id, "Admin"))
    assert res.status_code == 422


def test_students_cannot_create_notifications(client, headers_for):
    res = client.post("/api/notifications", json={"message": "x"}, headers=headers_for("u1", "Student"))
    assert res.status_code == 403


def test_driver_reports_delay(client, sender, headers_for):
    client.post("/api/notifications/subscribe", json={"userId": "u1", "subscription": SUBSCRIPTION})

    res = client.post(
        "/api/notifications/delay",
        json={"busId": "42", "delayMinutes": 10, "reason": "Flat tyre"},
        headers=headers_for("driver-1", "Driver"),
    )

    assert res.status_code == 200
    body = res.json()
    assert body["sent"] == 1
    assert body["notification"]["type"] == "delay"
    assert json.loads(sender.sent[0][1])["data"]["url"] == "/bus-tracking/42"


def test_current_user_profile(client, admin, headers_for):
    res = client.get("/api/auth/user/me", headers=headers_for(admin.id, "Admin"))

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["user"]["_id"] == "admin-1"
    assert body["user"]["role"] == "Admin"
    assert body["user"]["profilePictureUrl"].endswith("/uploads/ada.png")


def test_current_user_missing(client, headers_for):
    res = client.get("/api/auth/user/me", headers=headers_for("ghost"))
    assert res.status_code == 404
