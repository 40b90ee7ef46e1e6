import json

from busfleet.application.ports.subscription_repo import SubscriptionDto
from busfleet.application.services.push_service import PushService
from busfleet.exceptions import PushDeliveryError


class FakeSubscriptionRepo:
    def __init__(self):
        self.subs = {}

    def upsert(self, subscription):
        self.subs[subscription.user_id] = subscription
        return subscription

    def get_for_user(self, user_id):
        return self.subs.get(user_id)

    def list_all(self):
        return list(self.subs.values())

    def delete_for_user(self, user_id):
        self.subs.pop(user_id, None)


class FakeSender:
    def __init__(self, failures=None):
        self.sent = []
        self.failures = failures or {}

    def send(self, subscription, payload):
        status = self.failures.get(subscription.user_id)
        if status is not None:
            raise PushDeliveryError("rejected", status_code=status)
        self.sent.append((subscription.user_id, json.loads(payload)))


def make_service(failures=None):
    repo = FakeSubscriptionRepo()
    sender = FakeSender(failures)
    return PushService(subscriptions=repo, sender=sender), repo, sender


def test_save_subscription_replaces_previous_one():
    svc, repo, _ = make_service()
    svc.save_subscription("u1", "https://push/1", "k1", "a1")
    svc.save_subscription("u1", "https://push/2", "k2", "a2")
    assert repo.get_for_user("u1").endpoint == "https://push/2"
    assert len(repo.list_all()) == 1


def test_send_to_user_without_subscription_returns_false():
    svc, _, sender = make_service()
    assert svc.send_push_to_user("nobody", {"title": "x"}) is False
    assert sender.sent == []


def test_gone_subscription_is_removed():
    svc, repo, _ = make_service(failures={"u1": 410})
    repo.upsert(SubscriptionDto("u1", "https://push/1", "k", "a"))
    assert svc.send_push_to_user("u1", {"title": "x"}) is False
    assert repo.get_for_user("u1") is None


def test_other_failures_keep_subscription():
    svc, repo, _ = make_service(failures={"u1": 500})
    repo.upsert(SubscriptionDto("u1", "https://push/1", "k", "a"))
    assert svc.send_push_to_user("u1", {"title": "x"}) is False
    assert repo.get_for_user("u1") is not None


def test_delay_notification_counts_successful_deliveries():
    svc, repo, sender = make_service(failures={"u2": 500})
    for uid in ("u1", "u2", "u3"):
        repo.upsert(SubscriptionDto(uid, f"https://push/{uid}", "k", "a"))

    sent = svc.send_delay_notification("42", 15, "Traffic")

    assert sent == 2
    payload = sender.sent[0][1]
    assert payload["title"] == "Bus 42 Delay Alert"
    assert payload["body"] == "Bus is delayed by 15 minutes: Traffic"
    assert payload["icon"] == "/icons/bus-icon.png"
    assert payload["data"]["url"] == "/bus-tracking/42"
    assert payload["data"]["busId"] == "42"
