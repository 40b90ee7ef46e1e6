import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..ports.push_sender import PushSender
from ..ports.subscription_repo import SubscriptionRepository, SubscriptionDto
from ...exceptions import PushDeliveryError

logger = logging.getLogger(__name__)


@dataclass
class PushService:
    """Stores browser subscriptions and sends best-effort pushes to them.

    Delivery is at-most-once: a failed send is logged and reported through the
    return value, never retried. Subscriptions the push service reports as gone
    (404/410) are dropped.
    """
    subscriptions: SubscriptionRepository
    sender: PushSender
    default_icon: str = "/icons/bus-icon.png"

    def save_subscription(self, user_id: str, endpoint: str, p256dh: str, auth: str, expiration_time: Optional[float] = None) -> SubscriptionDto:
        sub = SubscriptionDto(
            user_id=user_id,
            endpoint=endpoint,
            p256dh=p256dh,
            auth=auth,
            expiration_time=expiration_time,
        )
        saved = self.subscriptions.upsert(sub)
        logger.info(f"Stored push subscription for user {user_id}")
        return saved

    def send_push_to_user(self, user_id: str, payload: Dict[str, Any]) -> bool:
        subscription = self.subscriptions.get_for_user(user_id)
        if not subscription:
            logger.info(f"No subscription found for user: {user_id}")
            return False
        return self._deliver(subscription, json.dumps(payload))

    def broadcast(self, payload: Dict[str, Any]) -> int:
        body = json.dumps(payload)
        sent = 0
        for subscription in self.subscriptions.list_all():
            if self._deliver(subscription, body):
                sent += 1
        return sent

    def send_delay_notification(self, bus_id: str, delay_minutes: int, reason: str) -> int:
        payload = self.delay_payload(bus_id, delay_minutes, reason)
        sent = self.broadcast(payload)
        logger.info(f"Delay alert for bus {bus_id} delivered to {sent} subscriber(s)")
        return sent

    def delay_payload(self, bus_id: str, delay_minutes: int, reason: str) -> Dict[str, Any]:
        return {
            "title": f"Bus {bus_id} Delay Alert",
            "body": f"Bus is delayed by {delay_minutes} minutes: {reason}",
            "icon": self.default_icon,
            "data": {
                "url": f"/bus-tracking/{bus_id}",
                "busId": bus_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        }

    def _deliver(self, subscription: SubscriptionDto, body: str) -> bool:
        try:
            self.sender.send(subscription, body)
            return True
        except PushDeliveryError as e:
            logger.error(f"Error sending notification to user {subscription.user_id}: {e}")
            if e.subscription_gone:
                # Subscription expired - remove it
                self.subscriptions.delete_for_user(subscription.user_id)
            return False
