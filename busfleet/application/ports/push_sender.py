from typing import Protocol

from .subscription_repo import SubscriptionDto


class PushSender(Protocol):
    def send(self, subscription: SubscriptionDto, payload: str) -> None:
        """Deliver ``payload`` once. Raises PushDeliveryError when the push service refuses it."""
        ...


