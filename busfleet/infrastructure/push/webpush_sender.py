import logging
from pywebpush import webpush, WebPushException

from ...application.ports.push_sender import PushSender
from ...application.ports.subscription_repo import SubscriptionDto
from ...exceptions import PushDeliveryError


class WebPushSender(PushSender):
    """Signs and sends Web Push messages with the application's VAPID key pair."""

    def __init__(self, vapid_private_key: str, vapid_subject: str) -> None:
        self._logger = logging.getLogger(__name__)
        self.vapid_private_key = vapid_private_key
        self.vapid_claims = {"sub": vapid_subject}

    def send(self, subscription: SubscriptionDto, payload: str) -> None:
        try:
            webpush(
                subscription_info=subscription.to_webpush(),
                data=payload,
                vapid_private_key=self.vapid_private_key,
                vapid_claims=dict(self.vapid_claims),
            )
        except WebPushException as e:
            status = e.response.status_code if e.response is not None else None
            raise PushDeliveryError(str(e), status_code=status) from e
        self._logger.info("Push sent")
