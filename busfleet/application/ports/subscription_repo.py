from typing import List, Optional, Protocol
from dataclasses import dataclass


@dataclass
class SubscriptionDto:
    user_id: str
    endpoint: str
    p256dh: str
    auth: str
    expiration_time: Optional[float] = None

    def to_webpush(self) -> dict:
        return {
            "endpoint": self.endpoint,
            "expirationTime": self.expiration_time,
            "keys": {"p256dh": self.p256dh, "auth": self.auth},
        }


class SubscriptionRepository(Protocol):
    def upsert(self, subscription: SubscriptionDto) -> SubscriptionDto:
        ...

    def get_for_user(self, user_id: str) -> Optional[SubscriptionDto]:
        ...

    def list_all(self) -> List[SubscriptionDto]:
        ...

    def delete_for_user(self, user_id: str) -> None:
        ...


