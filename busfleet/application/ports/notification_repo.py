from typing import List, Optional, Protocol
from dataclasses import dataclass
from datetime import datetime


@dataclass
class NotificationDto:
    id: int
    user_id: Optional[str]
    message: str
    type: str
    created_at: datetime
    updated_at: datetime


class NotificationRepository(Protocol):
    def create(self, user_id: Optional[str], message: str, type: str) -> NotificationDto:
        ...

    def list_visible(self, user_id: str, limit: int, offset: int) -> List[NotificationDto]:
        """Broadcasts plus records addressed to ``user_id``, newest first."""
        ...

    def get_visible(self, notification_id: int, user_id: str) -> Optional[NotificationDto]:
        ...


