from dataclasses import dataclass
from typing import List, Optional, Union
from ...exceptions import APIException

from ..ports.notification_repo import NotificationRepository, NotificationDto
from ...db.models.notifications.notification import NotificationType


@dataclass
class NotificationService:
    repo: NotificationRepository

    def create(self, message: str, type: Union[NotificationType, str, None] = None, user_id: Optional[str] = None) -> NotificationDto:
        if not message or not message.strip():
            raise APIException(400, "Notification message is required")
        try:
            kind = NotificationType(type) if type is not None else NotificationType.GENERAL
        except ValueError:
            allowed = [t.value for t in NotificationType]
            raise APIException(400, f"Invalid notification type. Must be one of: {allowed}")
        return self.repo.create(user_id, message, kind.value)

    def list_visible(self, user_id: str, limit: int = 50, offset: int = 0) -> List[NotificationDto]:
        return self.repo.list_visible(user_id, limit, offset)

    def get_visible(self, user_id: str, notification_id: int) -> NotificationDto:
        record = self.repo.get_visible(notification_id, user_id)
        if not record:
            raise APIException(404, "Notification not found")
        return record
