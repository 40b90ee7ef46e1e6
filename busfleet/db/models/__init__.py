# Models package (re-export feature modules for stable imports)
from .users.user import User, UserRole
from .notifications.notification import NotificationRecord, NotificationType
from .notifications.push_subscription import PushSubscription

__all__ = [
    "User",
    "UserRole",
    "NotificationRecord",
    "NotificationType",
    "PushSubscription",
]
