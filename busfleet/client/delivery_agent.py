"""Background delivery agent: turns pushes into notifications and clicks into windows.

Both handlers are stateless. A malformed push never fails the handler; it is
shown as the fallback alert instead. Nothing is acknowledged back to the
sender and nothing is retried.
"""
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..config import ClientConfig
from ..schemas.push.push import PushMessage, PushMessageData
from .platform import AgentPlatform
from .runtime import AgentScope, NotificationClickEvent, PushEvent, PUSH, NOTIFICATION_CLICK

logger = logging.getLogger(__name__)

VIEW_BUS = "view-bus"
DISMISS = "dismiss"
VIBRATE_PATTERN = [200, 100, 200]
ACTIONS = [
    {"action": VIEW_BUS, "title": "View Bus"},
    {"action": DISMISS, "title": "Dismiss"},
]


class DeliveryAgent:
    def __init__(self, platform: AgentPlatform, default_icon: str = "/icons/bus-icon.png", badge_icon: str = "/icons/bus-badge.png") -> None:
        self.platform = platform
        self.default_icon = default_icon
        self.badge_icon = badge_icon

    @classmethod
    def from_config(cls, config: ClientConfig, platform: AgentPlatform) -> "DeliveryAgent":
        return cls(platform, default_icon=config.default_icon, badge_icon=config.badge_icon)

    def install(self, scope: AgentScope) -> None:
        scope.add_event_listener(PUSH, self.on_push)
        scope.add_event_listener(NOTIFICATION_CLICK, self.on_notification_click)

    def fallback_message(self) -> PushMessage:
        return PushMessage(
            title="Bus Alert",
            body="New notification",
            icon=self.default_icon,
            data=PushMessageData(url="/"),
        )

    def parse_payload(self, raw: Optional[Union[bytes, str]]) -> PushMessage:
        if raw is None:
            return self.fallback_message()
        try:
            text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
            return PushMessage.model_validate_json(text)
        except (UnicodeDecodeError, ValidationError):
            logger.debug("Push payload could not be parsed; showing fallback alert")
            return self.fallback_message()

    def notification_options(self, message: PushMessage) -> Dict[str, Any]:
        return {
            "body": message.body or "",
            "icon": message.icon or self.default_icon,
            "badge": self.badge_icon,
            "data": message.data.model_dump(exclude_none=True) if message.data is not None else None,
            "vibrate": list(VIBRATE_PATTERN),
            "actions": [dict(a) for a in ACTIONS],
        }

    def on_push(self, event: PushEvent) -> None:
        message = self.parse_payload(event.data)
        event.wait_until(self.platform.show_notification(message.title, self.notification_options(message)))

    def on_notification_click(self, event: NotificationClickEvent) -> None:
        event.notification.close()

        data = event.notification.data or {}
        url_to_open = data.get("url") or "/"

        if event.action == VIEW_BUS:
            event.wait_until(self.platform.open_window(url_to_open))
        else:
            # Any other action, including a plain click, opens the app root
            event.wait_until(self.platform.open_window("/"))
