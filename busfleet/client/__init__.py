# Dashboard-side components (re-export for stable imports)
from .runtime import AgentScope, DisplayedNotification, NotificationClickEvent, PushEvent
from .delivery_agent import DeliveryAgent
from .registrar import PushSubscriptionRegistrar
from .account import AccountMenu, MenuEntry, MenuProfile

__all__ = [
    "AgentScope",
    "DisplayedNotification",
    "NotificationClickEvent",
    "PushEvent",
    "DeliveryAgent",
    "PushSubscriptionRegistrar",
    "AccountMenu",
    "MenuEntry",
    "MenuProfile",
]
