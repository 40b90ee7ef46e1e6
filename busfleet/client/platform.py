from typing import Any, Dict, Protocol


class AgentRegistration(Protocol):
    async def subscribe(self, user_visible_only: bool, application_server_key: bytes) -> Dict[str, Any]:
        """Return the subscription in ``PushSubscription.toJSON()`` shape."""
        ...


class PushPlatform(Protocol):
    async def register_agent(self, script_url: str) -> AgentRegistration:
        ...


class AgentPlatform(Protocol):
    async def show_notification(self, title: str, options: Dict[str, Any]) -> None:
        ...

    async def open_window(self, url: str) -> None:
        ...
