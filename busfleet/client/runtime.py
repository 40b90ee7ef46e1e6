"""In-process event scope for the background delivery agent.

Handlers are registered per event kind, as a service worker does with
``self.addEventListener``. Each dispatched event carries ``wait_until``; the
scope keeps the event open until every awaitable passed to it has settled.
"""
import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

PUSH = "push"
NOTIFICATION_CLICK = "notificationclick"


class ExtendableEvent:
    def __init__(self) -> None:
        self._pending: List[asyncio.Future] = []

    def wait_until(self, awaitable: Awaitable[Any]) -> None:
        self._pending.append(asyncio.ensure_future(awaitable))

    async def settle(self) -> List[Any]:
        if not self._pending:
            return []
        return await asyncio.gather(*self._pending, return_exceptions=True)


class PushEvent(ExtendableEvent):
    def __init__(self, data: Optional[Union[bytes, str]] = None) -> None:
        super().__init__()
        self.data = data


class DisplayedNotification:
    def __init__(self, title: str, options: Optional[Dict[str, Any]] = None) -> None:
        self.title = title
        self.options = options or {}
        self.closed = False

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        return self.options.get("data")

    def close(self) -> None:
        self.closed = True


class NotificationClickEvent(ExtendableEvent):
    def __init__(self, notification: DisplayedNotification, action: str = "") -> None:
        super().__init__()
        self.notification = notification
        self.action = action


Listener = Callable[[ExtendableEvent], Any]


class AgentScope:
    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def add_event_listener(self, kind: str, listener: Listener) -> None:
        self._listeners[kind].append(listener)

    async def dispatch(self, kind: str, event: ExtendableEvent) -> List[Any]:
        """Run every listener for ``kind`` and wait for the work they extended the event with.

        Failures of extended work are logged and returned, never raised. A listener
        that raises still propagates, after the work already extended has settled.
        """
        try:
            for listener in self._listeners.get(kind, []):
                result = listener(event)
                if asyncio.iscoroutine(result):
                    await result
        finally:
            results = await event.settle()
        for outcome in results:
            if isinstance(outcome, BaseException):
                logger.error(f"Unhandled failure in {kind} handler: {outcome!r}")
        return results

    async def push(self, data: Optional[Union[bytes, str]] = None) -> List[Any]:
        return await self.dispatch(PUSH, PushEvent(data))

    async def click(self, notification: DisplayedNotification, action: str = "") -> List[Any]:
        return await self.dispatch(NOTIFICATION_CLICK, NotificationClickEvent(notification, action))
