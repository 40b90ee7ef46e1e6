import logging
from typing import Any, Dict, Optional

import aiohttp

from ..config import ClientConfig
from ..exceptions import SubscriptionError
from ..utils import url_base64_to_bytes
from .platform import PushPlatform

logger = logging.getLogger(__name__)


class PushSubscriptionRegistrar:
    """Registers the delivery agent, obtains a push subscription and hands it to the API.

    Pass the dashboard's shared ``aiohttp.ClientSession`` so its cookies go along
    with the request; without one a throwaway session is used per call.
    """

    def __init__(self, config: ClientConfig, platform: PushPlatform, session: Optional[aiohttp.ClientSession] = None) -> None:
        self.config = config
        self.platform = platform
        self._session = session

    @property
    def endpoint(self) -> str:
        return f"{self.config.api_url}/notifications/subscribe"

    async def subscribe(self, user_id: str) -> None:
        registration = await self.platform.register_agent(self.config.agent_script_url)

        subscription = await registration.subscribe(
            user_visible_only=True,
            application_server_key=url_base64_to_bytes(self.config.vapid_public_key),
        )

        body = {"userId": user_id, "subscription": subscription}
        if self._session is not None:
            await self._post(self._session, body)
        else:
            async with aiohttp.ClientSession() as session:
                await self._post(session, body)

    async def _post(self, session: aiohttp.ClientSession, body: Dict[str, Any]) -> None:
        async with session.post(self.endpoint, json=body, headers={"Content-Type": "application/json"}) as response:
            if not 200 <= response.status < 300:
                logger.warning(f"Push subscription rejected with status {response.status}")
                raise SubscriptionError(status=response.status)
        logger.info(f"Push subscription registered for user {body['userId']}")
