import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import aiohttp

from ..config import ClientConfig

logger = logging.getLogger(__name__)

DEFAULT_AVATAR = "/assets/images/avatars/8.jpg"
DEFAULT_ROLE_LABEL = "User"


@dataclass(frozen=True)
class MenuEntry:
    name: str
    to: Optional[str] = None
    action: Optional[str] = None


ADMIN_NAV = [
    MenuEntry("Manage User", "/usertable"),
    MenuEntry("Manage Driver", "/drivertable"),
    MenuEntry("Manage Route", "/routetable"),
    MenuEntry("Manage Bus", "/bustable"),
    MenuEntry("Notification", "/show-feedback"),
]
DRIVER_NAV = [
    MenuEntry("Dashboard", "/driver-dashboard"),
]
STUDENT_NAV = [
    MenuEntry("Home", "/student-dashboard"),
    MenuEntry("About", "/about"),
    MenuEntry("Feedback", "/feedback"),
    MenuEntry("Search", "/search-bus"),
]


@dataclass
class MenuProfile:
    role_label: str = DEFAULT_ROLE_LABEL
    avatar_url: str = DEFAULT_AVATAR
    nav: List[MenuEntry] = field(default_factory=list)
    dropdown: List[MenuEntry] = field(default_factory=list)
    user: Optional[Dict[str, Any]] = None


def nav_for_role(role: Optional[str]) -> List[MenuEntry]:
    if role == "Admin":
        return list(ADMIN_NAV)
    if role == "Driver":
        return list(DRIVER_NAV)
    return list(STUDENT_NAV)


def dropdown_for_role(role: Optional[str]) -> List[MenuEntry]:
    if role == "Admin":
        entries = [MenuEntry("Send Messages", "/send-message")]
    else:
        entries = [MenuEntry("Messages", "/show-messages")]
    entries += [
        MenuEntry("Profile", "/update-profiles"),
        MenuEntry("Settings", "/settings"),
        MenuEntry("Logout", action="logout"),
    ]
    return entries


class AccountMenu:
    """Builds the header account menu from the signed-in user's profile.

    A failed profile fetch is logged and the menu falls back to the default
    avatar and role label.
    """

    def __init__(self, config: ClientConfig, session: Optional[aiohttp.ClientSession] = None) -> None:
        self.config = config
        self._session = session

    async def fetch_user(self, token: str) -> Optional[Dict[str, Any]]:
        url = f"{self.config.api_url}/auth/user/me"
        headers = {"Authorization": f"Bearer {token}"}
        if self._session is not None:
            return await self._get(self._session, url, headers)
        async with aiohttp.ClientSession() as session:
            return await self._get(session, url, headers)

    async def _get(self, session: aiohttp.ClientSession, url: str, headers: Dict[str, str]) -> Optional[Dict[str, Any]]:
        async with session.get(url, headers=headers) as response:
            response.raise_for_status()
            payload = await response.json()
        if payload.get("success"):
            return payload.get("user")
        return None

    async def load(self, token: Optional[str]) -> MenuProfile:
        user = None
        if token:
            try:
                user = await self.fetch_user(token)
            except Exception as e:
                logger.error(f"Error fetching user data: {e}")

        role = user.get("role") if user else None
        return MenuProfile(
            role_label=role or DEFAULT_ROLE_LABEL,
            avatar_url=(user or {}).get("profilePictureUrl") or DEFAULT_AVATAR,
            nav=nav_for_role(role),
            dropdown=dropdown_for_role(role),
            user=user,
        )
