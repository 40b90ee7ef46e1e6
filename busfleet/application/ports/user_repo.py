from typing import Protocol, Optional
from dataclasses import dataclass


@dataclass
class UserDto:
    id: str
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    profile_picture: Optional[str] = None


class UserRepository(Protocol):
    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        ...
