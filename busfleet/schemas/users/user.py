# busfleet/schemas/users/user.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ...db.models.users.user import UserRole


class CurrentUser(BaseModel):
    """Identity taken from a verified bearer token."""
    id: str
    role: Optional[UserRole] = None


class UserProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    phone: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    role: UserRole
    profilePicture: Optional[str] = None
    profilePictureUrl: Optional[str] = None


class CurrentUserResponse(BaseModel):
    success: bool = True
    user: UserProfile
