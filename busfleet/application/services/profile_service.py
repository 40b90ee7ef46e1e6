from dataclasses import dataclass
from ...exceptions import APIException

from ..ports.user_repo import UserRepository
from ...schemas.users.user import UserProfile


@dataclass
class ProfileService:
    user_repo: UserRepository
    base_url: str

    def get_current_profile(self, user_id: str) -> UserProfile:
        user = self.user_repo.get_by_id(user_id)
        if not user:
            raise APIException(404, "User not found")
        picture_url = None
        if user.profile_picture:
            picture_url = f"{self.base_url.rstrip('/')}{user.profile_picture}"
        return UserProfile(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            gender=user.gender,
            age=user.age,
            role=user.role,
            profilePicture=user.profile_picture,
            profilePictureUrl=picture_url,
        )
