from typing import Optional
from sqlmodel import Session, select

from .....db.models import User
from .....application.ports.user_repo import UserRepository, UserDto

class SqlUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, user: User) -> UserDto:
        return UserDto(
            id=user.id,
            name=user.name,
            email=user.email,
            role=getattr(user.role, "value", user.role),
            phone=user.phone,
            gender=user.gender,
            age=user.age,
            profile_picture=user.profile_picture,
        )

    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        user = self.session.exec(select(User).where(User.id == user_id)).first()
        return self._to_dto(user) if user else None
