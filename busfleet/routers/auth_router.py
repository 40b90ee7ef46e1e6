from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..config import settings
from ..persistence.database import get_session
from ..auth import get_current_user
from ..schemas import CurrentUser, CurrentUserResponse
from ..application.services.profile_service import ProfileService
from ..infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository

router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_profile_service(session: Session = Depends(get_session)) -> ProfileService:
    return ProfileService(user_repo=SqlUserRepository(session), base_url=settings.BASE_URL)


@router.get("/user/me", response_model=CurrentUserResponse)
def get_me(current_user: CurrentUser = Depends(get_current_user), profiles: ProfileService = Depends(get_profile_service)):
    """Profile of the signed-in user, without credentials or audit fields."""
    return CurrentUserResponse(user=profiles.get_current_profile(current_user.id))
