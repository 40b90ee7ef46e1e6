# Bearer-token dependencies shared by the routers
import logging
from typing import Optional
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .utils import decode_jwt_token
from .schemas.users.user import CurrentUser
from .db.models.users.user import UserRole

logger = logging.getLogger(__name__)

oauth2_scheme = HTTPBearer(auto_error=False)


def get_current_user(request: Request, credentials: Optional[HTTPAuthorizationCredentials] = Depends(oauth2_scheme)) -> CurrentUser:
    token = credentials.credentials if credentials and credentials.credentials else request.cookies.get("token")
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized: No token provided")
    payload = decode_jwt_token(token)
    if not payload:
        logger.warning("JWT token decode failed - invalid or expired token")
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    user_id = payload.get("userId")
    if not user_id:
        raise HTTPException(status_code=403, detail="Forbidden: Invalid token structure")
    role = payload.get("role")
    try:
        return CurrentUser(id=str(user_id), role=UserRole(role) if role else None)
    except ValueError:
        raise HTTPException(status_code=403, detail="Forbidden: Unknown role")


def require_roles(*roles: UserRole):
    def checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if current_user.role not in roles:
            allowed = ", ".join(r.value for r in roles)
            raise HTTPException(status_code=403, detail=f"Access denied: {allowed} only")
        return current_user
    return checker
