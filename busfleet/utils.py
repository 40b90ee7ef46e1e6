import base64
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from .config import settings


# =========================
# JWT Token Handling
# =========================
def create_jwt_token(data: dict, expires_in: timedelta = timedelta(days=1)) -> str:
    """Create a JWT access token carrying ``userId`` and ``role`` claims."""
    to_encode = data.copy()
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_in})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_jwt_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None

def url_base64_to_bytes(value: str) -> bytes:
    """Decode a URL-safe base64 string (e.g. a VAPID public key) that may lack padding."""
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)
