from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


class PushSubscription(SQLModel, table=True):
    """Browser push subscription, one per user; re-subscribing replaces it."""
    __tablename__ = "push_subscriptions"
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(unique=True, index=True)
    endpoint: str
    p256dh: str
    auth: str
    expiration_time: Optional[float] = Field(default=None)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
