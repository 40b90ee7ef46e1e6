# busfleet/db/models/notifications/notification.py
from typing import Optional
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, Enum as SAEnum
from datetime import datetime, timezone
from enum import Enum


class NotificationType(str, Enum):
    DELAY = "delay"
    ROUTE_CHANGE = "route-change"
    GENERAL = "general"


class NotificationRecord(SQLModel, table=True):
    """A persisted notification. ``user_id`` of None marks a broadcast to every user."""
    __tablename__ = "notifications"
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[str] = Field(default=None, foreign_key="users.id", index=True)
    message: str = Field(nullable=False)
    type: NotificationType = Field(
        default=NotificationType.GENERAL,
        sa_column=Column(
            SAEnum(
                NotificationType,
                name="notification_type",
                values_callable=lambda e: [m.value for m in e],
                validate_strings=True,
            ),
            nullable=False,
        ),
    )
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    user: Optional["User"] = Relationship(back_populates="notifications")

    @property
    def is_broadcast(self) -> bool:
        return self.user_id is None
