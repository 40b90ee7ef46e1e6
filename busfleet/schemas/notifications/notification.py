# busfleet/schemas/notifications/notification.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from ...db.models.notifications.notification import NotificationType


class NotificationBase(BaseModel):
    message: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.GENERAL


class NotificationCreate(NotificationBase):
    """Admin request body. Omitting ``user`` creates a broadcast."""
    user: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None


class NotificationResponse(NotificationBase):
    id: int
    user: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime


class DelayReportRequest(BaseModel):
    busId: str = Field(..., min_length=1)
    delayMinutes: int = Field(..., ge=0)
    reason: str = Field(..., min_length=1)


class DelayReportResponse(BaseModel):
    success: bool = True
    sent: int
    notification: NotificationResponse
