from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session
import logging

from ..config import settings
from ..persistence.database import get_session
from ..auth import get_current_user, require_roles
from ..db.models import NotificationType, UserRole
from ..schemas import (
    CurrentUser,
    DelayReportRequest,
    DelayReportResponse,
    ErrorResponse,
    MessageResponse,
    NotificationCreate,
    NotificationResponse,
    PushMessage,
    PushMessageData,
    SubscribeRequest,
)
from ..application.ports.notification_repo import NotificationDto
from ..application.ports.push_sender import PushSender
from ..application.services.notification_service import NotificationService
from ..application.services.push_service import PushService
from ..infrastructure.persistence.sqlalchemy.repositories.notification_repository_sql import SqlNotificationRepository
from ..infrastructure.persistence.sqlalchemy.repositories.subscription_repository_sql import SqlSubscriptionRepository
from ..infrastructure.push.webpush_sender import WebPushSender

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)

DEFAULT_TITLES = {
    NotificationType.DELAY: "Bus Delay Alert",
    NotificationType.ROUTE_CHANGE: "Route Change",
    NotificationType.GENERAL: "Bus Alert",
}


def get_push_sender() -> PushSender:
    return WebPushSender(settings.VAPID_PRIVATE_KEY, settings.VAPID_SUBJECT)


def get_push_service(session: Session = Depends(get_session), sender: PushSender = Depends(get_push_sender)) -> PushService:
    return PushService(subscriptions=SqlSubscriptionRepository(session), sender=sender, default_icon=settings.DEFAULT_ICON)


def get_notification_service(session: Session = Depends(get_session)) -> NotificationService:
    return NotificationService(repo=SqlNotificationRepository(session))


def _to_response(n: NotificationDto) -> NotificationResponse:
    return NotificationResponse(
        id=n.id,
        user=n.user_id,
        message=n.message,
        type=n.type,
        createdAt=n.created_at,
        updatedAt=n.updated_at,
    )


@router.post("/subscribe", response_model=MessageResponse, status_code=201)
def subscribe(body: SubscribeRequest, push: PushService = Depends(get_push_service)):
    try:
        push.save_subscription(
            user_id=body.userId,
            endpoint=body.subscription.endpoint,
            p256dh=body.subscription.keys.p256dh,
            auth=body.subscription.keys.auth,
            expiration_time=body.subscription.expirationTime,
        )
    except Exception as e:
        logger.error(f"Error saving push subscription for user {body.userId}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to save push subscription")
    return MessageResponse(message="Subscribed to push notifications")


@router.get("", response_model=List[NotificationResponse])
def list_notifications(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: CurrentUser = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
):
    return [_to_response(n) for n in service.list_visible(current_user.id, limit=limit, offset=offset)]


@router.get("/{notification_id}", response_model=NotificationResponse)
def get_notification(
    notification_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
):
    return _to_response(service.get_visible(current_user.id, notification_id))


@router.post("", response_model=NotificationResponse, status_code=201)
def create_notification(
    body: NotificationCreate,
    current_user: CurrentUser = Depends(require_roles(UserRole.ADMIN)),
    service: NotificationService = Depends(get_notification_service),
    push: PushService = Depends(get_push_service),
):
    record = service.create(body.message, body.type, body.user)
    payload = PushMessage(
        title=body.title or DEFAULT_TITLES[body.type],
        body=body.message,
        icon=settings.DEFAULT_ICON,
        data=PushMessageData(url=body.url or "/"),
    ).to_wire()
    try:
        if body.user:
            push.send_push_to_user(body.user, payload)
        else:
            push.broadcast(payload)
    except Exception as e:
        # The record is already stored; push is best effort
        logger.error(f"Push dispatch failed for notification {record.id}: {str(e)}")
    return _to_response(record)


@router.post("/delay", response_model=DelayReportResponse)
def report_delay(
    body: DelayReportRequest,
    current_user: CurrentUser = Depends(require_roles(UserRole.ADMIN, UserRole.DRIVER)),
    service: NotificationService = Depends(get_notification_service),
    push: PushService = Depends(get_push_service),
):
    message = f"Bus {body.busId} is delayed by {body.delayMinutes} minutes: {body.reason}"
    record = service.create(message, NotificationType.DELAY)
    try:
        sent = push.send_delay_notification(body.busId, body.delayMinutes, body.reason)
    except Exception as e:
        logger.error(f"Delay push failed for bus {body.busId}: {str(e)}")
        sent = 0
    return DelayReportResponse(sent=sent, notification=_to_response(record))
