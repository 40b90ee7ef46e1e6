from typing import List, Optional
from sqlalchemy import or_
from sqlmodel import Session, select

from .....db.models import NotificationRecord
from .....application.ports.notification_repo import NotificationRepository, NotificationDto


class SqlNotificationRepository(NotificationRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, n: NotificationRecord) -> NotificationDto:
        return NotificationDto(
            id=n.id,
            user_id=n.user_id,
            message=n.message,
            type=getattr(n.type, "value", n.type),
            created_at=n.created_at,
            updated_at=n.updated_at,
        )

    def _visible_to(self, user_id: str):
        return or_(NotificationRecord.user_id == user_id, NotificationRecord.user_id.is_(None))

    def create(self, user_id: Optional[str], message: str, type: str) -> NotificationDto:
        record = NotificationRecord(user_id=user_id, message=message, type=type)
        self.session.add(record)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(record)
        return self._to_dto(record)

    def list_visible(self, user_id: str, limit: int, offset: int) -> List[NotificationDto]:
        rows = self.session.exec(
            select(NotificationRecord)
            .where(self._visible_to(user_id))
            .order_by(NotificationRecord.created_at.desc(), NotificationRecord.id.desc())
            .offset(offset)
            .limit(limit)
        ).all()
        return [self._to_dto(r) for r in rows]

    def get_visible(self, notification_id: int, user_id: str) -> Optional[NotificationDto]:
        record = self.session.exec(
            select(NotificationRecord)
            .where(NotificationRecord.id == notification_id)
            .where(self._visible_to(user_id))
        ).first()
        return self._to_dto(record) if record else None
