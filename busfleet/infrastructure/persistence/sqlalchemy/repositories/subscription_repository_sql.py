from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import PushSubscription
from .....application.ports.subscription_repo import SubscriptionRepository, SubscriptionDto


class SqlSubscriptionRepository(SubscriptionRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, s: PushSubscription) -> SubscriptionDto:
        return SubscriptionDto(
            user_id=s.user_id,
            endpoint=s.endpoint,
            p256dh=s.p256dh,
            auth=s.auth,
            expiration_time=s.expiration_time,
        )

    def _get(self, user_id: str) -> Optional[PushSubscription]:
        return self.session.exec(select(PushSubscription).where(PushSubscription.user_id == user_id)).first()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def _save(self, row: PushSubscription, subscription: SubscriptionDto) -> PushSubscription:
        row.endpoint = subscription.endpoint
        row.p256dh = subscription.p256dh
        row.auth = subscription.auth
        row.expiration_time = subscription.expiration_time
        row.updated_at = datetime.now(timezone.utc)
        self.session.add(row)
        self._commit()
        return row

    def upsert(self, subscription: SubscriptionDto) -> SubscriptionDto:
        row = self._get(subscription.user_id)
        try:
            row = self._save(row or PushSubscription(user_id=subscription.user_id), subscription)
        except IntegrityError:
            # A concurrent subscribe inserted this user's row after our read
            row = self._get(subscription.user_id)
            if row is None:
                raise
            row = self._save(row, subscription)
        self.session.refresh(row)
        return self._to_dto(row)

    def get_for_user(self, user_id: str) -> Optional[SubscriptionDto]:
        row = self._get(user_id)
        return self._to_dto(row) if row else None

    def list_all(self) -> List[SubscriptionDto]:
        return [self._to_dto(r) for r in self.session.exec(select(PushSubscription)).all()]

    def delete_for_user(self, user_id: str) -> None:
        row = self._get(user_id)
        if not row:
            return
        self.session.delete(row)
        self._commit()
