# busfleet/schemas/push/push.py
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class PushKeys(BaseModel):
    p256dh: str
    auth: str


class PushSubscriptionPayload(BaseModel):
    """Browser ``PushSubscription.toJSON()`` shape."""
    endpoint: str = Field(..., min_length=1)
    expirationTime: Optional[float] = None
    keys: PushKeys


class SubscribeRequest(BaseModel):
    userId: str = Field(..., min_length=1)
    subscription: PushSubscriptionPayload


class PushMessageData(BaseModel):
    url: Optional[str] = None

    model_config = {"extra": "allow"}


class PushMessage(BaseModel):
    """Payload delivered to the background delivery agent."""
    title: str
    body: Optional[str] = None
    icon: Optional[str] = None
    data: Optional[PushMessageData] = None

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
