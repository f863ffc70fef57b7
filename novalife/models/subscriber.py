from typing import Optional
from enum import Enum
from pydantic import BaseModel

class SubscriberStatus(str, Enum):
    CONFIRMED = "confirmed"
    PENDING = "pending"

class Subscriber(BaseModel):
    id: str
    email: str
    subscribedAt: str
    status: SubscriberStatus = SubscriberStatus.CONFIRMED

class SubscribeRequest(BaseModel):
    email: Optional[str] = None
