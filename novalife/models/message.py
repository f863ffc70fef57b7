from typing import Optional
from enum import Enum
from pydantic import BaseModel

class MessageStatus(str, Enum):
    UNREAD = "unread"
    READ = "read"

class Message(BaseModel):
    id: str
    email: str
    content: str
    receivedAt: str
    status: MessageStatus = MessageStatus.UNREAD

class MessageCreate(BaseModel):
    email: Optional[str] = None
    content: Optional[str] = None

class MessageStatusUpdate(BaseModel):
    id: str
    status: MessageStatus = MessageStatus.READ
