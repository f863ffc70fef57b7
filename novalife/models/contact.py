from typing import Optional
from enum import Enum
from pydantic import BaseModel

class ContactType(str, Enum):
    EMAIL = "email"
    WECHAT = "wechat"
    PHONE = "phone"

class Contact(BaseModel):
    id: str
    contact: str
    type: ContactType = ContactType.PHONE
    createdAt: str

class ContactCreate(BaseModel):
    contact: Optional[str] = None
    type: ContactType = ContactType.PHONE
