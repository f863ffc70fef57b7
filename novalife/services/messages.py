import logging
from typing import List

from novalife.core.errors import ValidationError
from novalife.core.ids import utc_now_iso
from novalife.models.message import Message, MessageStatus
from novalife.services.repository import CollectionRepository
from novalife.storage.store import BlobStore, DataKey

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 10


class MessageService:
    def __init__(self, store: BlobStore):
        self.repo = CollectionRepository(store, DataKey.MESSAGES, Message, label="Message")

    def list(self) -> List[Message]:
        return self.repo.list()

    def create(self, email: str, content: str) -> Message:
        if not email or "@" not in email:
            raise ValidationError("Please enter a valid email address")
        content = (content or "").strip()
        if len(content) < MIN_CONTENT_LENGTH:
            raise ValidationError(f"Message must be at least {MIN_CONTENT_LENGTH} characters")

        messages = self.repo.append({
            "email": email,
            "content": content,
            "receivedAt": utc_now_iso(),
            "status": MessageStatus.UNREAD.value,
        })
        message = messages[-1]
        logger.info("Received message %s", message.id)
        return message

    def mark(self, message_id: str, status: MessageStatus) -> Message:
        messages = self.repo.update_by_id(message_id, {"status": status.value})
        return next(m for m in messages if m.id == message_id)

    def delete(self, message_id: str) -> None:
        self.repo.remove_by_id(message_id, must_exist=True)
        logger.info("Deleted message %s", message_id)

    def unread_count(self) -> int:
        return sum(1 for m in self.list() if m.status == MessageStatus.UNREAD)
