import logging
from typing import List

from novalife.core.errors import DuplicateEmailError, ValidationError
from novalife.core.ids import utc_now_iso
from novalife.models.subscriber import Subscriber, SubscriberStatus
from novalife.services.repository import CollectionRepository
from novalife.storage.store import BlobStore, DataKey

logger = logging.getLogger(__name__)


class SubscriberService:
    def __init__(self, store: BlobStore):
        self.repo = CollectionRepository(store, DataKey.SUBSCRIBERS, Subscriber, label="Subscriber")

    def list(self) -> List[Subscriber]:
        return self.repo.list()

    def subscribe(self, email: str) -> Subscriber:
        if not email or "@" not in email:
            raise ValidationError("Please enter a valid email address")
        if any(s.email == email for s in self.repo.list()):
            raise DuplicateEmailError()

        # No confirmation mail is sent, subscribers are confirmed straight away
        subscribers = self.repo.append({
            "email": email,
            "subscribedAt": utc_now_iso(),
            "status": SubscriberStatus.CONFIRMED.value,
        })
        subscriber = subscribers[-1]
        logger.info("New subscriber %s", subscriber.id)
        return subscriber

    def delete(self, subscriber_id: str) -> None:
        self.repo.remove_by_id(subscriber_id, must_exist=True)
        logger.info("Deleted subscriber %s", subscriber_id)
