import logging
from typing import List

from novalife.core.errors import ValidationError
from novalife.core.ids import utc_now_iso
from novalife.models.contact import Contact, ContactType
from novalife.services.repository import CollectionRepository
from novalife.storage.store import BlobStore, DataKey

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, store: BlobStore):
        self.repo = CollectionRepository(store, DataKey.CONTACTS, Contact, label="Contact")

    def list(self) -> List[Contact]:
        return self.repo.list()

    def create(self, contact: str, contact_type: ContactType = ContactType.PHONE) -> Contact:
        contact = (contact or "").strip()
        if not contact:
            raise ValidationError("Contact details cannot be empty")

        contacts = self.repo.append({
            "contact": contact,
            "type": contact_type.value,
            "createdAt": utc_now_iso(),
        })
        created = contacts[-1]
        logger.info("New %s contact %s", created.type.value, created.id)
        return created

    def delete(self, contact_id: str) -> None:
        self.repo.remove_by_id(contact_id, must_exist=True)
        logger.info("Deleted contact %s", contact_id)
