import copy
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from novalife.core.config import settings
from novalife.storage.backends import LocalBackend, R2Backend, StoredFile, safe_name

logger = logging.getLogger(__name__)

# Errors a backend may raise; the store absorbs all of them
BACKEND_ERRORS = (BotoCoreError, ClientError, OSError, ValueError)


class DataKey(str, Enum):
    ABOUT = "about.json"
    POSTS = "posts.json"
    ADMIN = "admin.json"
    SUBSCRIBERS = "subscribers.json"
    CONTACTS = "contacts.json"
    MESSAGES = "messages.json"
    SETTINGS = "settings.json"


@dataclass
class StoredDocument:
    value: Any
    was_initialized: bool


def _key(key) -> str:
    return key.value if isinstance(key, DataKey) else key


def upload_url(name: str) -> str:
    return f"/uploads/{name}"


class BlobStore:
    """
    Named JSON documents and uploaded files.

    Every call goes to the R2 bucket when one is configured and drops to the
    local filesystem if the bucket is missing or failing. Nothing here raises
    to the caller: reads degrade to the default value, writes and deletes are
    logged and dropped.
    """

    def __init__(self, primary: Optional[R2Backend], fallback: LocalBackend):
        self.primary = primary
        self.fallback = fallback

    def get_or_init(self, key, default: Any) -> StoredDocument:
        """
        Load a document, seeding and persisting ``default`` when it is absent.

        ``was_initialized`` is True only when this call created the document.
        """
        key = _key(key)
        if self.primary is not None:
            try:
                text = self.primary.read_document(key)
                if text is None:
                    value = copy.deepcopy(default)
                    self.write(key, value)
                    return StoredDocument(value, True)
                return StoredDocument(json.loads(text), False)
            except BACKEND_ERRORS:
                logger.exception("Failed to read %s from R2, falling back to local storage", key)

        try:
            text = self.fallback.read_document(key)
            if text is None:
                value = copy.deepcopy(default)
                self._write_local(key, value)
                return StoredDocument(value, True)
            return StoredDocument(json.loads(text), False)
        except BACKEND_ERRORS:
            logger.exception("Failed to read %s from local storage, using default", key)
            return StoredDocument(copy.deepcopy(default), False)

    def read(self, key, default: Any) -> Any:
        return self.get_or_init(key, default).value

    def write(self, key, value: Any) -> None:
        key = _key(key)
        try:
            text = serialize(value)
        except (TypeError, ValueError):
            logger.exception("Refusing to write %s: value is not JSON serializable", key)
            return

        if self.primary is not None:
            try:
                self.primary.write_document(key, text)
                logger.info("Saved %s to R2", key)
                return
            except BACKEND_ERRORS:
                logger.exception("Failed to write %s to R2, writing to local storage", key)
        self._write_text_local(key, text)

    def _write_local(self, key: str, value: Any) -> None:
        self._write_text_local(key, serialize(value))

    def _write_text_local(self, key: str, text: str) -> None:
        try:
            self.fallback.write_document(key, text)
            logger.info("Saved %s to local storage", key)
        except BACKEND_ERRORS:
            logger.exception("Failed to write %s to local storage", key)

    def delete(self, key) -> None:
        key = _key(key)
        try:
            if self.primary is not None:
                self.primary.delete_document(key)
            else:
                self.fallback.delete_document(key)
            logger.info("Deleted %s", key)
        except BACKEND_ERRORS:
            logger.exception("Failed to delete %s", key)

    def put_file(self, name: str, data: bytes, content_type: str) -> str:
        """Store raw bytes under the uploads namespace and return their URL."""
        name = safe_name(name)
        if self.primary is not None:
            try:
                self.primary.put_file(name, data, content_type)
                return upload_url(name)
            except BACKEND_ERRORS:
                logger.exception("Failed to upload %s to R2, saving locally", name)
        try:
            self.fallback.put_file(name, data, content_type)
        except BACKEND_ERRORS:
            logger.exception("Failed to save upload %s locally", name)
        return upload_url(name)

    def get_file(self, name: str) -> Optional[StoredFile]:
        """Return the stored file, or None when there is no such file."""
        try:
            name = safe_name(name)
        except ValueError:
            return None
        if self.primary is not None:
            try:
                return self.primary.get_file(name)
            except BACKEND_ERRORS:
                logger.exception("Failed to fetch %s from R2, trying local storage", name)
        try:
            return self.fallback.get_file(name)
        except BACKEND_ERRORS:
            logger.exception("Failed to read upload %s", name)
            return None

    def delete_file(self, name: str) -> bool:
        try:
            name = safe_name(name)
            if self.primary is not None:
                return self.primary.delete_file(name)
            return self.fallback.delete_file(name)
        except BACKEND_ERRORS:
            logger.exception("Failed to delete upload %s", name)
            return False


def serialize(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2)


def create_store() -> BlobStore:
    primary = R2Backend() if settings.R2_ENABLED else None
    return BlobStore(primary=primary, fallback=LocalBackend(settings.DATA_DIR, settings.UPLOAD_DIR))


blob_store = create_store()


def get_store() -> BlobStore:
    return blob_store
