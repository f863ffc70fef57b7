import logging
import mimetypes
import re
from dataclasses import dataclass
from typing import List, Optional

from novalife.core.config import settings
from novalife.core.errors import NotFoundError, TooLargeError, UnsupportedTypeError, ValidationError
from novalife.core.ids import now_millis, random_base36
from novalife.storage.store import BlobStore

logger = logging.getLogger(__name__)

EXTENSIONS_BY_TYPE = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


@dataclass
class UploadResult:
    url: str
    fileName: str


def file_extension(filename: Optional[str], content_type: str) -> str:
    """Extension of the uploaded name, or the usual one for its MIME type."""
    if filename and "." in filename:
        ext = re.sub(r"[^a-z0-9]", "", filename.rsplit(".", 1)[1].lower())
        if ext:
            return ext
    guessed = EXTENSIONS_BY_TYPE.get(content_type) or (mimetypes.guess_extension(content_type) or "").lstrip(".")
    return guessed or "bin"


def generate_file_name(filename: Optional[str], content_type: str) -> str:
    return f"{now_millis()}-{random_base36(9)}.{file_extension(filename, content_type)}"


class UploadService:
    """Validates images and stores them under the uploads namespace."""

    def __init__(self, store: BlobStore, allowed_types: Optional[List[str]] = None, max_bytes: Optional[int] = None):
        self.store = store
        self.allowed_types = allowed_types or settings.ALLOWED_IMAGE_TYPES
        self.max_bytes = max_bytes or settings.UPLOAD_MAX_BYTES

    def validate(self, content_type: Optional[str], size: int) -> None:
        if content_type not in self.allowed_types:
            raise UnsupportedTypeError()
        if size > self.max_bytes:
            raise TooLargeError(f"File too large, images must be under {self.max_bytes // (1024 * 1024)}MB")

    def store_image(self, filename: Optional[str], content_type: Optional[str], content: bytes) -> UploadResult:
        self.validate(content_type, len(content))
        file_name = generate_file_name(filename, content_type)
        url = self.store.put_file(file_name, content, content_type)
        logger.info("Stored upload %s (%d bytes)", file_name, len(content))
        return UploadResult(url=url, fileName=file_name)

    def delete(self, file_name: Optional[str]) -> None:
        if not file_name:
            raise ValidationError("Missing file name")
        if not self.store.delete_file(file_name):
            raise NotFoundError("File not found")
        logger.info("Deleted upload %s", file_name)
