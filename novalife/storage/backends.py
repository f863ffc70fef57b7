import json
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import boto3
from botocore.exceptions import ClientError

from novalife.core.config import settings

UPLOAD_PREFIX = "uploads/"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Used when a local upload has no metadata sidecar
CONTENT_TYPES_BY_EXTENSION = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
}

MISSING_OBJECT_CODES = {"NoSuchKey", "404", "NotFound"}


@dataclass
class StoredFile:
    body: bytes
    content_type: str


def safe_name(name: str) -> str:
    """Reduce a key or file name to its final path component."""
    cleaned = Path(name.replace("\\", "/")).name
    if cleaned in ("", ".", ".."):
        raise ValueError(f"Invalid storage name: {name!r}")
    return cleaned


class R2Backend:
    """Cloudflare R2 bucket accessed through the S3 API."""

    def __init__(self, s3_client=None, bucket_name: Optional[str] = None):
        self.s3_client = s3_client or boto3.client(
            's3',
            endpoint_url=settings.R2_ENDPOINT_URL,
            region_name="auto",
            aws_access_key_id=settings.R2_ACCESS_KEY_ID,
            aws_secret_access_key=settings.R2_SECRET_ACCESS_KEY,
        )
        self.bucket_name = bucket_name or settings.R2_BUCKET

    def _get(self, key: str) -> Optional[StoredFile]:
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in MISSING_OBJECT_CODES:
                return None
            raise
        return StoredFile(
            body=response["Body"].read(),
            content_type=response.get("ContentType") or DEFAULT_CONTENT_TYPE,
        )

    def _put(self, key: str, body: bytes, content_type: str) -> None:
        self.s3_client.put_object(
            Bucket=self.bucket_name,
            Key=key,
            Body=body,
            ContentType=content_type,
        )

    def read_document(self, key: str) -> Optional[str]:
        stored = self._get(key)
        if stored is None:
            return None
        return stored.body.decode("utf-8")

    def write_document(self, key: str, text: str) -> None:
        self._put(key, text.encode("utf-8"), "application/json")

    def delete_document(self, key: str) -> None:
        # S3 delete is idempotent for missing keys
        self.s3_client.delete_object(Bucket=self.bucket_name, Key=key)

    def put_file(self, name: str, data: bytes, content_type: str) -> None:
        self._put(UPLOAD_PREFIX + name, data, content_type)

    def get_file(self, name: str) -> Optional[StoredFile]:
        return self._get(UPLOAD_PREFIX + name)

    def delete_file(self, name: str) -> bool:
        key = UPLOAD_PREFIX + name
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in MISSING_OBJECT_CODES:
                return False
            raise
        self.s3_client.delete_object(Bucket=self.bucket_name, Key=key)
        return True


class LocalBackend:
    """JSON documents and uploads on the local filesystem."""

    def __init__(self, data_dir, upload_dir):
        self.data_dir = Path(data_dir)
        self.upload_dir = Path(upload_dir)

    def _document_path(self, key: str) -> Path:
        return self.data_dir / safe_name(key)

    def _file_path(self, name: str) -> Path:
        return self.upload_dir / safe_name(name)

    def _meta_path(self, name: str) -> Path:
        return self.upload_dir / f".{safe_name(name)}.meta.json"

    def read_document(self, key: str) -> Optional[str]:
        path = self._document_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write_document(self, key: str, text: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._document_path(key).write_text(text, encoding="utf-8")

    def delete_document(self, key: str) -> None:
        self._document_path(key).unlink(missing_ok=True)

    def put_file(self, name: str, data: bytes, content_type: str) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self._file_path(name).write_bytes(data)
        self._meta_path(name).write_text(json.dumps({"contentType": content_type}), encoding="utf-8")

    def get_file(self, name: str) -> Optional[StoredFile]:
        path = self._file_path(name)
        if not path.is_file():
            return None
        return StoredFile(body=path.read_bytes(), content_type=self._content_type(name))

    def delete_file(self, name: str) -> bool:
        path = self._file_path(name)
        if not path.is_file():
            return False
        path.unlink()
        self._meta_path(name).unlink(missing_ok=True)
        return True

    def _content_type(self, name: str) -> str:
        meta_path = self._meta_path(name)
        if meta_path.exists():
            try:
                content_type = json.loads(meta_path.read_text(encoding="utf-8")).get("contentType")
            except ValueError:
                content_type = None
            if content_type:
                return content_type
        ext = Path(name).suffix.lower()
        return CONTENT_TYPES_BY_EXTENSION.get(ext) or mimetypes.guess_type(name)[0] or DEFAULT_CONTENT_TYPE
