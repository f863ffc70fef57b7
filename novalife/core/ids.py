import random
import string
import time
import uuid
from datetime import datetime, timezone

BASE36 = string.digits + string.ascii_lowercase


def new_id() -> str:
    return uuid.uuid4().hex


def now_millis() -> int:
    return int(time.time() * 1000)


def utc_now_iso() -> str:
    """Current UTC time as ``2025-08-01T10:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def parse_iso(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def random_base36(length: int = 9) -> str:
    return "".join(random.choices(BASE36, k=length))
