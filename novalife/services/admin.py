import hmac
import logging
from functools import lru_cache
from typing import Optional, Tuple

from novalife.core.config import settings
from novalife.core.errors import InvalidCredentialsError, WeakPasswordError
from novalife.core.ids import utc_now_iso
from novalife.core.security import create_access_token, get_password_hash, verify_password
from novalife.models.admin import AdminAccount, AdminProfile
from novalife.services.repository import SingletonRepository
from novalife.storage.store import BlobStore, DataKey

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@lru_cache(maxsize=1)
def _seed_password_hash() -> str:
    return get_password_hash(settings.ADMIN_PASSWORD)


def default_admin_account() -> dict:
    return {
        "username": settings.ADMIN_USERNAME,
        "passwordHash": _seed_password_hash(),
        "email": settings.ADMIN_EMAIL,
        "name": settings.ADMIN_NAME,
        "lastLoginAt": None,
    }


def to_profile(account: AdminAccount) -> AdminProfile:
    return AdminProfile(**account.model_dump(exclude={"passwordHash"}))


class AdminService:
    """The single admin account stored in admin.json."""

    def __init__(self, store: BlobStore):
        self.repo = SingletonRepository(store, DataKey.ADMIN, AdminAccount, default_admin_account)

    def account(self) -> AdminAccount:
        return self.repo.get()

    def profile(self) -> AdminProfile:
        return to_profile(self.account())

    def authenticate(self, username: Optional[str], password: Optional[str]) -> AdminAccount:
        account = self.account()
        username_ok = hmac.compare_digest(account.username.encode(), (username or "").encode())
        # Always verify the password so timing does not reveal a valid username
        password_ok = verify_password(password or "", account.passwordHash)
        if not (username_ok and password_ok):
            raise InvalidCredentialsError()
        return account

    def login(self, username: Optional[str], password: Optional[str]) -> Tuple[AdminProfile, str]:
        account = self.authenticate(username, password)
        account.lastLoginAt = utc_now_iso()
        self.repo.save(account)

        token = create_access_token(
            data={"sub": account.username, "email": account.email, "name": account.name, "role": "admin"}
        )
        logger.info("Admin %s logged in", account.username)
        return to_profile(account), token

    def change_password(self, current_password: Optional[str], new_password: Optional[str]) -> None:
        account = self.account()
        if not verify_password(current_password or "", account.passwordHash):
            raise InvalidCredentialsError("Current password is incorrect", status_code=400)
        if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            raise WeakPasswordError(f"New password must be at least {MIN_PASSWORD_LENGTH} characters")

        account.passwordHash = get_password_hash(new_password)
        self.repo.save(account)
        logger.info("Admin password changed")

    def update_profile(self, username: Optional[str] = None, email: Optional[str] = None, name: Optional[str] = None) -> AdminProfile:
        account = self.account()
        if username:
            account.username = username
        if email:
            account.email = email
        if name:
            account.name = name
        self.repo.save(account)
        logger.info("Admin profile updated")
        return to_profile(account)
