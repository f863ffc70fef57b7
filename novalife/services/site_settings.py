import logging

from novalife.models.site_settings import DEFAULT_SITE_SETTINGS, SiteSettings, SiteSettingsUpdate
from novalife.services.repository import SingletonRepository, set_fields
from novalife.storage.store import BlobStore, DataKey

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, store: BlobStore):
        self.repo = SingletonRepository(store, DataKey.SETTINGS, SiteSettings, lambda: DEFAULT_SITE_SETTINGS)

    def get(self) -> SiteSettings:
        return self.repo.get()

    def update(self, data: SiteSettingsUpdate) -> SiteSettings:
        partial = set_fields(data)
        settings = self.repo.replace(partial)
        logger.info("Updated site settings: %s", ", ".join(sorted(partial)) or "none")
        return settings
