from fastapi import APIRouter, Depends
from novalife.models.site_settings import SiteSettings, SiteSettingsUpdate
from novalife.routers.auth import get_current_admin
from novalife.services.site_settings import SettingsService
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

def get_settings_service(store: BlobStore = Depends(get_store)) -> SettingsService:
    return SettingsService(store)

@router.get("", response_model=SiteSettings)
def read_settings(service: SettingsService = Depends(get_settings_service)):
    return service.get()

@router.post("")
def update_settings(
    data: SiteSettingsUpdate,
    admin: dict = Depends(get_current_admin),
    service: SettingsService = Depends(get_settings_service)
):
    return {"message": "Settings saved", "settings": service.update(data)}
