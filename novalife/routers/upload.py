from typing import Optional
from fastapi import APIRouter, UploadFile, File, Depends, Query
from novalife.core.errors import ValidationError
from novalife.routers.auth import get_current_admin
from novalife.services.upload import UploadService
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

def get_upload_service(store: BlobStore = Depends(get_store)) -> UploadService:
    return UploadService(store)

@router.post("")
async def upload_image(
    file: Optional[UploadFile] = File(None),
    admin: dict = Depends(get_current_admin),
    service: UploadService = Depends(get_upload_service)
):
    """
    Upload an image (JPEG, PNG, GIF or WebP, at most 5MB).
    Returns the URL the image is served from and its stored file name.
    """
    if file is None:
        raise ValidationError("No file found")

    # Reject by declared size before reading the body where possible
    if file.size is not None:
        service.validate(file.content_type, file.size)

    content = await file.read()
    result = service.store_image(file.filename, file.content_type, content)

    return {
        "message": "File uploaded",
        "url": result.url,
        "fileName": result.fileName
    }

@router.delete("")
def delete_image(
    file_name: Optional[str] = Query(None, alias="fileName"),
    admin: dict = Depends(get_current_admin),
    service: UploadService = Depends(get_upload_service)
):
    """Delete a stored upload"""
    service.delete(file_name)
    return {"message": "File deleted"}
