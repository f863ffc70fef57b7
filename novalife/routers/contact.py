from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from novalife.core.errors import ValidationError
from novalife.models.contact import ContactCreate
from novalife.routers.auth import get_current_admin
from novalife.services.contacts import ContactService
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

def get_contact_service(store: BlobStore = Depends(get_store)) -> ContactService:
    return ContactService(store)

@router.get("")
def read_contacts(
    admin: dict = Depends(get_current_admin),
    service: ContactService = Depends(get_contact_service)
):
    return {"contacts": service.list()}

@router.post("", status_code=status.HTTP_201_CREATED)
def submit_contact(data: ContactCreate, service: ContactService = Depends(get_contact_service)):
    contact = service.create(data.contact, data.type)
    return {"success": True, "message": "Contact details submitted", "data": contact}

@router.delete("")
def delete_contact(
    contact_id: Optional[str] = Query(None, alias="id"),
    admin: dict = Depends(get_current_admin),
    service: ContactService = Depends(get_contact_service)
):
    if not contact_id:
        raise ValidationError("Missing contact id")
    service.delete(contact_id)
    return {"message": "Contact deleted"}
