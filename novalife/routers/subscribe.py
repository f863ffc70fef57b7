from typing import Optional
from fastapi import APIRouter, Depends, Query
from novalife.core.errors import ValidationError
from novalife.models.subscriber import SubscribeRequest
from novalife.routers.auth import get_current_admin
from novalife.services.subscribers import SubscriberService
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

def get_subscriber_service(store: BlobStore = Depends(get_store)) -> SubscriberService:
    return SubscriberService(store)

@router.get("")
def read_subscribers(
    admin: dict = Depends(get_current_admin),
    service: SubscriberService = Depends(get_subscriber_service)
):
    return {"subscribers": service.list()}

@router.post("")
def subscribe(data: SubscribeRequest, service: SubscriberService = Depends(get_subscriber_service)):
    service.subscribe(data.email)
    return {"message": "Subscribed, thanks for following along!"}

@router.delete("")
def delete_subscriber(
    subscriber_id: Optional[str] = Query(None, alias="id"),
    admin: dict = Depends(get_current_admin),
    service: SubscriberService = Depends(get_subscriber_service)
):
    if not subscriber_id:
        raise ValidationError("Missing subscriber id")
    service.delete(subscriber_id)
    return {"message": "Subscriber deleted"}
