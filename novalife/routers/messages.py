from typing import Optional
from fastapi import APIRouter, Depends, Query
from novalife.core.errors import ValidationError
from novalife.models.message import MessageCreate, MessageStatusUpdate
from novalife.routers.auth import get_current_admin
from novalife.services.messages import MessageService
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

def get_message_service(store: BlobStore = Depends(get_store)) -> MessageService:
    return MessageService(store)

@router.get("")
def read_messages(
    admin: dict = Depends(get_current_admin),
    service: MessageService = Depends(get_message_service)
):
    return {"messages": service.list()}

@router.post("")
def leave_message(data: MessageCreate, service: MessageService = Depends(get_message_service)):
    """Visitor message from the contact page"""
    service.create(data.email, data.content)
    return {"message": "Message received, thank you for your feedback!"}

@router.put("")
def mark_message(
    data: MessageStatusUpdate,
    admin: dict = Depends(get_current_admin),
    service: MessageService = Depends(get_message_service)
):
    return {"message": "Message updated", "data": service.mark(data.id, data.status)}

@router.delete("")
def delete_message(
    message_id: Optional[str] = Query(None, alias="id"),
    admin: dict = Depends(get_current_admin),
    service: MessageService = Depends(get_message_service)
):
    if not message_id:
        raise ValidationError("Missing message id")
    service.delete(message_id)
    return {"message": "Message deleted"}
