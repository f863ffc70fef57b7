from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from novalife.core.errors import ValidationError
from novalife.models.about import AboutData, AboutUpdate, Project, ProjectIn, TimelineItemIn
from novalife.routers.auth import get_current_admin
from novalife.services.about import AboutService
from novalife.services.repository import validate
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

def get_about_service(store: BlobStore = Depends(get_store)) -> AboutService:
    return AboutService(store)

@router.get("", response_model=AboutData)
def read_about(service: AboutService = Depends(get_about_service)):
    """Get the about page, creating the default one on first access"""
    return service.get()

@router.put("")
def update_about(
    data: AboutUpdate,
    admin: dict = Depends(get_current_admin),
    service: AboutService = Depends(get_about_service)
):
    return {"message": "About page updated", "data": service.update(data)}

@router.post("", status_code=status.HTTP_201_CREATED)
def edit_about_collection(
    action: Optional[str] = None,
    payload: Dict[str, Any] = Body(...),
    admin: dict = Depends(get_current_admin),
    service: AboutService = Depends(get_about_service)
):
    """
    Add or update a timeline item or project.
    `action` is one of add-timeline, update-timeline, add-project, update-project.
    """
    item_id = str(payload.get("id") or "")

    if action == "add-timeline":
        data = service.add_timeline_item(validate(TimelineItemIn, payload))
    elif action == "update-timeline":
        data = service.update_timeline_item(item_id, validate(TimelineItemIn, payload))
    elif action == "add-project":
        data = service.add_project(validate(ProjectIn, payload))
    elif action == "update-project":
        data = service.update_project(item_id, validate(ProjectIn, payload))
    else:
        raise ValidationError("Invalid action")

    return {"message": "Saved", "data": data}

@router.delete("")
def delete_about_item(
    item_type: Optional[str] = Query(None, alias="type"),
    item_id: Optional[str] = Query(None, alias="id"),
    admin: dict = Depends(get_current_admin),
    service: AboutService = Depends(get_about_service)
):
    """Remove a timeline item (type=timeline) or project (type=project)"""
    if not item_type or not item_id:
        raise ValidationError("Missing type or id")

    if item_type == "timeline":
        data = service.remove_timeline_item(item_id)
    elif item_type == "project":
        data = service.remove_project(item_id)
    else:
        raise ValidationError("Invalid type")

    return {"message": "Deleted", "data": data}

@router.get("/projects/{project_id}", response_model=Project)
def read_project(project_id: str, service: AboutService = Depends(get_about_service)):
    return service.get_project(project_id)
