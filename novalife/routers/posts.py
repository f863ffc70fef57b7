from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from novalife.core.errors import ValidationError
from novalife.models.post import PostCreate, PostUpdate
from novalife.routers.auth import get_current_admin
from novalife.services.posts import PostService
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

def get_post_service(store: BlobStore = Depends(get_store)) -> PostService:
    return PostService(store)

@router.get("")
def read_posts(
    slug: Optional[str] = None,
    category: Optional[str] = None,
    post_status: Optional[str] = Query(None, alias="status"),
    limit: Optional[int] = Query(None, ge=0),
    service: PostService = Depends(get_post_service)
):
    """
    List posts, newest published first.
    With `slug`, return that single post instead.
    """
    if slug:
        return {"post": service.get_by_slug(slug)}
    return {"posts": service.list_posts(category=category, status=post_status, limit=limit)}

@router.get("/related")
def read_related_posts(
    slug: str,
    limit: int = Query(3, ge=0),
    service: PostService = Depends(get_post_service)
):
    return {"posts": service.related(slug, limit=limit)}

@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    data: PostCreate,
    admin: dict = Depends(get_current_admin),
    service: PostService = Depends(get_post_service)
):
    return {"message": "Post created", "post": service.create(data)}

@router.put("")
def update_post(
    data: PostUpdate,
    admin: dict = Depends(get_current_admin),
    service: PostService = Depends(get_post_service)
):
    return {"message": "Post updated", "post": service.update(data)}

@router.delete("")
def delete_post(
    post_id: Optional[str] = Query(None, alias="id"),
    admin: dict = Depends(get_current_admin),
    service: PostService = Depends(get_post_service)
):
    if not post_id:
        raise ValidationError("Missing post id")
    service.delete(post_id)
    return {"message": "Post deleted"}
