from typing import List, Optional, Dict, Any
from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel
from novalife.core.errors import ValidationError
from novalife.models.admin import AdminProfile, AdminSessionRequest, AdminUpdateRequest
from novalife.models.post import PostStatus
from novalife.routers.auth import clear_auth_cookie, get_current_admin, get_token, set_auth_cookie
from novalife.services.admin import AdminService
from novalife.services.contacts import ContactService
from novalife.services.messages import MessageService
from novalife.services.posts import PostService
from novalife.services.subscribers import SubscriberService
from novalife.storage.store import BlobStore, get_store

router = APIRouter()

RECENT_ITEMS = 5

class DashboardStats(BaseModel):
    totalPosts: int
    publishedPosts: int
    draftPosts: int
    totalSubscribers: int
    totalMessages: int
    unreadMessages: int
    totalContacts: int
    recentPosts: List[Dict[str, Any]]
    recentMessages: List[Dict[str, Any]]

def get_admin_service(store: BlobStore = Depends(get_store)) -> AdminService:
    return AdminService(store)

@router.get("", response_model=AdminProfile)
def read_account(
    admin: dict = Depends(get_current_admin),
    service: AdminService = Depends(get_admin_service)
):
    """Get the admin account (without password)"""
    return service.profile()

@router.put("")
def update_account(
    data: AdminUpdateRequest,
    admin: dict = Depends(get_current_admin),
    service: AdminService = Depends(get_admin_service)
):
    """`action` is change-password or update-profile"""
    if data.action == "change-password":
        service.change_password(data.currentPassword, data.newPassword)
        return {"message": "Password changed"}

    if data.action == "update-profile":
        profile = service.update_profile(username=data.username, email=data.email, name=data.name)
        return {"message": "Profile updated", "data": profile}

    raise ValidationError("Invalid action")

@router.post("")
def admin_session(
    data: AdminSessionRequest,
    response: Response,
    token: Optional[str] = Depends(get_token),
    service: AdminService = Depends(get_admin_service)
):
    """`action` is login, logout or verify"""
    if data.action == "login":
        profile, access_token = service.login(data.username, data.password)
        set_auth_cookie(response, access_token)
        return {
            "success": True,
            "message": "Logged in",
            "data": profile,
            "access_token": access_token,
            "token_type": "bearer",
        }

    if data.action == "logout":
        clear_auth_cookie(response)
        return {"success": True, "message": "Logged out"}

    if data.action == "verify":
        payload = get_current_admin(token)
        user = {k: payload.get(k) for k in ("sub", "email", "name", "role")}
        user["username"] = user.pop("sub")
        return {"success": True, "user": user}

    raise ValidationError("Invalid action")

@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard_stats(
    admin: dict = Depends(get_current_admin),
    store: BlobStore = Depends(get_store)
):
    """Counts and recent activity for the console home page"""
    posts = PostService(store).list_posts()
    message_service = MessageService(store)
    messages = message_service.list()
    recent_messages = sorted(messages, key=lambda m: m.receivedAt, reverse=True)[:RECENT_ITEMS]

    return DashboardStats(
        totalPosts=len(posts),
        publishedPosts=sum(1 for p in posts if p.status == PostStatus.PUBLISHED),
        draftPosts=sum(1 for p in posts if p.status == PostStatus.DRAFT),
        totalSubscribers=len(SubscriberService(store).list()),
        totalMessages=len(messages),
        unreadMessages=message_service.unread_count(),
        totalContacts=len(ContactService(store).list()),
        recentPosts=[
            {
                "id": p.id,
                "title": p.title,
                "slug": p.slug,
                "status": p.status.value,
                "publishedAt": p.publishedAt,
            }
            for p in posts[:RECENT_ITEMS]
        ],
        recentMessages=[
            {
                "id": m.id,
                "email": m.email,
                "content": m.content[:100] + "..." if len(m.content) > 100 else m.content,
                "receivedAt": m.receivedAt,
                "status": m.status.value,
            }
            for m in recent_messages
        ],
    )
