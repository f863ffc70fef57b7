from novalife.models.post import Post, PostCategory, PostStatus, PostCreate, PostUpdate
from novalife.models.about import AboutData, AboutUpdate, TimelineItem, TimelineType, Project
from novalife.models.site_settings import SiteSettings, SiteSettingsUpdate, TextAlign
from novalife.models.message import Message, MessageStatus
from novalife.models.subscriber import Subscriber, SubscriberStatus
from novalife.models.contact import Contact, ContactType
from novalife.models.admin import AdminAccount, AdminProfile

__all__ = [
    "Post",
    "PostCategory",
    "PostStatus",
    "PostCreate",
    "PostUpdate",
    "AboutData",
    "AboutUpdate",
    "TimelineItem",
    "TimelineType",
    "Project",
    "SiteSettings",
    "SiteSettingsUpdate",
    "TextAlign",
    "Message",
    "MessageStatus",
    "Subscriber",
    "SubscriberStatus",
    "Contact",
    "ContactType",
    "AdminAccount",
    "AdminProfile",
]
