from typing import List, Optional
from enum import Enum
from pydantic import AliasChoices, BaseModel, Field

DEFAULT_FEATURED_IMAGE = "https://images.unsplash.com/photo-1461749280684-dccba630e2f6?ixlib=rb-4.0.3&auto=format&fit=crop&w=1200&q=80"

class PostCategory(str, Enum):
    AI = "ai"
    NOVA = "nova"
    LIFE = "life"

class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"

class Post(BaseModel):
    id: str
    title: str
    content: str = ""
    excerpt: str = ""
    category: PostCategory = PostCategory.AI
    status: PostStatus = PostStatus.DRAFT
    publishedAt: Optional[str] = None  # set once, on the first publish
    slug: str
    featuredImage: str = DEFAULT_FEATURED_IMAGE
    tags: List[str] = []
    readingTime: int = 0

class PostCreate(BaseModel):
    title: Optional[str] = None
    content: str = ""
    excerpt: str = ""
    category: PostCategory = PostCategory.AI
    status: PostStatus = PostStatus.DRAFT
    # The editor sends the cover image as "coverImage"
    featuredImage: Optional[str] = Field(default=None, validation_alias=AliasChoices("featuredImage", "coverImage"))
    tags: List[str] = []

class PostUpdate(BaseModel):
    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[PostCategory] = None
    status: Optional[PostStatus] = None
    slug: Optional[str] = None
    featuredImage: Optional[str] = Field(default=None, validation_alias=AliasChoices("featuredImage", "coverImage"))
    tags: Optional[List[str]] = None
    readingTime: Optional[int] = None
