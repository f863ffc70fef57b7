import logging
import math
from typing import Iterable, List, Optional

from slugify import slugify

from novalife.core.errors import NotFoundError
from novalife.core.ids import new_id, parse_iso, utc_now_iso
from novalife.models.post import DEFAULT_FEATURED_IMAGE, Post, PostCreate, PostStatus, PostUpdate
from novalife.services.repository import CollectionRepository, set_fields
from novalife.storage.store import BlobStore, DataKey

logger = logging.getLogger(__name__)

CHARS_PER_MINUTE = 500


def reading_time(content: str) -> int:
    return math.ceil(len(content or "") / CHARS_PER_MINUTE)


def generate_slug(title: str) -> str:
    return slugify(title or "", allow_unicode=True)


def unique_slug(base: str, taken: Iterable[str]) -> str:
    taken = set(taken)
    slug = base
    suffix = 2
    while slug in taken:
        slug = f"{base}-{suffix}"
        suffix += 1
    return slug


def sort_by_published(posts: List[Post]) -> List[Post]:
    """Newest first; posts that were never published keep their order at the end."""
    dated, undated = [], []
    for post in posts:
        published_at = None
        if post.publishedAt:
            try:
                published_at = parse_iso(post.publishedAt)
            except ValueError:
                logger.warning("Post %s has an unreadable publishedAt %r", post.id, post.publishedAt)
        if published_at is None:
            undated.append(post)
        else:
            dated.append((published_at, post))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [post for _, post in dated] + undated


class PostService:
    def __init__(self, store: BlobStore):
        self.repo = CollectionRepository(store, DataKey.POSTS, Post, label="Post")

    def list_posts(self, category: Optional[str] = None, status: Optional[str] = None, limit: Optional[int] = None) -> List[Post]:
        posts = self.repo.list()
        if category:
            posts = [p for p in posts if p.category == category]
        if status:
            posts = [p for p in posts if p.status == status]
        posts = sort_by_published(posts)
        if limit is not None:
            posts = posts[:max(limit, 0)]
        return posts

    def get_by_slug(self, slug: str) -> Post:
        post = next((p for p in self.repo.list() if p.slug == slug), None)
        if not post:
            raise NotFoundError("Post not found")
        return post

    def related(self, slug: str, limit: int = 3) -> List[Post]:
        """Other published posts in the same category."""
        post = self.get_by_slug(slug)
        related = [
            p for p in self.repo.list()
            if p.category == post.category and p.status == PostStatus.PUBLISHED and p.id != post.id
        ]
        return related[:max(limit, 0)]

    def create(self, data: PostCreate) -> Post:
        existing = self.repo.list()
        title = data.title or "无标题"
        post_id = new_id()
        slug = unique_slug(generate_slug(title) or post_id, (p.slug for p in existing))

        post = {
            "id": post_id,
            "title": title,
            "content": data.content,
            "excerpt": data.excerpt,
            "category": data.category.value,
            "status": data.status.value,
            "publishedAt": utc_now_iso() if data.status == PostStatus.PUBLISHED else None,
            "slug": slug,
            "featuredImage": data.featuredImage or DEFAULT_FEATURED_IMAGE,
            "tags": data.tags,
            "readingTime": reading_time(data.content),
        }
        created = next(p for p in self.repo.append(post) if p.id == post_id)
        logger.info("Created post %s (%s)", created.id, created.slug)
        return created

    def update(self, data: PostUpdate) -> Post:
        current = self.repo.get(data.id)
        if not current:
            raise NotFoundError("Post not found")

        partial = set_fields(data, exclude={"id"})
        if "content" in partial and "readingTime" not in partial:
            partial["readingTime"] = reading_time(partial["content"])
        # publishedAt is only ever stamped once
        if partial.get("status") == PostStatus.PUBLISHED.value and not current.publishedAt:
            partial["publishedAt"] = utc_now_iso()

        updated = next(p for p in self.repo.update_by_id(data.id, partial) if p.id == data.id)
        logger.info("Updated post %s", updated.id)
        return updated

    def delete(self, post_id: str) -> None:
        self.repo.remove_by_id(post_id, must_exist=True)
        logger.info("Deleted post %s", post_id)
