import pytest

from novalife.core.errors import NotFoundError
from novalife.models.post import DEFAULT_FEATURED_IMAGE, PostCreate, PostUpdate
from novalife.services.posts import PostService, generate_slug, reading_time, unique_slug
from novalife.storage.store import DataKey


@pytest.fixture
def service(store):
    return PostService(store)


def stored_post(post_id, published_at, category="ai", status="published"):
    return {
        "id": post_id,
        "title": f"Post {post_id}",
        "content": "",
        "excerpt": "",
        "category": category,
        "status": status,
        "publishedAt": published_at,
        "slug": f"post-{post_id}",
        "featuredImage": DEFAULT_FEATURED_IMAGE,
        "tags": [],
        "readingTime": 0,
    }


def test_reading_time_rounds_up_per_500_chars():
    assert reading_time("") == 0
    assert reading_time("a") == 1
    assert reading_time("a" * 500) == 1
    assert reading_time("a" * 501) == 2


def test_slugs():
    assert generate_slug("Hello World!") == "hello-world"
    assert generate_slug("你好 世界") == "你好-世界"
    assert unique_slug("hello", ["hello", "hello-2"]) == "hello-3"
    assert unique_slug("fresh", ["hello"]) == "fresh"


def test_create_published_post_stamps_published_at(service):
    post = service.create(PostCreate(title="Hello World", content="x" * 1200, status="published", category="nova"))

    assert post.publishedAt is not None
    assert post.publishedAt.endswith("Z")
    assert post.slug == "hello-world"
    assert post.readingTime == 3
    assert post.featuredImage == DEFAULT_FEATURED_IMAGE


def test_create_draft_has_no_published_at(service):
    post = service.create(PostCreate(title="Draft"))
    assert post.status == "draft"
    assert post.publishedAt is None


def test_duplicate_titles_get_distinct_slugs(service):
    first = service.create(PostCreate(title="Same"))
    second = service.create(PostCreate(title="Same"))
    assert first.slug == "same"
    assert second.slug == "same-2"
    assert first.id != second.id


def test_cover_image_is_accepted_as_featured_image(service):
    post = service.create(PostCreate.model_validate({"title": "Pic", "coverImage": "/uploads/1-a.png"}))
    assert post.featuredImage == "/uploads/1-a.png"


def test_republishing_keeps_original_published_at(service):
    post = service.create(PostCreate(title="Once", status="published"))

    updated = service.update(PostUpdate(id=post.id, title="Once more", status="published"))

    assert updated.title == "Once more"
    assert updated.publishedAt == post.publishedAt


def test_draft_to_published_stamps_once(service):
    post = service.create(PostCreate(title="Later"))

    published = service.update(PostUpdate(id=post.id, status="published"))
    assert published.publishedAt is not None

    unpublished = service.update(PostUpdate(id=post.id, status="draft"))
    assert unpublished.publishedAt == published.publishedAt

    republished = service.update(PostUpdate(id=post.id, status="published"))
    assert republished.publishedAt == published.publishedAt


def test_update_recomputes_reading_time(service):
    post = service.create(PostCreate(title="Grow", content="short"))
    updated = service.update(PostUpdate(id=post.id, content="y" * 1001))
    assert updated.readingTime == 3


def test_update_missing_post_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.update(PostUpdate(id="missing", title="x"))


def test_list_sorts_newest_first_with_unpublished_last(service, store):
    store.write(DataKey.POSTS, [
        stored_post("old", "2024-01-01T00:00:00.000Z"),
        stored_post("draft", None, status="draft"),
        stored_post("new", "2025-06-01T00:00:00.000Z"),
        stored_post("mid", "2024-12-31T23:59:59.000Z", category="life"),
    ])

    assert [p.id for p in service.list_posts()] == ["new", "mid", "old", "draft"]
    assert [p.id for p in service.list_posts(category="ai", status="published")] == ["new", "old"]
    assert [p.id for p in service.list_posts(limit=2)] == ["new", "mid"]
    assert service.list_posts(limit=0) == []


def test_get_by_slug(service):
    post = service.create(PostCreate(title="Find Me"))
    assert service.get_by_slug("find-me").id == post.id
    with pytest.raises(NotFoundError):
        service.get_by_slug("nope")


def test_related_posts_share_category_and_are_published(service, store):
    store.write(DataKey.POSTS, [
        stored_post("a", "2025-01-01T00:00:00.000Z"),
        stored_post("b", "2025-01-02T00:00:00.000Z"),
        stored_post("c", None, status="draft"),
        stored_post("d", "2025-01-03T00:00:00.000Z", category="life"),
    ])
    assert [p.id for p in service.related("post-a")] == ["b"]


def test_delete_missing_post_raises_not_found(service):
    post = service.create(PostCreate(title="Bye"))
    service.delete(post.id)
    assert service.list_posts() == []
    with pytest.raises(NotFoundError):
        service.delete(post.id)


def test_public_routes(client, auth_headers):
    created = client.post(
        "/api/posts",
        json={"title": "API Post", "content": "hello", "status": "published"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    post = created.json()["post"]

    listing = client.get("/api/posts", params={"status": "published"})
    assert listing.status_code == 200
    assert listing.headers["cache-control"] == "no-store"
    assert [p["id"] for p in listing.json()["posts"]] == [post["id"]]

    single = client.get("/api/posts", params={"slug": "api-post"})
    assert single.json()["post"]["title"] == "API Post"

    assert client.get("/api/posts", params={"slug": "missing"}).status_code == 404


def test_editing_posts_requires_admin(client):
    assert client.post("/api/posts", json={"title": "Nope"}).status_code == 401
    assert client.put("/api/posts", json={"id": "x"}).status_code == 401
    assert client.delete("/api/posts", params={"id": "x"}).status_code == 401


def test_update_and_delete_routes(client, auth_headers):
    post = client.post("/api/posts", json={"title": "Edit me"}, headers=auth_headers).json()["post"]

    updated = client.put("/api/posts", json={"id": post["id"], "excerpt": "short"}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["post"]["excerpt"] == "short"

    assert client.put("/api/posts", json={"id": "missing"}, headers=auth_headers).status_code == 404
    assert client.delete("/api/posts", headers=auth_headers).status_code == 400
    assert client.delete("/api/posts", params={"id": post["id"]}, headers=auth_headers).status_code == 200
    assert client.delete("/api/posts", params={"id": post["id"]}, headers=auth_headers).status_code == 404


def test_untitled_post_gets_default_title(service):
    post = service.create(PostCreate(content="no title"))
    assert post.title == "无标题"
    assert post.slug == "无标题"


def test_invalid_stored_post_does_not_break_listing(client, store):
    store.write(DataKey.POSTS, [
        {"id": "1", "title": "legacy"},
        stored_post("ok", "2025-01-01T00:00:00.000Z"),
    ])

    response = client.get("/api/posts")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()["posts"]] == ["ok"]
