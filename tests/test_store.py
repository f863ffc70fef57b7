import json

from novalife.storage.backends import LocalBackend
from novalife.storage.store import BlobStore, DataKey


def test_get_or_init_seeds_and_persists_default(store, local_backend):
    default = {"title": "AInovalife", "tags": ["a"]}

    first = store.get_or_init(DataKey.SETTINGS, default)
    assert first.was_initialized is True
    assert first.value == default
    assert json.loads(local_backend.read_document("settings.json")) == default

    second = store.get_or_init(DataKey.SETTINGS, {"title": "something else"})
    assert second.was_initialized is False
    assert second.value == default


def test_read_returns_a_copy_of_the_default(store):
    default = {"items": []}
    value = store.read("about.json", default)
    value["items"].append(1)
    assert default == {"items": []}


def test_write_then_read_round_trip(store):
    document = [{"id": "1", "title": "你好", "tags": ["x"], "publishedAt": None, "readingTime": 3}]
    store.write(DataKey.POSTS, document)
    assert store.read(DataKey.POSTS, []) == document


def test_written_json_is_pretty_and_keeps_unicode(store, local_backend):
    store.write("settings.json", {"title": "标题"})
    text = local_backend.read_document("settings.json")
    assert "标题" in text
    assert text.startswith("{\n  ")


def test_unreadable_document_degrades_to_default(store, local_backend):
    local_backend.write_document("posts.json", "{not json")
    stored = store.get_or_init(DataKey.POSTS, [])
    assert stored.value == []
    assert stored.was_initialized is False


def test_unserializable_value_is_not_written(store, local_backend):
    store.write("posts.json", {"bad": object()})
    assert local_backend.read_document("posts.json") is None


def test_delete_is_a_noop_for_missing_documents(store, local_backend):
    store.delete("messages.json")
    store.write("messages.json", [])
    store.delete("messages.json")
    assert local_backend.read_document("messages.json") is None


def test_put_and_get_file_preserves_bytes_and_content_type(store):
    data = b"\x89PNG\r\n\x1a\nrest"
    url = store.put_file("123-abc.png", data, "image/png")
    assert url == "/uploads/123-abc.png"

    stored = store.get_file("123-abc.png")
    assert stored.body == data
    assert stored.content_type == "image/png"


def test_content_type_comes_from_upload_metadata_not_extension(store):
    store.put_file("photo.png", b"jpeg bytes", "image/jpeg")
    assert store.get_file("photo.png").content_type == "image/jpeg"


def test_content_type_falls_back_to_extension(tmp_path):
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    (upload_dir / "legacy.webp").write_bytes(b"webp")
    store = BlobStore(primary=None, fallback=LocalBackend(tmp_path / "data", upload_dir))
    assert store.get_file("legacy.webp").content_type == "image/webp"


def test_get_file_missing_returns_none(store):
    assert store.get_file("nope.png") is None
    assert store.get_file("..") is None


def test_file_names_cannot_escape_upload_dir(store, tmp_path):
    store.put_file("../../evil.png", b"x", "image/png")
    assert not (tmp_path / "evil.png").exists()
    assert store.get_file("evil.png").body == b"x"


def test_delete_file(store):
    store.put_file("gone.gif", b"gif", "image/gif")
    assert store.delete_file("gone.gif") is True
    assert store.get_file("gone.gif") is None
    assert store.delete_file("gone.gif") is False
