import io
import json

import boto3
import pytest
from botocore.response import StreamingBody
from botocore.stub import ANY, Stubber

from novalife.storage.backends import R2Backend
from novalife.storage.store import BlobStore, DataKey

BUCKET = "blog-data"


def streaming_body(data: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(data), len(data))


@pytest.fixture
def s3_client():
    return boto3.client(
        "s3",
        endpoint_url="https://account.r2.cloudflarestorage.com",
        region_name="auto",
        aws_access_key_id="test-key",
        aws_secret_access_key="test-secret",
    )


@pytest.fixture
def stubber(s3_client):
    with Stubber(s3_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def r2_store(s3_client, local_backend):
    return BlobStore(primary=R2Backend(s3_client, BUCKET), fallback=local_backend)


def test_missing_document_is_seeded_into_the_bucket(r2_store, stubber):
    stubber.add_client_error(
        "get_object",
        service_error_code="NoSuchKey",
        http_status_code=404,
        expected_params={"Bucket": BUCKET, "Key": "posts.json"},
    )
    stubber.add_response(
        "put_object",
        {},
        {"Bucket": BUCKET, "Key": "posts.json", "Body": ANY, "ContentType": "application/json"},
    )

    stored = r2_store.get_or_init(DataKey.POSTS, [])

    assert stored.value == []
    assert stored.was_initialized is True


def test_existing_document_is_parsed(r2_store, stubber):
    body = json.dumps({"title": "AInovalife"}).encode("utf-8")
    stubber.add_response(
        "get_object",
        {"Body": streaming_body(body), "ContentType": "application/json"},
        {"Bucket": BUCKET, "Key": "settings.json"},
    )

    stored = r2_store.get_or_init("settings.json", {})

    assert stored.value == {"title": "AInovalife"}
    assert stored.was_initialized is False


def test_failing_bucket_falls_back_to_local_storage(r2_store, stubber, local_backend):
    stubber.add_client_error("get_object", service_error_code="AccessDenied", http_status_code=403)

    stored = r2_store.get_or_init(DataKey.CONTACTS, [])

    assert stored.value == []
    assert stored.was_initialized is True
    assert local_backend.read_document("contacts.json") == "[]"


def test_failed_write_lands_on_local_storage(r2_store, stubber, local_backend):
    stubber.add_client_error("put_object", service_error_code="InternalError", http_status_code=500)

    r2_store.write(DataKey.MESSAGES, [{"id": "1"}])

    assert json.loads(local_backend.read_document("messages.json")) == [{"id": "1"}]


def test_files_live_under_the_uploads_prefix(r2_store, stubber):
    stubber.add_response(
        "put_object",
        {},
        {"Bucket": BUCKET, "Key": "uploads/1-abc.png", "Body": b"png", "ContentType": "image/png"},
    )
    stubber.add_response(
        "get_object",
        {"Body": streaming_body(b"png"), "ContentType": "image/png"},
        {"Bucket": BUCKET, "Key": "uploads/1-abc.png"},
    )

    assert r2_store.put_file("1-abc.png", b"png", "image/png") == "/uploads/1-abc.png"
    stored = r2_store.get_file("1-abc.png")

    assert stored.body == b"png"
    assert stored.content_type == "image/png"


def test_get_missing_file_returns_none(r2_store, stubber):
    stubber.add_client_error("get_object", service_error_code="NoSuchKey", http_status_code=404)

    assert r2_store.get_file("nope.png") is None


def test_delete_file_reports_whether_it_existed(r2_store, stubber):
    key = {"Bucket": BUCKET, "Key": "uploads/old.jpg"}
    stubber.add_response("head_object", {}, key)
    stubber.add_response("delete_object", {}, key)
    stubber.add_client_error("head_object", service_error_code="404", http_status_code=404)

    assert r2_store.delete_file("old.jpg") is True
    assert r2_store.delete_file("old.jpg") is False
