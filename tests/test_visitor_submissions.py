import pytest

from novalife.core.errors import DuplicateEmailError, NotFoundError, ValidationError
from novalife.models.contact import ContactType
from novalife.models.message import MessageStatus
from novalife.services.contacts import ContactService
from novalife.services.messages import MessageService
from novalife.services.subscribers import SubscriberService


# Messages

def test_message_is_stored_unread_and_trimmed(store):
    service = MessageService(store)
    message = service.create("reader@example.com", "   Great post, thanks!   ")

    assert message.status == MessageStatus.UNREAD
    assert message.content == "Great post, thanks!"
    assert message.receivedAt.endswith("Z")
    assert service.unread_count() == 1


@pytest.mark.parametrize("email,content", [
    ("not-an-email", "long enough message"),
    ("", "long enough message"),
    ("reader@example.com", "too short"),
    ("reader@example.com", "          short     "),
])
def test_invalid_messages_are_rejected(store, email, content):
    service = MessageService(store)
    with pytest.raises(ValidationError):
        service.create(email, content)
    assert service.list() == []


def test_mark_and_delete_message(store):
    service = MessageService(store)
    message = service.create("reader@example.com", "Please write more about AI")

    assert service.mark(message.id, MessageStatus.READ).status == MessageStatus.READ
    assert service.unread_count() == 0

    service.delete(message.id)
    with pytest.raises(NotFoundError):
        service.delete(message.id)
    with pytest.raises(NotFoundError):
        service.mark(message.id, MessageStatus.READ)


def test_message_routes(client, auth_headers):
    response = client.post("/api/messages", json={"email": "a@b.com", "content": "Hello from a reader"})
    assert response.status_code == 200
    assert client.post("/api/messages", json={"email": "a@b.com", "content": "hi"}).status_code == 400

    assert client.get("/api/messages").status_code == 401
    messages = client.get("/api/messages", headers=auth_headers).json()["messages"]
    assert len(messages) == 1

    response = client.put("/api/messages", json={"id": messages[0]["id"]}, headers=auth_headers)
    assert response.json()["data"]["status"] == "read"

    assert client.delete("/api/messages", params={"id": messages[0]["id"]}, headers=auth_headers).status_code == 200
    assert client.delete("/api/messages", params={"id": messages[0]["id"]}, headers=auth_headers).status_code == 404


# Subscribers

def test_subscribe_confirms_immediately(store):
    subscriber = SubscriberService(store).subscribe("fan@example.com")
    assert subscriber.status == "confirmed"
    assert subscriber.id


def test_duplicate_subscription_is_rejected(store):
    service = SubscriberService(store)
    service.subscribe("fan@example.com")

    with pytest.raises(DuplicateEmailError):
        service.subscribe("fan@example.com")
    assert len(service.list()) == 1


def test_invalid_subscription_email(store):
    with pytest.raises(ValidationError):
        SubscriberService(store).subscribe("nope")


def test_subscribe_routes(client, auth_headers):
    assert client.post("/api/subscribe", json={"email": "fan@example.com"}).status_code == 200
    duplicate = client.post("/api/subscribe", json={"email": "fan@example.com"})
    assert duplicate.status_code == 400

    subscribers = client.get("/api/subscribe", headers=auth_headers).json()["subscribers"]
    assert [s["email"] for s in subscribers] == ["fan@example.com"]

    assert client.delete("/api/subscribe", params={"id": subscribers[0]["id"]}, headers=auth_headers).status_code == 200
    assert client.delete("/api/subscribe", params={"id": "missing"}, headers=auth_headers).status_code == 404


# Contacts

def test_contact_defaults_to_phone(store):
    contact = ContactService(store).create("  13800000000 ")
    assert contact.contact == "13800000000"
    assert contact.type == ContactType.PHONE


def test_blank_contact_is_rejected(store):
    service = ContactService(store)
    with pytest.raises(ValidationError):
        service.create("   ", ContactType.WECHAT)
    assert service.list() == []


def test_contact_routes(client, auth_headers):
    response = client.post("/api/contact", json={"contact": "my_wechat", "type": "wechat"})
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["type"] == "wechat"

    assert client.post("/api/contact", json={}).status_code == 400
    assert client.get("/api/contact").status_code == 401

    contacts = client.get("/api/contact", headers=auth_headers).json()["contacts"]
    assert len(contacts) == 1
    assert client.delete("/api/contact", params={"id": contacts[0]["id"]}, headers=auth_headers).status_code == 200
    assert client.get("/api/contact", headers=auth_headers).json()["contacts"] == []
