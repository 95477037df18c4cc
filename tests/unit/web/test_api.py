"""Tests for the HTTP API and its error mapping."""

import inspect

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from noteboard.app import App
from noteboard.web.server import create_fastapi_app

OWNER = {"X-Actor-Id": "1"}
FRIEND = {"X-Actor-Id": "2"}
STRANGER = {"X-Actor-Id": "10"}


@pytest.fixture
def client(config):
    with TestClient(create_fastapi_app(App(config), config)) as client:
        yield client


def create_note(client: TestClient, title: str = "Note", text: str = "Body") -> int:
    response = client.post("/api/v1/notes", json={"title": title, "text": text}, headers=OWNER)
    assert response.status_code == 201
    return response.json()["id"]


def create_comment(client: TestClient, note_id: int, message: str = "Hello", headers=FRIEND) -> int:
    response = client.post(f"/api/v1/notes/{note_id}/comments", json={"message": message}, headers=headers)
    assert response.status_code == 201
    return response.json()["id"]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


class TestActorHeader:
    """Tests for identifying the acting user."""

    def test_missing_header_returns_401(self, client):
        response = client.post("/api/v1/notes", json={"title": "T", "text": "B"})
        assert response.status_code == 401
        assert response.json()["type"] == "authentication_error"

    def test_non_numeric_header_returns_401(self, client):
        response = client.post("/api/v1/notes", json={"title": "T", "text": "B"}, headers={"X-Actor-Id": "abc"})
        assert response.status_code == 401


class TestNotesApi:
    """Tests for note endpoints."""

    def test_create_and_get_note(self, client):
        note_id = create_note(client, "Title", "Text")

        response = client.get(f"/api/v1/users/1/notes/{note_id}", headers=STRANGER)
        assert response.status_code == 200
        assert response.json() == {
            "id": note_id,
            "owner_id": 1,
            "title": "Title",
            "text": "Text",
            "privacy": 0,
            "comment_privacy": 0,
            "can_comment": 1,
        }

    def test_privacy_update_changes_can_comment(self, client):
        note_id = create_note(client)
        response = client.patch(f"/api/v1/notes/{note_id}/privacy", json={"comment_privacy": 1})
        assert response.status_code == 200
        assert response.json()["comment_privacy"] == 1

        assert client.get(f"/api/v1/users/1/notes/{note_id}", headers=FRIEND).json()["can_comment"] == 1
        assert client.get(f"/api/v1/users/1/notes/{note_id}", headers=STRANGER).json()["can_comment"] == 0

    def test_edit_and_delete(self, client):
        note_id = create_note(client)

        response = client.put(f"/api/v1/notes/{note_id}", json={"title": "New", "text": "Text"}, headers=OWNER)
        assert response.status_code == 200
        assert response.json()["title"] == "New"

        assert client.delete(f"/api/v1/notes/{note_id}", headers=OWNER).status_code == 204
        assert client.delete(f"/api/v1/notes/{note_id}", headers=OWNER).status_code == 204

        response = client.put(f"/api/v1/notes/{note_id}", json={"title": "Again", "text": "Text"}, headers=OWNER)
        assert response.status_code == 403
        assert response.json()["type"] == "access_denied"

    def test_edit_foreign_note_returns_404(self, client):
        note_id = create_note(client)
        response = client.put(f"/api/v1/notes/{note_id}", json={"title": "X", "text": "Y"}, headers=STRANGER)
        assert response.status_code == 404
        assert response.json()["type"] == "not_found"

    def test_list_notes_with_filters(self, client):
        first = create_note(client, "First")
        second = create_note(client, "Second")
        create_comment(client, first)

        response = client.get("/api/v1/notes", params={"user_id": 1, "sort": 0})
        assert [n["id"] for n in response.json()] == [first, second]

        response = client.get("/api/v1/notes", params={"ids": [second], "count": 5})
        assert [n["id"] for n in response.json()] == [second]

        response = client.get("/api/v1/notes", params={"offset": 5})
        assert response.json() == []


class TestCommentsApi:
    """Tests for comment endpoints."""

    def test_comment_lifecycle(self, client):
        note_id = create_note(client)
        first = create_comment(client, note_id, "First")
        second = create_comment(client, note_id, "Second")

        assert client.delete(f"/api/v1/comments/{first}", headers=FRIEND).status_code == 204
        response = client.get(f"/api/v1/notes/{note_id}/comments")
        assert [c["id"] for c in response.json()] == [second]

        response = client.delete(f"/api/v1/comments/{first}", headers=FRIEND)
        assert response.status_code == 403

        response = client.post(f"/api/v1/comments/{first}/restore", headers=FRIEND)
        assert response.status_code == 200
        assert response.json()["deleted"] is False

        response = client.get(f"/api/v1/notes/{note_id}/comments")
        assert [c["id"] for c in response.json()] == [first, second]

    def test_edit_comment(self, client):
        note_id = create_note(client)
        comment_id = create_comment(client, note_id, "Original")

        response = client.put(f"/api/v1/comments/{comment_id}", json={"owner_id": 1, "message": "Updated"}, headers=FRIEND)
        assert response.status_code == 200
        assert response.json()["message"] == "Updated"
        assert response.json()["owner_id"] == 1
        assert response.json()["user_id"] == 2

    def test_short_message_returns_400(self, client):
        note_id = create_note(client)
        comment_id = create_comment(client, note_id)

        response = client.put(f"/api/v1/comments/{comment_id}", json={"owner_id": 1, "message": "A"}, headers=STRANGER)
        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"

    def test_comment_on_missing_note_returns_404(self, client):
        response = client.post("/api/v1/notes/999/comments", json={"message": "Hello"}, headers=FRIEND)
        assert response.status_code == 404


def test_api_handlers_run_in_threadpool(client):
    # App methods hold a blocking lock, so they must not run on the event loop
    routes = [r for r in client.app.routes if isinstance(r, APIRoute) and r.path.startswith("/api/v1")]
    assert routes
    assert not [r.path for r in routes if inspect.iscoroutinefunction(r.endpoint)]
