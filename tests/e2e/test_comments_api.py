"""End-to-end tests for the comment endpoints."""

import pytest
from fastapi.testclient import TestClient

from discuss.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


def _create(client, post_id=1, parent_id=0, content="Hello"):
    response = client.post(
        f"/posts/{post_id}/comments",
        json={
            "author": "Ada",
            "email": "ada@example.com",
            "content": content,
            "parent_id": parent_id,
        },
        headers={"User-Agent": "pytest"},
    )
    assert response.status_code == 201
    return response.json()


def _publish(client, *comment_ids):
    response = client.put("/comments/status/published", json=list(comment_ids))
    assert response.status_code == 200


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCommentTreeEndpoint:
    """Tests for GET /posts/{post_id}/comments/tree."""

    def test_empty_tree(self, client):
        response = client.get("/posts/1/comments/tree")

        assert response.status_code == 200
        data = response.json()
        assert data["comments"] == []
        assert data["total_threads"] == 0
        assert data["total_comments"] == 0

    def test_guest_comments_hidden_until_published(self, client):
        # Arrange
        created = _create(client)
        assert created["status"] == "auditing"

        # Act
        hidden = client.get("/posts/1/comments/tree").json()
        _publish(client, created["comment_id"])
        shown = client.get("/posts/1/comments/tree").json()

        # Assert
        assert hidden["comments"] == []
        assert [c["comment_id"] for c in shown["comments"]] == [created["comment_id"]]

    def test_nested_thread(self, client):
        root = _create(client, content="Root")
        first = _create(client, parent_id=root["comment_id"], content="First")
        second = _create(client, parent_id=root["comment_id"], content="Second")
        nested = _create(client, parent_id=first["comment_id"], content="Nested")
        _publish(
            client,
            root["comment_id"],
            first["comment_id"],
            second["comment_id"],
            nested["comment_id"],
        )

        data = client.get("/posts/1/comments/tree?page=0&size=1").json()

        thread = data["comments"][0]
        assert thread["comment_id"] == root["comment_id"]
        assert [c["comment_id"] for c in thread["children"]] == [
            second["comment_id"],
            first["comment_id"],
        ]
        assert thread["children"][1]["children"][0]["content"] == "Nested"
        assert data["total_comments"] == 4
        assert data["total_threads"] == 1

    def test_include_unpublished(self, client):
        _create(client)

        data = client.get("/posts/1/comments/tree?include_unpublished=true").json()

        assert data["total_comments"] == 1

    def test_invalid_sort(self, client):
        response = client.get("/posts/1/comments/tree?sort=id,upwards")

        assert response.status_code == 400

    def test_invalid_page_size(self, client):
        response = client.get("/posts/1/comments/tree?size=0")

        assert response.status_code == 422


class TestCommentListingEndpoints:
    """Tests for the flat listing endpoints."""

    def test_top_and_children(self, client):
        root = _create(client, content="Root")
        reply = _create(client, parent_id=root["comment_id"], content="Reply")
        _publish(client, root["comment_id"], reply["comment_id"])

        top = client.get("/posts/1/comments/top").json()
        children = client.get(
            f"/posts/1/comments/{root['comment_id']}/children"
        ).json()
        listed = client.get("/posts/1/comments/list").json()

        assert [(c["comment_id"], c["has_children"]) for c in top["comments"]] == [
            (root["comment_id"], True)
        ]
        assert [c["comment_id"] for c in children["comments"]] == [reply["comment_id"]]
        assert listed["comments"][0]["parent"]["comment_id"] == root["comment_id"]


class TestCreateCommentEndpoint:
    """Tests for POST /posts/{post_id}/comments."""

    def test_reply_to_missing_parent(self, client):
        response = client.post(
            "/posts/1/comments",
            json={
                "author": "Ada",
                "email": "ada@example.com",
                "content": "Reply",
                "parent_id": 99,
            },
        )

        assert response.status_code == 404

    def test_reply_across_posts(self, client):
        root = _create(client, post_id=2)

        response = client.post(
            "/posts/1/comments",
            json={
                "author": "Ada",
                "email": "ada@example.com",
                "content": "Reply",
                "parent_id": root["comment_id"],
            },
        )

        assert response.status_code == 400


class TestModerationEndpoints:
    """Tests for status changes and removal."""

    def test_update_single_status(self, client):
        created = _create(client)

        response = client.put(f"/comments/{created['comment_id']}/status/recycle")

        assert response.status_code == 200
        assert response.json()["status"] == "recycle"

    def test_update_missing_comment(self, client):
        response = client.put("/comments/99/status/published")

        assert response.status_code == 404

    def test_remove_cascades(self, client):
        root = _create(client)
        reply = _create(client, parent_id=root["comment_id"])

        response = client.delete(f"/comments/{root['comment_id']}")

        assert response.status_code == 200
        assert client.delete(f"/comments/{reply['comment_id']}").status_code == 404
        data = client.get("/posts/1/comments/tree?include_unpublished=true").json()
        assert data["total_comments"] == 0
