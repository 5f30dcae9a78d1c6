"""End-to-end tests for the blog API."""

from datetime import timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import bearer, make_token


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    app_instance = create_app(build_test_container(for_app=True))
    return TestClient(app_instance)


def create_post(client, user_id, **overrides):
    body = {"title": "Hello", "content": "World", "tags": [], "categories": []}
    body.update(overrides)
    response = client.post("/api/posts", json=body, headers=bearer(user_id))
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    def test_health_needs_no_token(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuthentication:
    """Every content route requires a verified token."""

    def test_missing_token_is_401(self, client):
        response = client.get("/api/posts")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token_is_401(self, client):
        response = client.get(
            "/api/posts", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_expired_token_is_401(self, client, alice):
        token = make_token(alice, expires_in=timedelta(minutes=-5))

        response = client.get(
            "/api/posts", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    def test_cookie_token_is_accepted(self, client, alice):
        client.cookies.set("auth_token", make_token(alice))

        response = client.get("/api/posts")

        assert response.status_code == 200

    def test_sub_claim_is_accepted(self, client, alice):
        token = make_token(alice, claim="sub")

        response = client.post(
            "/api/posts",
            json={"title": "T", "content": "C"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201
        assert response.json()["author"]["user_id"] == alice


class TestPostEndpoints:
    """End-to-end tests for post API endpoints."""

    def test_create_and_get_post(self, client, alice):
        # Arrange
        created = create_post(client, alice, tags=["python"], categories=["tech"])

        # Act
        response = client.get(
            f"/api/posts/{created['post_id']}", headers=bearer(alice)
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Hello"
        assert body["tags"] == ["python"]
        assert body["categories"] == ["tech"]
        assert body["like_count"] == 0

    def test_create_post_without_title_is_400(self, client, alice):
        response = client.post(
            "/api/posts", json={"content": "No title"}, headers=bearer(alice)
        )

        assert response.status_code == 400

    def test_create_post_with_blank_title_is_400(self, client, alice):
        response = client.post(
            "/api/posts",
            json={"title": "   ", "content": "Body"},
            headers=bearer(alice),
        )

        assert response.status_code == 400

    def test_get_missing_post_is_404(self, client, alice):
        response = client.get(f"/api/posts/{uuid4()}", headers=bearer(alice))

        assert response.status_code == 404

    def test_get_malformed_id_is_400(self, client, alice):
        response = client.get("/api/posts/not-a-uuid", headers=bearer(alice))

        assert response.status_code == 400

    def test_list_posts_paginates(self, client, alice):
        # Arrange
        for i in range(6):
            create_post(client, alice, title=f"Post {i}")

        # Act
        response = client.get(
            "/api/posts",
            params={"page": 2, "results_per_page": 5},
            headers=bearer(alice),
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total_pages"] == 2
        assert body["current_page"] == 2
        assert [p["title"] for p in body["posts"]] == ["Post 0"]

    def test_list_posts_rejects_page_zero(self, client, alice):
        response = client.get(
            "/api/posts", params={"page": 0}, headers=bearer(alice)
        )

        assert response.status_code == 400

    def test_only_author_can_update(self, client, alice, bob):
        # Arrange
        created = create_post(client, alice)
        url = f"/api/posts/{created['post_id']}"

        # Act
        forbidden = client.put(url, json={"title": "Bob's now"}, headers=bearer(bob))
        allowed = client.put(url, json={"title": "Edited"}, headers=bearer(alice))

        # Assert
        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["title"] == "Edited"
        assert allowed.json()["content"] == "World"

    def test_only_author_can_delete(self, client, alice, bob):
        # Arrange
        created = create_post(client, alice)
        url = f"/api/posts/{created['post_id']}"

        # Act
        forbidden = client.delete(url, headers=bearer(bob))
        still_there = client.get(url, headers=bearer(bob))

        # Assert
        assert forbidden.status_code == 403
        assert still_there.status_code == 200

    def test_delete_cascades_to_comments_likes_and_orphans(self, client, alice, bob):
        """Deleting the only post tagged "tech" removes the tag too."""
        # Arrange
        created = create_post(client, alice, tags=["tech"], categories=["news"])
        post_id = created["post_id"]
        keeper = create_post(client, bob, categories=["news"])
        client.post(
            f"/api/posts/{post_id}/comments",
            json={"content": "Nice"},
            headers=bearer(bob),
        )
        client.post(f"/api/likes/{post_id}/like", headers=bearer(bob))

        # Act
        response = client.delete(f"/api/posts/{post_id}", headers=bearer(alice))

        # Assert
        assert response.status_code == 200
        assert client.get(
            f"/api/posts/{post_id}", headers=bearer(alice)
        ).status_code == 404
        comments = client.get(f"/api/posts/{post_id}/comments", headers=bearer(alice))
        assert comments.json()["comments"] == []
        likes = client.get(f"/api/likes/{post_id}/likes", headers=bearer(alice))
        assert likes.json()["likes"] == []
        tags = client.get("/api/tags", headers=bearer(alice)).json()
        assert tags["items"] == []
        categories = client.get("/api/categories", headers=bearer(alice)).json()
        assert [c["name"] for c in categories["items"]] == ["news"]
        assert client.get(
            f"/api/posts/{keeper['post_id']}", headers=bearer(alice)
        ).status_code == 200

    def test_delete_twice_is_404(self, client, alice):
        created = create_post(client, alice)
        url = f"/api/posts/{created['post_id']}"

        assert client.delete(url, headers=bearer(alice)).status_code == 200
        assert client.delete(url, headers=bearer(alice)).status_code == 404


class TestCommentEndpoints:
    """End-to-end tests for comment API endpoints."""

    def test_comment_lifecycle(self, client, alice, bob):
        # Arrange
        post = create_post(client, alice)
        base = f"/api/posts/{post['post_id']}/comments"

        # Act
        created = client.post(base, json={"content": "First!"}, headers=bearer(bob))
        comment_id = created.json()["comment_id"]
        edited = client.put(
            f"{base}/{comment_id}", json={"content": "Second?"}, headers=bearer(bob)
        )
        listed = client.get(base, headers=bearer(alice))
        post_view = client.get(f"/api/posts/{post['post_id']}", headers=bearer(alice))

        # Assert
        assert created.status_code == 201
        assert edited.status_code == 200
        assert [c["content"] for c in listed.json()["comments"]] == ["Second?"]
        assert post_view.json()["comment_ids"] == [comment_id]

        # Act - delete
        deleted = client.delete(f"{base}/{comment_id}", headers=bearer(bob))

        # Assert
        assert deleted.status_code == 200
        assert client.get(base, headers=bearer(alice)).json()["comments"] == []

    def test_other_user_cannot_edit_or_delete(self, client, alice, bob):
        # Arrange
        post = create_post(client, alice)
        base = f"/api/posts/{post['post_id']}/comments"
        comment_id = client.post(
            base, json={"content": "mine"}, headers=bearer(bob)
        ).json()["comment_id"]

        # Act
        edit = client.put(
            f"{base}/{comment_id}", json={"content": "x"}, headers=bearer(alice)
        )
        delete = client.delete(f"{base}/{comment_id}", headers=bearer(alice))

        # Assert
        assert edit.status_code == 403
        assert delete.status_code == 403

    def test_comment_on_missing_post_is_404(self, client, bob):
        response = client.post(
            f"/api/posts/{uuid4()}/comments",
            json={"content": "Hello?"},
            headers=bearer(bob),
        )

        assert response.status_code == 404

    def test_blank_comment_is_400(self, client, alice):
        post = create_post(client, alice)

        response = client.post(
            f"/api/posts/{post['post_id']}/comments",
            json={"content": " "},
            headers=bearer(alice),
        )

        assert response.status_code == 400


class TestLikeEndpoints:
    """End-to-end tests for like API endpoints."""

    def test_like_conflict_and_unlike(self, client, alice, bob):
        # Arrange
        post = create_post(client, alice)
        url = f"/api/likes/{post['post_id']}/like"

        # Act
        first = client.post(url, headers=bearer(bob))
        second = client.post(url, headers=bearer(bob))
        after_like = client.get(f"/api/posts/{post['post_id']}", headers=bearer(bob))
        removed = client.delete(url, headers=bearer(bob))
        removed_again = client.delete(url, headers=bearer(bob))
        after_unlike = client.get(f"/api/posts/{post['post_id']}", headers=bearer(bob))

        # Assert
        assert first.status_code == 201
        assert second.status_code == 409
        assert after_like.json()["like_count"] == 1
        assert removed.status_code == 200
        assert removed_again.status_code == 404
        assert after_unlike.json()["like_count"] == 0

    def test_like_missing_post_is_404(self, client, bob):
        response = client.post(f"/api/likes/{uuid4()}/like", headers=bearer(bob))

        assert response.status_code == 404

    def test_list_likes(self, client, alice, bob):
        # Arrange
        post = create_post(client, alice)
        client.post(f"/api/likes/{post['post_id']}/like", headers=bearer(alice))
        client.post(f"/api/likes/{post['post_id']}/like", headers=bearer(bob))

        # Act
        response = client.get(
            f"/api/likes/{post['post_id']}/likes", headers=bearer(alice)
        )

        # Assert
        assert response.status_code == 200
        assert [like["user"]["user_id"] for like in response.json()["likes"]] == [
            alice,
            bob,
        ]
