"""End-to-end tests for the public comment endpoints."""

from uuid import uuid4

from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from tests.conftest import at, make_article, make_comment, make_user
from tests.harness import sign_in


async def seed_article(container):
    articles = await container.get(ArticleRepository)
    return await articles.save(make_article("Threads In Practice"))


class TestCreateComment:
    """POST /comments"""

    async def test_anonymous_comment(self, client, container):
        # Arrange
        article = await seed_article(container)

        # Act
        response = await client.post(
            "/comments",
            json={
                "article_id": str(article.id),
                "content": "Nice <b>write-up</b>",
                "author_name": "Visitor",
            },
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["content"] == "Nice write-up"
        assert data["author_name"] == "Visitor"
        assert data["user_id"] is None
        assert data["is_read"] is False

    async def test_signed_in_user_comments_under_account(self, client, container):
        article = await seed_article(container)
        users = await container.get(UserRepository)
        user = await users.save(make_user("Ada Lovelace"))
        await sign_in(client, container, user)

        response = await client.post(
            "/comments",
            json={
                "article_id": str(article.id),
                "content": "Signed comment",
                "author_name": "Impostor",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == str(user.id)
        assert data["author_name"] is None

    async def test_session_for_unknown_user_is_rejected(self, client, container):
        article = await seed_article(container)
        await sign_in(client, container, make_user("Deleted Account"))

        response = await client.post(
            "/comments",
            json={"article_id": str(article.id), "content": "Still here?"},
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_ERROR"
        assert detail["field"] == "user_id"

    async def test_invalid_session_falls_back_to_anonymous(self, client, container):
        article = await seed_article(container)
        client.cookies.set("auth_token", "invalid-token")

        response = await client.post(
            "/comments",
            json={"article_id": str(article.id), "content": "Hello"},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "author_name"

    async def test_missing_article(self, client):
        response = await client.post(
            "/comments",
            json={
                "article_id": str(uuid4()),
                "content": "Hello",
                "author_name": "Visitor",
            },
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "ARTICLE_NOT_FOUND"

    async def test_missing_parent(self, client, container):
        article = await seed_article(container)

        response = await client.post(
            "/comments",
            json={
                "article_id": str(article.id),
                "content": "Hello",
                "author_name": "Visitor",
                "parent_id": str(uuid4()),
            },
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "PARENT_NOT_FOUND"

    async def test_depth_limit(self, client, container):
        article = await seed_article(container)
        parent_id = None
        for level in range(3):
            response = await client.post(
                "/comments",
                json={
                    "article_id": str(article.id),
                    "content": f"Level {level}",
                    "author_name": "Visitor",
                    "parent_id": parent_id,
                },
            )
            assert response.status_code == 201
            parent_id = response.json()["comment_id"]

        response = await client.post(
            "/comments",
            json={
                "article_id": str(article.id),
                "content": "Too deep",
                "author_name": "Visitor",
                "parent_id": parent_id,
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "MAX_DEPTH_EXCEEDED"

    async def test_empty_content(self, client, container):
        article = await seed_article(container)

        response = await client.post(
            "/comments",
            json={
                "article_id": str(article.id),
                "content": "   ",
                "author_name": "Visitor",
            },
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_ERROR"
        assert detail["field"] == "content"

    async def test_missing_body_field(self, client):
        response = await client.post("/comments", json={"content": "Hello"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_ERROR"
        assert detail["field"] == "article_id"


class TestGetComments:
    """GET /articles/{article_id}/comments"""

    async def test_threaded_listing(self, client, container):
        article = await seed_article(container)
        comments = await container.get(CommentRepository)
        older = await comments.save(make_comment(article.id, created_at=at(0)))
        await comments.save(
            make_comment(article.id, parent_id=older.id, created_at=at(1))
        )
        newer = await comments.save(make_comment(article.id, created_at=at(2)))

        response = await client.get(f"/articles/{article.id}/comments")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [c["comment_id"] for c in data["comments"]] == [
            str(newer.id),
            str(older.id),
        ]
        assert data["comments"][1]["replies"][0]["depth"] == 1

    async def test_unknown_article(self, client):
        response = await client.get(f"/articles/{uuid4()}/comments")

        assert response.status_code == 404

    async def test_malformed_article_id(self, client):
        response = await client.get("/articles/not-a-uuid/comments")

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "article_id"


class TestDeleteComment:
    """DELETE /comments/{comment_id}"""

    async def test_admin_deletes_thread(self, client, container, admin_user):
        article = await seed_article(container)
        comments = await container.get(CommentRepository)
        root = await comments.save(make_comment(article.id, created_at=at(0)))
        reply = await comments.save(
            make_comment(article.id, parent_id=root.id, created_at=at(1))
        )
        await comments.save(
            make_comment(article.id, parent_id=reply.id, created_at=at(2))
        )
        await sign_in(client, container, admin_user)

        response = await client.delete(f"/comments/{root.id}")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "comment_id": str(root.id),
            "deleted_count": 3,
        }
        assert await comments.find_by_article(article.id) == []

    async def test_requires_session(self, client, container):
        article = await seed_article(container)
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(article.id))

        response = await client.delete(f"/comments/{comment.id}")

        assert response.status_code == 401
        assert response.json()["detail"]["code"] == "UNAUTHORIZED"

    async def test_requires_admin(self, client, container):
        article = await seed_article(container)
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(article.id))
        await sign_in(client, container, make_user())

        response = await client.delete(f"/comments/{comment.id}")

        assert response.status_code == 403
        assert response.json()["detail"]["code"] == "FORBIDDEN"
        assert await comments.find_by_id(comment.id) is not None

    async def test_non_admin_with_malformed_id_is_forbidden(self, client, container):
        await sign_in(client, container, make_user())

        response = await client.delete("/comments/not-a-uuid")

        assert response.status_code == 403
        assert response.json()["detail"]["code"] == "FORBIDDEN"

    async def test_anonymous_with_malformed_id_is_unauthorized(self, client):
        response = await client.delete("/comments/not-a-uuid")

        assert response.status_code == 401
        assert response.json()["detail"]["code"] == "UNAUTHORIZED"

    async def test_admin_with_malformed_id(self, client, container, admin_user):
        await sign_in(client, container, admin_user)

        response = await client.delete("/comments/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "comment_id"

    async def test_unknown_comment(self, client, container, admin_user):
        await sign_in(client, container, admin_user)

        response = await client.delete(f"/comments/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "COMMENT_NOT_FOUND"
