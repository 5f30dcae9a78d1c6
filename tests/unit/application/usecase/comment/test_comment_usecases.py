"""Unit tests for the comment use cases."""

from uuid import uuid4

import pytest

from blog.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from blog.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from blog.application.usecase.comment.get_comments import (
    GetCommentsRequest,
    GetCommentsUseCase,
)
from blog.application.usecase.comment.update_comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.model import User
from blog.domain.service import PostService
from blog.domain.value import UserId
from blog.persistence.repository.inmemory import InMemoryUserRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def make_post(unit_env, alice):
    async def _make_post():
        post_service = await unit_env.get(PostService)
        return await post_service.create(UserId(alice), "Post", "Body")

    return _make_post


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_resolves_author(self, unit_env, make_post, bob):
        # Arrange
        users = await unit_env.get(InMemoryUserRepository)
        users.add(User(id=UserId(bob), name="Bob"))
        post = await make_post()
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(post_id=str(post.id), content="Hi", author_id=bob)
        )

        # Assert
        assert response.post_id == str(post.id)
        assert response.content == "Hi"
        assert response.author.name == "Bob"

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post(self, unit_env, bob):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id=str(uuid4()), content="Hi", author_id=bob)
            )


class TestGetCommentsUseCase:
    @pytest.mark.asyncio
    async def test_comments_newest_first(self, unit_env, make_post, alice, bob):
        # Arrange
        post = await make_post()
        create = await unit_env.get(CreateCommentUseCase)
        for author, text in [(alice, "one"), (bob, "two"), (alice, "three")]:
            await create.execute(
                CreateCommentRequest(post_id=str(post.id), content=text, author_id=author)
            )
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        # Assert
        assert [c.content for c in response.comments] == ["three", "two", "one"]

    @pytest.mark.asyncio
    async def test_malformed_post_id(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(GetCommentsRequest(post_id="abc"))


class TestUpdateAndDeleteCommentUseCase:
    @pytest.mark.asyncio
    async def test_author_edits_then_deletes(self, unit_env, make_post, bob):
        # Arrange
        post = await make_post()
        create = await unit_env.get(CreateCommentUseCase)
        created = await create.execute(
            CreateCommentRequest(post_id=str(post.id), content="v1", author_id=bob)
        )
        update = await unit_env.get(UpdateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        # Act
        updated = await update.execute(
            UpdateCommentRequest(comment_id=created.comment_id, user_id=bob, content="v2")
        )
        deleted = await delete.execute(
            DeleteCommentRequest(comment_id=created.comment_id, user_id=bob)
        )

        # Assert
        assert updated.content == "v2"
        assert deleted.message == "Comment deleted successfully"
        remaining = await get_comments.execute(GetCommentsRequest(post_id=str(post.id)))
        assert remaining.comments == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env, make_post, alice, bob):
        # Arrange
        post = await make_post()
        create = await unit_env.get(CreateCommentUseCase)
        created = await create.execute(
            CreateCommentRequest(post_id=str(post.id), content="mine", author_id=bob)
        )
        update = await unit_env.get(UpdateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateCommentRequest(
                    comment_id=created.comment_id, user_id=alice, content="x"
                )
            )
