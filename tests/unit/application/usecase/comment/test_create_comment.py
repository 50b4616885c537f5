"""Unit tests for CreateCommentUseCase."""

import pytest

from discuss.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_comment_with_avatar(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=1,
                author="Ada",
                email="ada@example.com",
                content="Nice post",
                author_url="https://ada.dev",
            )
        )

        # Assert
        assert response.comment_id == 1
        assert response.parent_id == 0
        assert response.status == CommentStatus.AUDITING
        assert response.author_url == "https://ada.dev"
        assert response.avatar == (
            "//cn.gravatar.com/avatar/3e3417d7ef77d5932a6734b916515ed5?s=256&d=mm"
        )
        assert await comment_repo.find_by_id(response.comment_id) is not None

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=1,
                    author="Ada",
                    email="ada@example.com",
                    content="Reply",
                    parent_id=42,
                )
            )

    def test_request_rejects_empty_content(self):
        with pytest.raises(ValueError):
            CreateCommentRequest(
                post_id=1, author="Ada", email="ada@example.com", content=""
            )
