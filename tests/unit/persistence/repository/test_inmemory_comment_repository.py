"""Unit tests for InMemoryCommentRepository."""

import pytest
import pytest_asyncio

from discuss.domain.value import ROOT_COMMENT_ID, CommentId, CommentStatus, PostId
from discuss.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


@pytest_asyncio.fixture
async def repo():
    repository = InMemoryCommentRepository()
    for comment in [
        make_comment(1),
        make_comment(2, parent_id=1),
        make_comment(3, parent_id=1, status=CommentStatus.AUDITING),
        make_comment(4, parent_id=2),
        make_comment(5),
        make_comment(6, post_id=2, content="Other post"),
    ]:
        await repository.save(comment)
    return repository


class TestSave:
    """Tests for id assignment."""

    @pytest.mark.asyncio
    async def test_new_comment_gets_next_id(self, repo):
        saved = await repo.save(make_comment(None))

        assert saved.id == 7

    @pytest.mark.asyncio
    async def test_update_keeps_id(self, repo):
        comment = await repo.find_by_id(CommentId(1))

        updated = await repo.save(comment.model_copy(update={"content": "Edited"}))

        assert updated.id == 1
        assert (await repo.find_by_id(CommentId(1))).content == "Edited"


class TestQueries:
    """Tests for lookups and counts."""

    @pytest.mark.asyncio
    async def test_find_by_post_newest_first(self, repo):
        comments = await repo.find_by_post(PostId(1), limit=2, offset=1)

        assert [c.id for c in comments] == [4, 3]

    @pytest.mark.asyncio
    async def test_top_level_filter(self, repo):
        comments = await repo.find_by_post(
            PostId(1), status=CommentStatus.PUBLISHED, parent_id=ROOT_COMMENT_ID
        )

        assert [c.id for c in comments] == [5, 1]
        assert (
            await repo.count_by_post(
                PostId(1), status=CommentStatus.PUBLISHED, parent_id=ROOT_COMMENT_ID
            )
            == 2
        )

    @pytest.mark.asyncio
    async def test_find_children_batch(self, repo):
        children = await repo.find_children({1, 2}, post_id=PostId(1))

        assert [c.id for c in children] == [2, 3, 4]

    @pytest.mark.asyncio
    async def test_count_direct_children(self, repo):
        counts = await repo.count_direct_children({1, 2, 5}, CommentStatus.PUBLISHED)

        assert counts == {1: 1, 2: 1}

    @pytest.mark.asyncio
    async def test_keyword_search(self, repo):
        comments = await repo.find_all(keyword="other")

        assert [c.id for c in comments] == [6]
        assert await repo.count(keyword="other") == 1

    @pytest.mark.asyncio
    async def test_empty_batches(self, repo):
        assert await repo.find_all_by_ids([]) == []
        assert await repo.find_children([]) == []
        assert await repo.count_direct_children([], CommentStatus.PUBLISHED) == {}
        assert await repo.count_by_post_ids([]) == {}


class TestDelete:
    """Tests for deletion."""

    @pytest.mark.asyncio
    async def test_delete_returns_removed(self, repo):
        removed = await repo.delete(CommentId(5))

        assert removed.id == 5
        assert await repo.delete(CommentId(5)) is None

    @pytest.mark.asyncio
    async def test_delete_by_post(self, repo):
        removed = await repo.delete_by_post(PostId(2))

        assert [c.id for c in removed] == [6]
        assert await repo.count_by_post_ids([PostId(1), PostId(2)]) == {1: 5}
