"""Unit tests for DescendantCollector."""

import pytest

from discuss.domain.error import InvalidArgumentError
from discuss.domain.service import DescendantCollector
from discuss.domain.value import CommentStatus, PostId
from discuss.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


class CountingRepository(InMemoryCommentRepository):
    """In-memory repository that records children queries."""

    def __init__(self) -> None:
        super().__init__()
        self.children_queries: list[set] = []

    async def find_children(self, parent_ids, post_id=None, status=None):
        self.children_queries.append(set(parent_ids))
        return await super().find_children(parent_ids, post_id=post_id, status=status)


async def _repository_with(*comments) -> CountingRepository:
    repo = CountingRepository()
    for comment in comments:
        await repo.save(comment)
    return repo


class TestCollect:
    """Tests for DescendantCollector.collect."""

    @pytest.mark.asyncio
    async def test_collects_all_levels(self):
        """All descendants are found, one query per level."""
        # Arrange
        repo = await _repository_with(
            make_comment(1),
            make_comment(2, parent_id=1),
            make_comment(3, parent_id=1),
            make_comment(4, parent_id=2),
        )
        collector = DescendantCollector(repo)

        # Act
        result = await collector.collect({1}, post_id=PostId(1))

        # Assert
        assert [c.id for c in result] == [2, 3, 4]
        assert repo.children_queries == [{1}, {2, 3}, {4}]

    @pytest.mark.asyncio
    async def test_seeds_are_excluded(self):
        """Seeds that descend from other seeds stay out of the result."""
        repo = await _repository_with(
            make_comment(1),
            make_comment(2, parent_id=1),
            make_comment(3, parent_id=2),
        )
        collector = DescendantCollector(repo)

        result = await collector.collect({1, 2}, post_id=PostId(1))

        assert [c.id for c in result] == [3]

    @pytest.mark.asyncio
    async def test_status_filter_stops_at_unmatched_comments(self):
        """Replies below a non-matching comment are not followed."""
        repo = await _repository_with(
            make_comment(1),
            make_comment(2, parent_id=1, status=CommentStatus.AUDITING),
            make_comment(3, parent_id=2),
            make_comment(4, parent_id=1),
        )
        collector = DescendantCollector(repo)

        result = await collector.collect(
            {1}, post_id=PostId(1), status=CommentStatus.PUBLISHED
        )

        assert [c.id for c in result] == [4]

    @pytest.mark.asyncio
    async def test_other_posts_are_ignored(self):
        repo = await _repository_with(
            make_comment(1),
            make_comment(2, parent_id=1, post_id=2),
        )
        collector = DescendantCollector(repo)

        result = await collector.collect({1}, post_id=PostId(1))

        assert result == []

    @pytest.mark.asyncio
    async def test_empty_seed_issues_no_query(self):
        repo = await _repository_with(make_comment(1))
        collector = DescendantCollector(repo)

        result = await collector.collect(set(), post_id=PostId(1))

        assert result == []
        assert repo.children_queries == []

    @pytest.mark.asyncio
    async def test_cycle_terminates(self):
        """A parent cycle below the seed is expanded once per comment."""
        repo = await _repository_with(
            make_comment(1),
            make_comment(2, parent_id=3),
            make_comment(3, parent_id=2),
            make_comment(5, parent_id=1),
        )
        collector = DescendantCollector(repo)

        result = await collector.collect({2}, post_id=PostId(1))

        assert [c.id for c in result] == [3]
        assert repo.children_queries == [{2}, {3}]

    @pytest.mark.asyncio
    async def test_missing_post_id_rejected(self):
        collector = DescendantCollector(InMemoryCommentRepository())

        with pytest.raises(InvalidArgumentError):
            await collector.collect({1}, post_id=None)
