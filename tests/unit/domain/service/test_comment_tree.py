"""Unit tests for CommentTreeBuilder and CommentTreePaginator."""

import pytest

from discuss.config import CommentSettings
from discuss.domain.error import InvalidArgumentError
from discuss.domain.service import (
    AvatarService,
    CommentTreeBuilder,
    CommentTreePaginator,
    build_comment_comparator,
)
from discuss.domain.value import SortDirection, SortOrder
from tests.conftest import make_comment


@pytest.fixture
def builder():
    return CommentTreeBuilder(AvatarService(CommentSettings()))


@pytest.fixture
def paginator():
    return CommentTreePaginator()


@pytest.fixture
def thread_comments():
    """Comment 1 with replies 2 and 3; comment 4 replies to 2."""
    return [
        make_comment(1),
        make_comment(2, parent_id=1),
        make_comment(3, parent_id=1),
        make_comment(4, parent_id=2),
    ]


def _ids(nodes):
    return [node.id for node in nodes]


class TestBuildForest:
    """Tests for CommentTreeBuilder.build_forest."""

    def test_builds_single_thread_with_default_descending_order(
        self, builder, thread_comments
    ):
        """Siblings are ordered by id descending by default."""
        # Act
        forest = builder.build_forest(thread_comments, build_comment_comparator())

        # Assert
        assert _ids(forest) == [1]
        assert _ids(forest[0].children) == [3, 2]
        reply = forest[0].children[1]
        assert _ids(reply.children) == [4]
        assert reply.children[0].children == []

    def test_ascending_id_order(self, builder, thread_comments):
        """An ascending id order is applied at every level."""
        comparator = build_comment_comparator(
            (SortOrder(field="id", direction=SortDirection.ASC),)
        )

        forest = builder.build_forest(thread_comments, comparator)

        assert _ids(forest[0].children) == [2, 3]

    def test_without_comparator_keeps_input_order(self, builder):
        """Siblings keep their input order when no comparator is given."""
        comments = [make_comment(5), make_comment(2), make_comment(9)]

        forest = builder.build_forest(comments)

        assert _ids(forest) == [5, 2, 9]

    def test_input_order_does_not_matter(self, builder, thread_comments):
        """Children listed before their parent are still placed."""
        forest = builder.build_forest(
            list(reversed(thread_comments)), build_comment_comparator()
        )

        assert _ids(forest) == [1]
        assert sorted(node.id for node in forest[0].walk()) == [1, 2, 3, 4]

    def test_every_comment_placed_exactly_once(self, builder):
        """Nodes in the forest partition the input."""
        comments = [
            make_comment(1),
            make_comment(2),
            make_comment(3, parent_id=1),
            make_comment(4, parent_id=3),
            make_comment(5, parent_id=2),
            make_comment(6, parent_id=1),
        ]

        forest = builder.build_forest(comments, build_comment_comparator())

        placed = [node.id for root in forest for node in root.walk()]
        assert sorted(placed) == [1, 2, 3, 4, 5, 6]
        assert len(placed) == len(set(placed))

    def test_orphans_are_dropped(self, builder):
        """Comments whose parent is absent are not placed anywhere."""
        comments = [make_comment(1), make_comment(7, parent_id=42)]

        forest = builder.build_forest(comments)

        assert [node.id for root in forest for node in root.walk()] == [1]

    def test_cycle_terminates(self, builder):
        """A parent cycle unreachable from the root is left out."""
        comments = [
            make_comment(1),
            make_comment(2, parent_id=3),
            make_comment(3, parent_id=2),
        ]

        forest = builder.build_forest(comments, build_comment_comparator())

        assert _ids(forest) == [1]
        assert forest[0].children == []

    def test_long_reply_chain(self, builder):
        """A reply chain far deeper than the interpreter stack is assembled."""
        depth = 1500
        comments = [make_comment(1)] + [
            make_comment(i, parent_id=i - 1) for i in range(2, depth + 1)
        ]
        # Two replies at the bottom check that deep siblings are still sorted
        comments += [
            make_comment(depth + 1, parent_id=depth),
            make_comment(depth + 2, parent_id=depth),
        ]

        forest = builder.build_forest(comments, build_comment_comparator())

        assert _ids(forest) == [1]
        placed = [node.id for node in forest[0].walk()]
        assert placed[:depth] == list(range(1, depth + 1))
        assert placed[depth:] == [depth + 2, depth + 1]

        bottom = forest[0]
        while bottom.children and bottom.id != depth:
            bottom = bottom.children[0]
        assert bottom.id == depth
        assert _ids(bottom.children) == [depth + 2, depth + 1]

    def test_empty_input(self, builder):
        assert builder.build_forest([]) == []

    def test_nodes_carry_avatar(self, builder):
        """Each node gets the formatted avatar URL."""
        forest = builder.build_forest([make_comment(1)])

        assert forest[0].avatar == f"//cn.gravatar.com/avatar/{'0' * 32}?s=256&d=mm"


class TestCommentComparator:
    """Tests for build_comment_comparator."""

    def test_other_fields_are_ignored(self, builder, thread_comments):
        """Asking for created_at still orders by id."""
        comparator = build_comment_comparator(
            (SortOrder(field="created_at", direction=SortDirection.ASC),)
        )

        forest = builder.build_forest(thread_comments, comparator)

        assert _ids(forest[0].children) == [3, 2]

    def test_first_id_order_wins(self):
        """The first order on id sets the direction."""
        comparator = build_comment_comparator(
            (
                SortOrder(field="author", direction=SortDirection.DESC),
                SortOrder(field="id", direction=SortDirection.ASC),
                SortOrder(field="id", direction=SortDirection.DESC),
            )
        )
        forest = CommentTreeBuilder(AvatarService(CommentSettings())).build_forest(
            [make_comment(3), make_comment(1), make_comment(2)]
        )

        assert comparator(forest[0], forest[1]) > 0
        assert comparator(forest[1], forest[2]) < 0
        assert comparator(forest[0], forest[0]) == 0


class TestPaginate:
    """Tests for CommentTreePaginator.page."""

    def test_page_keeps_whole_thread(self, builder, paginator, thread_comments):
        """A one-thread page carries the thread's complete subtree."""
        forest = builder.build_forest(thread_comments, build_comment_comparator())

        page = paginator.page(forest, len(thread_comments), page=0, size=1)

        assert _ids(page.content) == [1]
        assert len(list(page.content[0].walk())) == 4
        assert page.total_comments == 4
        assert page.total_threads == 1
        assert page.total_pages == 1

    def test_pages_partition_threads(self, builder, paginator):
        """Consecutive pages cover every thread once."""
        comments = [make_comment(i) for i in range(1, 6)] + [
            make_comment(6, parent_id=5)
        ]
        forest = builder.build_forest(comments, build_comment_comparator())

        pages = [paginator.page(forest, len(comments), p, 2) for p in range(3)]

        assert [_ids(p.content) for p in pages] == [[5, 4], [3, 2], [1]]
        assert all(p.total_threads == 5 for p in pages)
        assert all(p.total_comments == 6 for p in pages)
        assert pages[0].total_pages == 3

    def test_page_past_end_is_empty(self, builder, paginator, thread_comments):
        forest = builder.build_forest(thread_comments)

        page = paginator.page(forest, 4, page=3, size=1)

        assert page.content == []
        assert page.total_threads == 1
        assert page.total_comments == 4

    def test_negative_page_is_empty(self, builder, paginator, thread_comments):
        forest = builder.build_forest(thread_comments)

        page = paginator.page(forest, 4, page=-1, size=10)

        assert page.content == []

    def test_empty_forest(self, paginator):
        page = paginator.page([], 0, page=0, size=10)

        assert page.content == []
        assert page.total_pages == 0

    def test_non_positive_size_rejected(self, paginator):
        with pytest.raises(InvalidArgumentError):
            paginator.page([], 0, page=0, size=0)
