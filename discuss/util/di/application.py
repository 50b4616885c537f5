"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentTreeUseCase,
    ListCommentChildrenUseCase,
    ListCommentsWithParentUseCase,
    ListTopCommentsUseCase,
    RemoveCommentUseCase,
    UpdateCommentStatusUseCase,
)
from discuss.domain.service import CommentService
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_tree_use_case(
        self, comment_service: CommentService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_with_parent_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsWithParentUseCase:
        """Provide list comments with parent use case."""
        return ListCommentsWithParentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_top_comments_use_case(
        self, comment_service: CommentService
    ) -> ListTopCommentsUseCase:
        """Provide list top comments use case."""
        return ListTopCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comment_children_use_case(
        self, comment_service: CommentService
    ) -> ListCommentChildrenUseCase:
        """Provide list comment children use case."""
        return ListCommentChildrenUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_status_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentStatusUseCase:
        """Provide update comment status use case."""
        return UpdateCommentStatusUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, comment_service: CommentService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(comment_service=comment_service)
