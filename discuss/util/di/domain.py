"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import CommentSettings
from discuss.domain.event import CommentEventPublisher
from discuss.domain.repository import CommentRepository
from discuss.domain.service import (
    AvatarService,
    ChildrenCounter,
    CommentService,
    CommentTreeBuilder,
    CommentTreePaginator,
    DescendantCollector,
    ParentAttacher,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services that touch the repository are REQUEST-scoped to align with the
    session lifecycle. Pure services live for the whole application.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_avatar_service(self, comment_settings: CommentSettings) -> AvatarService:
        """Provide avatar URL service."""
        return AvatarService(comment_settings=comment_settings)

    @provide(scope=Scope.APP)
    def get_tree_builder(self, avatar_service: AvatarService) -> CommentTreeBuilder:
        """Provide comment tree builder."""
        return CommentTreeBuilder(avatar_service=avatar_service)

    @provide(scope=Scope.APP)
    def get_tree_paginator(self) -> CommentTreePaginator:
        """Provide comment tree paginator."""
        return CommentTreePaginator()

    @provide
    def get_descendant_collector(
        self, comment_repository: CommentRepository
    ) -> DescendantCollector:
        """Provide descendant collector."""
        return DescendantCollector(comment_repository=comment_repository)

    @provide
    def get_parent_attacher(
        self, comment_repository: CommentRepository, avatar_service: AvatarService
    ) -> ParentAttacher:
        """Provide parent attacher."""
        return ParentAttacher(
            comment_repository=comment_repository, avatar_service=avatar_service
        )

    @provide
    def get_children_counter(
        self, comment_repository: CommentRepository
    ) -> ChildrenCounter:
        """Provide children counter."""
        return ChildrenCounter(comment_repository=comment_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        event_publisher: CommentEventPublisher,
        comment_settings: CommentSettings,
        avatar_service: AvatarService,
        tree_builder: CommentTreeBuilder,
        tree_paginator: CommentTreePaginator,
        descendant_collector: DescendantCollector,
        parent_attacher: ParentAttacher,
        children_counter: ChildrenCounter,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            event_publisher=event_publisher,
            comment_settings=comment_settings,
            avatar_service=avatar_service,
            tree_builder=tree_builder,
            tree_paginator=tree_paginator,
            descendant_collector=descendant_collector,
            parent_attacher=parent_attacher,
            children_counter=children_counter,
        )
