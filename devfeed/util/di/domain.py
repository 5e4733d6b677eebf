"""Domain layer DI providers."""

from dishka import Scope, provide

from devfeed.config import (
    AuthSettings,
    DuplicateFilterSettings,
    GenerationSettings,
    ThreadSettings,
)
from devfeed.domain.repository import (
    CommentRepository,
    PollRepository,
    PollVoteRepository,
    PostRepository,
    PowerUpRepository,
    PreferencesRepository,
    StackRepository,
)
from devfeed.domain.service import (
    CommentService,
    GenerationService,
    JWTService,
    PollService,
    PostService,
    PowerUpService,
    PreferencesService,
    StackService,
)
from devfeed.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        power_up_repository: PowerUpRepository,
        thread_settings: ThreadSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            power_up_repository=power_up_repository,
            thread_settings=thread_settings,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        power_up_repository: PowerUpRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            power_up_repository=power_up_repository,
        )

    @provide
    def get_poll_service(
        self,
        poll_repository: PollRepository,
        poll_vote_repository: PollVoteRepository,
    ) -> PollService:
        """Provide poll domain service."""
        return PollService(
            poll_repository=poll_repository,
            poll_vote_repository=poll_vote_repository,
        )

    @provide
    def get_preferences_service(
        self, preferences_repository: PreferencesRepository
    ) -> PreferencesService:
        """Provide user preferences domain service."""
        return PreferencesService(preferences_repository=preferences_repository)

    @provide
    def get_power_up_service(
        self,
        power_up_repository: PowerUpRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> PowerUpService:
        """Provide power-up domain service."""
        return PowerUpService(
            power_up_repository=power_up_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_stack_service(
        self, stack_repository: StackRepository, post_service: PostService
    ) -> StackService:
        """Provide stack domain service."""
        return StackService(stack_repository=stack_repository, post_service=post_service)

    @provide
    def get_generation_service(
        self,
        post_service: PostService,
        poll_service: PollService,
        generation_settings: GenerationSettings,
        duplicate_settings: DuplicateFilterSettings,
    ) -> GenerationService:
        """Provide generation ingestion domain service."""
        return GenerationService(
            post_service=post_service,
            poll_service=poll_service,
            generation_settings=generation_settings,
            duplicate_settings=duplicate_settings,
        )
