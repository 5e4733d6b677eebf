"""Application layer DI providers."""

from dishka import Scope, provide

from devfeed.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentThreadUseCase,
    UpdateCommentUseCase,
)
from devfeed.application.usecase.feed import (
    GetPostUseCase,
    ListFeedUseCase,
    ListPollsUseCase,
)
from devfeed.application.usecase.generation import (
    IngestGeneratedPollsUseCase,
    IngestGeneratedPostsUseCase,
)
from devfeed.application.usecase.poll import GetPollResultsUseCase, SubmitVoteUseCase
from devfeed.application.usecase.power_up import TogglePowerUpUseCase
from devfeed.application.usecase.preferences import (
    ClearPreferencesUseCase,
    GetPreferencesUseCase,
    UpdatePreferencesUseCase,
)
from devfeed.application.usecase.stack import (
    ClearStackUseCase,
    GetStackUseCase,
    PopFromStackUseCase,
    PushToStackUseCase,
)
from devfeed.config import ThreadSettings
from devfeed.domain.service import (
    CommentService,
    GenerationService,
    PollService,
    PostService,
    PowerUpService,
    PreferencesService,
    StackService,
)
from devfeed.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        poll_service: PollService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            poll_service=poll_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_thread_use_case(
        self,
        comment_service: CommentService,
        power_up_service: PowerUpService,
        post_service: PostService,
        poll_service: PollService,
        thread_settings: ThreadSettings,
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            comment_service=comment_service,
            power_up_service=power_up_service,
            post_service=post_service,
            poll_service=poll_service,
            thread_settings=thread_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        power_up_service: PowerUpService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            power_up_service=power_up_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Power-up use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_power_up_use_case(
        self, power_up_service: PowerUpService
    ) -> TogglePowerUpUseCase:
        """Provide toggle power-up use case."""
        return TogglePowerUpUseCase(power_up_service=power_up_service)

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_list_feed_use_case(
        self,
        post_service: PostService,
        power_up_service: PowerUpService,
        stack_service: StackService,
        preferences_service: PreferencesService,
    ) -> ListFeedUseCase:
        """Provide list feed use case."""
        return ListFeedUseCase(
            post_service=post_service,
            power_up_service=power_up_service,
            stack_service=stack_service,
            preferences_service=preferences_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        power_up_service: PowerUpService,
        stack_service: StackService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            power_up_service=power_up_service,
            stack_service=stack_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_polls_use_case(self, poll_service: PollService) -> ListPollsUseCase:
        """Provide list polls use case."""
        return ListPollsUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(self, poll_service: PollService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_poll_results_use_case(
        self, poll_service: PollService
    ) -> GetPollResultsUseCase:
        """Provide poll results use case."""
        return GetPollResultsUseCase(poll_service=poll_service)

    # Preferences use cases
    @provide(scope=Scope.REQUEST)
    def get_get_preferences_use_case(
        self, preferences_service: PreferencesService
    ) -> GetPreferencesUseCase:
        return GetPreferencesUseCase(preferences_service=preferences_service)

    @provide(scope=Scope.REQUEST)
    def get_update_preferences_use_case(
        self, preferences_service: PreferencesService
    ) -> UpdatePreferencesUseCase:
        return UpdatePreferencesUseCase(preferences_service=preferences_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_preferences_use_case(
        self, preferences_service: PreferencesService
    ) -> ClearPreferencesUseCase:
        return ClearPreferencesUseCase(preferences_service=preferences_service)

    # Stack use cases
    @provide(scope=Scope.REQUEST)
    def get_push_to_stack_use_case(
        self, stack_service: StackService
    ) -> PushToStackUseCase:
        return PushToStackUseCase(stack_service=stack_service)

    @provide(scope=Scope.REQUEST)
    def get_pop_from_stack_use_case(
        self, stack_service: StackService
    ) -> PopFromStackUseCase:
        return PopFromStackUseCase(stack_service=stack_service)

    @provide(scope=Scope.REQUEST)
    def get_get_stack_use_case(
        self, stack_service: StackService, power_up_service: PowerUpService
    ) -> GetStackUseCase:
        return GetStackUseCase(
            stack_service=stack_service, power_up_service=power_up_service
        )

    @provide(scope=Scope.REQUEST)
    def get_clear_stack_use_case(self, stack_service: StackService) -> ClearStackUseCase:
        return ClearStackUseCase(stack_service=stack_service)

    # Generation use cases
    @provide(scope=Scope.REQUEST)
    def get_ingest_posts_use_case(
        self, generation_service: GenerationService
    ) -> IngestGeneratedPostsUseCase:
        """Provide generated posts ingestion use case."""
        return IngestGeneratedPostsUseCase(generation_service=generation_service)

    @provide(scope=Scope.REQUEST)
    def get_ingest_polls_use_case(
        self, generation_service: GenerationService
    ) -> IngestGeneratedPollsUseCase:
        """Provide generated polls ingestion use case."""
        return IngestGeneratedPollsUseCase(generation_service=generation_service)
