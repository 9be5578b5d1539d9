"""Application layer DI providers."""

from dishka import Scope, provide

from wall.adapter.realtime import ChangeFeed
from wall.application.live import FeedbackView, VoteChartView
from wall.application.usecase.feedback import (
    CreateFeedbackUseCase,
    ListFeedbackUseCase,
    TopFeedbackUseCase,
)
from wall.application.usecase.vote import CastVoteUseCase
from wall.config import ChartSettings, RealtimeSettings
from wall.domain.service import FeedbackService, VoteService
from wall.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Feedback use cases
    @provide(scope=Scope.REQUEST)
    def get_list_feedback_use_case(
        self, feedback_service: FeedbackService
    ) -> ListFeedbackUseCase:
        """Provide list feedback use case."""
        return ListFeedbackUseCase(feedback_service=feedback_service)

    @provide(scope=Scope.REQUEST)
    def get_create_feedback_use_case(
        self, feedback_service: FeedbackService
    ) -> CreateFeedbackUseCase:
        """Provide create feedback use case."""
        return CreateFeedbackUseCase(feedback_service=feedback_service)

    @provide(scope=Scope.REQUEST)
    def get_top_feedback_use_case(
        self, feedback_service: FeedbackService, chart_settings: ChartSettings
    ) -> TopFeedbackUseCase:
        """Provide top feedback chart use case."""
        return TopFeedbackUseCase(
            feedback_service=feedback_service, settings=chart_settings
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Live views (unmounted; callers mount them with ``async with``)
    @provide(scope=Scope.REQUEST)
    def get_feedback_view(
        self,
        list_feedback: ListFeedbackUseCase,
        cast_vote: CastVoteUseCase,
        create_feedback: CreateFeedbackUseCase,
        change_feed: ChangeFeed,
        realtime_settings: RealtimeSettings,
    ) -> FeedbackView:
        """Provide live feedback list view, anonymous until set_voter()."""
        return FeedbackView(
            list_feedback=list_feedback,
            cast_vote=cast_vote,
            create_feedback=create_feedback,
            change_feed=change_feed,
            settings=realtime_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_chart_view(
        self,
        top_feedback: TopFeedbackUseCase,
        change_feed: ChangeFeed,
        realtime_settings: RealtimeSettings,
    ) -> VoteChartView:
        """Provide live top feedback chart view."""
        return VoteChartView(
            top_feedback=top_feedback,
            change_feed=change_feed,
            settings=realtime_settings,
        )
