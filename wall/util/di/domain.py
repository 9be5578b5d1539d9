"""Domain layer DI providers."""

from dishka import Scope, provide

from wall.config import FeedbackSettings
from wall.domain.repository import FeedbackRepository, VoteRepository
from wall.domain.service import FeedbackService, VoteService
from wall.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; one request scope spans one mounted
    view, so a view and the services behind it live and die together.
    """

    scope = Scope.REQUEST

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)

    @provide
    def get_feedback_service(
        self,
        feedback_repository: FeedbackRepository,
        vote_service: VoteService,
        feedback_settings: FeedbackSettings,
    ) -> FeedbackService:
        """Provide feedback domain service."""
        return FeedbackService(
            feedback_repository=feedback_repository,
            vote_service=vote_service,
            settings=feedback_settings,
        )
