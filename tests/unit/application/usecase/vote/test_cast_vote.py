"""Unit tests for CastVoteUseCase."""

import pytest

from wall.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from wall.domain.error import AuthenticationRequired
from wall.domain.repository import FeedbackRepository
from wall.domain.value import VoteAction, VoteType
from tests.conftest import make_feedback
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVote:
    """Tests for vote toggling."""

    @pytest.mark.asyncio
    async def test_create_change_retract(self, unit_env):
        """up, down, down walks through create, change and retract."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        feedback_repo = await unit_env.get(FeedbackRepository)
        feedback = await feedback_repo.save(make_feedback())

        def request(vote_type: VoteType) -> CastVoteRequest:
            return CastVoteRequest(
                feedback_id=str(feedback.id), vote_type=vote_type, user_id="alice"
            )

        # Act
        created = await use_case.execute(request(VoteType.UP))
        changed = await use_case.execute(request(VoteType.DOWN))
        retracted = await use_case.execute(request(VoteType.DOWN))

        # Assert
        assert (created.action, created.vote_type) == (VoteAction.CREATE, VoteType.UP)
        assert (changed.action, changed.vote_type) == (
            VoteAction.CHANGE,
            VoteType.DOWN,
        )
        assert (retracted.action, retracted.vote_type) == (VoteAction.RETRACT, None)
        assert retracted.feedback_id == str(feedback.id)

    @pytest.mark.asyncio
    async def test_anonymous_vote_requires_auth(self, unit_env):
        """Anonymous votes raise AuthenticationRequired."""
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(AuthenticationRequired):
            await use_case.execute(
                CastVoteRequest(
                    feedback_id=str(make_feedback().id), vote_type=VoteType.UP
                )
            )
