"""End-to-end test of a mounted view against Postgres LISTEN/NOTIFY.

Requires a migrated database at DATABASE__URL; run with ``pytest -m integration``.
"""

import pytest

from wall.application.live import FeedbackView
from wall.domain.repository import FeedbackRepository
from wall.domain.value import UserId, VoteType
from tests.conftest import eventually, make_feedback
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

e2e_env = create_env_fixture(unmock={"persistence", "realtime"})


class TestLiveUpdates:
    """Tests for notification-driven refreshes."""

    @pytest.mark.asyncio
    async def test_vote_reaches_view_through_notify(self, e2e_env):
        """A vote is reflected once the trigger notification arrives."""
        # Arrange
        view = await e2e_env.get(FeedbackView)
        feedback_repo = await e2e_env.get(FeedbackRepository)
        feedback = await feedback_repo.save(make_feedback("Live item"))
        await view.set_voter(UserId("e2e-alice"))

        async with view:
            # Act
            await view.vote(feedback.id, VoteType.UP)

            # Assert
            await eventually(
                lambda: view.snapshot.user_vote(feedback.id) is VoteType.UP,
                timeout=5.0,
            )
