"""Unit tests for the live VoteChartView."""

import pytest

from wall.application.live import VoteChartView
from wall.domain.repository import FeedbackRepository, VoteRepository
from wall.domain.value import VoteType
from tests.conftest import eventually, make_feedback, make_vote
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestVoteChartView:
    """Tests for the chart view."""

    @pytest.mark.asyncio
    async def test_chart_follows_votes(self, unit_env):
        """New votes re-rank the chart bars."""
        # Arrange
        view = await unit_env.get(VoteChartView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        vote_repo = await unit_env.get(VoteRepository)
        first = await feedback_repo.save(make_feedback("First", minutes=2))
        second = await feedback_repo.save(make_feedback("Second", minutes=1))
        await vote_repo.save(make_vote(first.id, "alice", VoteType.UP))

        async with view:
            assert [bar.full_title for bar in view.snapshot.bars] == [
                "First",
                "Second",
            ]

            # Act
            await vote_repo.save(make_vote(second.id, "alice", VoteType.UP))
            await vote_repo.save(make_vote(second.id, "bob", VoteType.UP))

            # Assert
            await eventually(
                lambda: [bar.full_title for bar in view.snapshot.bars]
                == ["Second", "First"]
            )
            assert [bar.votes for bar in view.snapshot.bars] == [2, 1]
