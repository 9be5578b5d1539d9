"""Integration tests for the Postgres repositories.

Require a migrated database at DATABASE__URL; run with ``pytest -m integration``.
"""

import pytest

from wall.adapter.error import ProviderError
from wall.domain.repository import FeedbackRepository, VoteRepository
from wall.domain.value import UserId, VoteType
from tests.conftest import make_feedback, make_vote
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresFeedbackRepository:
    """Tests for PostgresFeedbackRepository."""

    @pytest.mark.asyncio
    async def test_save_and_aggregate(self, integration_env):
        """Saved feedback appears in the view with its vote breakdown."""
        # Arrange
        feedback_repo = await integration_env.get(FeedbackRepository)
        vote_repo = await integration_env.get(VoteRepository)
        saved = await feedback_repo.save(make_feedback("Integration item"))
        await vote_repo.save(make_vote(saved.id, "it-alice", VoteType.UP))
        await vote_repo.save(make_vote(saved.id, "it-bob", VoteType.UP))
        await vote_repo.save(make_vote(saved.id, "it-carol", VoteType.DOWN))

        # Act
        rows = await feedback_repo.find_all_with_votes()

        # Assert
        row = next(r for r in rows if r.id == saved.id)
        assert (row.vote_count, row.upvotes, row.downvotes) == (1, 2, 1)
        assert await feedback_repo.find_by_id(saved.id) == saved


class TestPostgresVoteRepository:
    """Tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_update_and_delete(self, integration_env):
        """Polarity changes in place and deletion reports success."""
        # Arrange
        feedback_repo = await integration_env.get(FeedbackRepository)
        vote_repo = await integration_env.get(VoteRepository)
        feedback = await feedback_repo.save(make_feedback("Vote target"))
        user_id = UserId("it-dave")
        await vote_repo.save(make_vote(feedback.id, user_id, VoteType.UP))

        # Act
        updated = await vote_repo.update_vote_type(user_id, feedback.id, VoteType.DOWN)
        vote = await vote_repo.find_by_user_and_feedback(user_id, feedback.id)
        deleted = await vote_repo.delete_by_user_and_feedback(user_id, feedback.id)
        deleted_again = await vote_repo.delete_by_user_and_feedback(
            user_id, feedback.id
        )

        # Assert
        assert updated
        assert vote.vote_type is VoteType.DOWN
        assert (deleted, deleted_again) == (True, False)

    @pytest.mark.asyncio
    async def test_duplicate_vote_keeps_database_message(self, integration_env):
        """The unique constraint error is passed through as ProviderError."""
        feedback_repo = await integration_env.get(FeedbackRepository)
        vote_repo = await integration_env.get(VoteRepository)
        feedback = await feedback_repo.save(make_feedback("Duplicate target"))
        await vote_repo.save(make_vote(feedback.id, "it-erin", VoteType.UP))

        with pytest.raises(ProviderError, match="unique_vote"):
            await vote_repo.save(make_vote(feedback.id, "it-erin", VoteType.DOWN))
