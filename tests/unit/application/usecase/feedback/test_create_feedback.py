"""Unit tests for CreateFeedbackUseCase."""

import pytest

from wall.application.usecase.feedback import (
    CreateFeedbackRequest,
    CreateFeedbackUseCase,
)
from wall.domain.error import AuthenticationRequired
from wall.domain.repository import FeedbackRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateFeedback:
    """Tests for feedback submission."""

    @pytest.mark.asyncio
    async def test_returns_stored_feedback(self, unit_env):
        """Response describes the stored item."""
        # Arrange
        use_case = await unit_env.get(CreateFeedbackUseCase)
        feedback_repo = await unit_env.get(FeedbackRepository)

        # Act
        response = await use_case.execute(
            CreateFeedbackRequest(
                title="Export to CSV",
                description="  For the monthly report  ",
                user_id="alice",
            )
        )

        # Assert
        assert response.title == "Export to CSV"
        assert response.description == "For the monthly report"
        assert response.created_by == "alice"
        rows = await feedback_repo.find_all_with_votes()
        assert [str(row.id) for row in rows] == [response.feedback_id]

    @pytest.mark.asyncio
    async def test_anonymous_submission_requires_auth(self, unit_env):
        """Anonymous submissions raise AuthenticationRequired."""
        use_case = await unit_env.get(CreateFeedbackUseCase)

        with pytest.raises(AuthenticationRequired, match="submit feedback"):
            await use_case.execute(CreateFeedbackRequest(title="Export to CSV"))
